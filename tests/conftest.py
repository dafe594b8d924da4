"""Shared tab fixtures."""

import pytest


TWO_BLOCK_TAB = """Song: Test Song
Artist: Nobody
Tuning: Standard

[Intro]
e|---0---|
B|---1---|
G|---0---|
D|---2---|
A|---3---|
E|-------|

Some lyrics in between the blocks
e|--5--|
B|--5--|
G|--5--|
D|--7--|
A|--7--|
E|--5--|
"""

MULTI_DIGIT_RIBBON = "\n".join([
    "E|----5-------12--",
    "B|----------------",
    "G|----------------",
    "D|----------------",
    "A|----------------",
    "E|----------------",
])


@pytest.fixture
def two_block_tab():
    return TWO_BLOCK_TAB


@pytest.fixture
def multi_digit_ribbon():
    return MULTI_DIGIT_RIBBON
