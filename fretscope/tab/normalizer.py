"""
Tab Normalizer - Find Tab Blocks in Pasted Text and Build the Ribbon

Pasted tabs are usually several blocks ("metarows") of six string lines,
separated by headers, chord names and lyrics:

    [Intro]
    e|-----0---|
    B|---1-----|
    ...
    E|-3-------|

    [Verse]
    e|-5-------|
    ...

This module keeps only the string lines, groups them into metarows and
glues every metarow's content for a string end to end, producing one
continuous 6-line "ribbon" spanning the whole song.
"""

import logging
import re
from typing import Dict, List

from fretscope.data.schema import NUM_STRINGS, STRING_NAMES


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# A string letter, a pipe, then something that looks like tab
TAB_LINE_PATTERN = re.compile(r'^[A-Ga-g]\|[-0-9|]')

# E is handled separately: the first E of a metarow is high E, the second low E
STRING_INDEX = {"B": 1, "G": 2, "D": 3, "A": 4}

HIGH_E = 0
LOW_E = NUM_STRINGS - 1

MIN_TAB_LINES = 3


# =============================================================================
# LINE SELECTION
# =============================================================================

def is_tab_line(line: str) -> bool:
    """True when a line starts with a string letter, a pipe and tab content."""
    return bool(TAB_LINE_PATTERN.match(line.strip()))


def find_tab_lines(text: str) -> List[str]:
    """Keep the stripped lines of text that look like tab string lines."""
    return [line.strip() for line in text.split("\n") if is_tab_line(line)]


# =============================================================================
# METAROWS
# =============================================================================

def group_into_metarows(tab_lines: List[str]) -> List[Dict[int, str]]:
    """
    Group tab lines into metarows, one pass across the six strings each.

    Each metarow maps a string index (0 = high E ... 5 = low E) to the
    content after that line's pipe. E lines alternate between high and
    low E; a new metarow starts whenever a high E arrives and the current
    one already holds something. Letters with no string (C, F) are dropped.
    """
    metarows = []
    current: Dict[int, str] = {}
    seen_high_e = False

    for line in tab_lines:
        line = line.strip()
        if not is_tab_line(line):
            continue

        letter, content = line.split("|", 1)
        letter = letter.upper()

        if letter == "E":
            string_index = LOW_E if seen_high_e else HIGH_E
            seen_high_e = not seen_high_e
        elif letter in STRING_INDEX:
            string_index = STRING_INDEX[letter]
        else:
            logger.debug(f"Dropping line with no matching string: {line[:20]!r}")
            continue

        if string_index == HIGH_E and current:
            metarows.append(current)
            current = {}

        current[string_index] = content

    if current:
        metarows.append(current)

    return metarows


def concatenate_metarows(metarows: List[Dict[int, str]]) -> List[str]:
    """
    Join metarows horizontally into six ribbon lines.

    A string missing from a metarow contributes nothing for that block,
    so its later content shifts left relative to the other strings.
    """
    if not metarows:
        return []

    contents = ["" for _ in range(NUM_STRINGS)]
    for metarow in metarows:
        if len(metarow) < NUM_STRINGS:
            missing = [i for i in range(NUM_STRINGS) if i not in metarow]
            logger.warning(f"Metarow is missing string(s) {missing}; columns may not line up")
        for string_index in range(NUM_STRINGS):
            contents[string_index] += metarow.get(string_index, "")

    return [f"{name}|{content}" for name, content in zip(STRING_NAMES, contents)]


# =============================================================================
# PUBLIC API
# =============================================================================

def extract_tab_content(text: str) -> str:
    """
    Extract the tab from pasted text as one continuous 6-line ribbon.

    Args:
        text: Raw pasted text, possibly with headers, chords and lyrics

    Returns:
        Six newline-separated lines prefixed E|, B|, G|, D|, A|, E|,
        or '' when the text holds no tab lines

    Example:
        >>> extract_tab_content("Intro\\ne|-0-|\\nB|-1-|")
        'E|-0-|\\nB|-1-|\\nG|\\nD|\\nA|\\nE|'
    """
    if not text or not text.strip():
        return ""

    tab_lines = find_tab_lines(text)
    if not tab_lines:
        logger.warning("No tab lines found in the pasted text")
        return ""

    metarows = group_into_metarows(tab_lines)
    ribbon = concatenate_metarows(metarows)

    logger.debug(
        f"Built ribbon from {len(tab_lines)} tab lines in {len(metarows)} metarows, "
        f"width {max((len(line) - 2 for line in ribbon), default=0)}"
    )
    return "\n".join(ribbon)


def is_valid_tab_text(text: str) -> bool:
    """
    Check that text looks like a guitar tab.

    Needs at least 3 non-empty lines, every one of them a string letter
    plus pipe plus tab content, and at least one tab character somewhere.
    """
    if not text or not text.strip():
        return False

    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if len(lines) < MIN_TAB_LINES:
        return False

    all_have_string_identifiers = all(TAB_LINE_PATTERN.match(line) for line in lines)
    has_tab_characters = any(re.search(r'[-|0-9]', line) for line in lines)

    return all_have_string_identifiers and has_tab_characters
