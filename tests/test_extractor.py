"""
Unit tests for fretscope/tab/extractor.py - unique positions and note events.
"""

import pytest

from fretscope.data.schema import TabPosition
from fretscope.tab.extractor import (
    content_lines, find_unique_character_positions, format_steps,
    parse_notes_at_column, parse_steps, with_note_names,
)


def make_ribbon(*contents):
    """Build a ribbon from up to six content strings (high E first)."""
    names = ["E", "B", "G", "D", "A", "E"]
    padded = list(contents) + ["-" * len(contents[0])] * (6 - len(contents))
    return "\n".join(f"{name}|{content}" for name, content in zip(names, padded))


class TestContentLines:
    """Tests for content_lines()"""

    def test_strips_prefix(self):
        """Everything after the first pipe is content"""
        assert content_lines("E|-1-|-2-\nB|-3-|-4-") == ["-1-|-2-", "-3-|-4-"]

    def test_empty(self):
        """Empty ribbon, no content"""
        assert content_lines("") == []


class TestFindUniquePositions:
    """Tests for find_unique_character_positions()"""

    def test_single_and_double_digits(self, multi_digit_ribbon):
        """A 5 at column 4 and a 12 at column 12"""
        positions = find_unique_character_positions(multi_digit_ribbon)
        assert positions == [TabPosition(column=4, width=1), TabPosition(column=12, width=2)]

    def test_claimed_columns_not_reported(self, multi_digit_ribbon):
        """Nothing between the numbers or after the 12"""
        columns = [p.column for p in find_unique_character_positions(multi_digit_ribbon)]
        assert not set(columns) & set(range(5, 12))
        assert not set(columns) & {13, 14, 15}

    def test_width_is_widest_string(self):
        """One string shows 5, another 12, from the same column"""
        positions = find_unique_character_positions(make_ribbon("-5--", "-12-"))
        assert positions == [TabPosition(column=1, width=2)]

    def test_techniques_ignored(self):
        """h, p, b, / and ~ never make a position"""
        positions = find_unique_character_positions(make_ribbon("-5h7p5-b/~x"))
        assert [p.column for p in positions] == [1, 3, 5]

    def test_chord_is_one_position(self):
        """Stacked notes share one position"""
        ribbon = make_ribbon("--0--", "--1--", "--0--", "--2--", "--3--", "-----")
        assert find_unique_character_positions(ribbon) == [TabPosition(column=2, width=1)]

    def test_positions_strictly_increasing(self, two_block_tab):
        """Positions never overlap"""
        from fretscope.tab.normalizer import extract_tab_content
        positions = find_unique_character_positions(extract_tab_content(two_block_tab))
        for before, after in zip(positions, positions[1:]):
            assert before.end <= after.column

    def test_uneven_line_lengths(self):
        """Short lines are treated as padded"""
        ribbon = "E|-1\nB|-----7\nG|--\nD|--\nA|--\nE|--"
        assert [p.column for p in find_unique_character_positions(ribbon)] == [1, 5]

    def test_empty(self):
        """No ribbon, no positions"""
        assert find_unique_character_positions("") == []
        assert find_unique_character_positions(make_ribbon("------")) == []


class TestParseNotesAtColumn:
    """Tests for parse_notes_at_column()"""

    def test_single_note(self, multi_digit_ribbon):
        """A 5 on string 0 and dashes elsewhere"""
        events = parse_notes_at_column(multi_digit_ribbon, 4)
        assert [(e.string_index, e.fret) for e in events] == [(0, 5)]
        assert events[0].column == 4
        assert events[0].width == 1

    def test_multi_digit(self, multi_digit_ribbon):
        """Both digits of 12 are read"""
        events = parse_notes_at_column(multi_digit_ribbon, 12)
        assert [(e.string_index, e.fret, e.width) for e in events] == [(0, 12, 2)]

    def test_chord_in_string_order(self):
        """Every fretted string, high E first"""
        ribbon = make_ribbon("--0--", "--1--", "--0--", "--2--", "--3--", "-----")
        events = parse_notes_at_column(ribbon, 2)
        assert [(e.string_index, e.fret) for e in events] == [
            (0, 0), (1, 1), (2, 0), (3, 2), (4, 3),
        ]

    def test_widths_differ_per_string(self):
        """5 and 12 from the same column"""
        events = parse_notes_at_column(make_ribbon("-5--", "-12-"), 1)
        assert [(e.fret, e.width) for e in events] == [(5, 1), (12, 2)]

    def test_out_of_range(self, multi_digit_ribbon):
        """Columns outside the ribbon give nothing"""
        assert parse_notes_at_column(multi_digit_ribbon, 500) == []
        assert parse_notes_at_column(multi_digit_ribbon, -1) == []
        assert parse_notes_at_column("", 0) == []

    def test_dash_column(self, multi_digit_ribbon):
        """A column of dashes has no events"""
        assert parse_notes_at_column(multi_digit_ribbon, 0) == []


class TestSteps:
    """Tests for with_note_names(), parse_steps() and format_steps()"""

    def test_note_names(self):
        """Open A chord shape notes"""
        ribbon = make_ribbon("--0--", "--2--", "--2--", "--2--", "--0--", "-----")
        events = with_note_names(parse_notes_at_column(ribbon, 2))
        assert [e.note for e in events] == ["E", "C#", "A", "E", "A"]

    def test_parse_steps(self):
        """One step per unique position"""
        steps = parse_steps(make_ribbon("-0-3-"))
        assert [s.column for s in steps] == [1, 3]
        assert [s.events[0].note for s in steps] == ["E", "G"]

    def test_format_steps(self):
        """Readable report"""
        report = format_steps(parse_steps(make_ribbon("-0-")))
        assert "Step 1 (Column 1):" in report
        assert "  String 0 (E): Fret 0 (E)" in report


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
