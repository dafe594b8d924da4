"""
Tab Event Extractor - Read Note Events out of the Ribbon

Scans the normalized 6-line ribbon column by column. A column is a
"unique position" when at least one string has a fret number starting
there; multi-digit frets (10, 12, 15...) claim the columns they cover so
they are never reported twice.

Only digits count. Technique letters (h, p, b, s, /, ~, x) never start a
position and never produce an event.
"""

import logging
import re
from typing import List

from fretscope.data.schema import NUM_STRINGS, STRING_NAMES, TabNoteEvent, TabPosition, TabStep
from fretscope.theory.fretboard import note_at_fret


logger = logging.getLogger(__name__)

STRING_PREFIX_PATTERN = re.compile(r'^[A-Ga-g]\|')

DIGITS = frozenset("0123456789")


# =============================================================================
# HELPERS
# =============================================================================

def content_lines(ribbon: str) -> List[str]:
    """Strip the 'E|' style prefix from each ribbon line (at most six)."""
    if not ribbon or not ribbon.strip():
        return []

    lines = [line for line in ribbon.split("\n") if line.strip()]
    contents = []
    for line in lines:
        if not STRING_PREFIX_PATTERN.match(line.strip()):
            continue
        contents.append(line[line.index("|") + 1:])
    return contents[:NUM_STRINGS]


def digit_run(line: str, column: int) -> str:
    """The consecutive digits starting at column ('' if none)."""
    end = column
    while end < len(line) and line[end] in DIGITS:
        end += 1
    return line[column:end]


# =============================================================================
# UNIQUE POSITIONS
# =============================================================================

def find_unique_character_positions(ribbon: str) -> List[TabPosition]:
    """
    Find every column where at least one string has a fret number.

    Each position's width is the longest digit run starting at that
    column across all strings. The columns after the first one inside
    that width are claimed and skipped.

    Example:
        For the content line "----5-------12--" this returns
        [TabPosition(column=4, width=1), TabPosition(column=12, width=2)].
    """
    lines = content_lines(ribbon)
    if not lines:
        return []

    max_length = max(len(line) for line in lines)
    claimed = set()
    positions = []

    for column in range(max_length):
        if column in claimed:
            continue

        widths = [len(digit_run(line, column)) for line in lines]
        if not any(widths):
            continue

        width = max(widths)
        positions.append(TabPosition(column=column, width=width))
        claimed.update(range(column + 1, column + width))

    logger.debug(f"Found {len(positions)} unique positions across {max_length} columns")
    return positions


# =============================================================================
# NOTE EVENTS
# =============================================================================

def parse_notes_at_column(ribbon: str, column: int) -> List[TabNoteEvent]:
    """
    Read the fretted notes that start at a column, high E first.

    Each string reads its own digit run, so one string can show "5"
    while another shows "12" from the same column. Strings with anything
    other than a digit there contribute nothing, and a column outside
    the ribbon simply yields no events.
    """
    if column < 0:
        return []

    events = []
    for string_index, line in enumerate(content_lines(ribbon)):
        if column >= len(line):
            continue
        digits = digit_run(line, column)
        if digits:
            events.append(
                TabNoteEvent(string_index=string_index, fret=int(digits), column=column, width=len(digits))
            )
    return events


def with_note_names(events: List[TabNoteEvent]) -> List[TabNoteEvent]:
    """Copy events with their note names filled in from the tuning table."""
    return [
        event.model_copy(update={"note": note_at_fret(event.string_index, event.fret)})
        for event in events
    ]


def parse_steps(ribbon: str) -> List[TabStep]:
    """Every unique position of the ribbon with its named note events."""
    steps = []
    for position in find_unique_character_positions(ribbon):
        events = with_note_names(parse_notes_at_column(ribbon, position.column))
        steps.append(TabStep(column=position.column, width=position.width, events=events))
    return steps


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_steps(steps: List[TabStep]) -> str:
    """Format parsed steps as a human-readable report."""
    lines = []
    for number, step in enumerate(steps, 1):
        lines.append(f"Step {number} (Column {step.column}):")
        for event in step.events:
            note = event.note or note_at_fret(event.string_index, event.fret)
            lines.append(
                f"  String {event.string_index} ({STRING_NAMES[event.string_index]}): "
                f"Fret {event.fret} ({note})"
            )
        lines.append("")
    return "\n".join(lines)
