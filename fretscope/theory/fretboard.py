"""
Fretboard Module - Tuning Table and Position Lookup

Maps (string, fret) pairs to notes on a standard-tuned 6-string guitar and
enumerates every fretboard cell that sounds one of a set of notes.

String order is high E first:
    0 = E4, 1 = B3, 2 = G3, 3 = D3, 4 = A2, 5 = E2
"""

import logging
from typing import Iterable, List

from fretscope.data.schema import NUM_STRINGS, FretPosition, NoteWithOctave, TuningEntry
from fretscope.errors import InvalidString
from fretscope.theory.notes import NOTE_NAMES, ScaleStyle, scale_notes


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

STANDARD_TUNING = (
    TuningEntry(string_index=0, open_note="E", open_pitch=64),
    TuningEntry(string_index=1, open_note="B", open_pitch=59),
    TuningEntry(string_index=2, open_note="G", open_pitch=55),
    TuningEntry(string_index=3, open_note="D", open_pitch=50),
    TuningEntry(string_index=4, open_note="A", open_pitch=45),
    TuningEntry(string_index=5, open_note="E", open_pitch=40),
)

DEFAULT_MAX_FRET = 16


# =============================================================================
# NOTE LOOKUP
# =============================================================================

def tuning_entry(string_index: int) -> TuningEntry:
    """Look up a string in the tuning table (0 = high E ... 5 = low E)."""
    if not 0 <= string_index < NUM_STRINGS:
        raise InvalidString(
            f"String index must be 0-{NUM_STRINGS - 1}. Got: {string_index}"
        )
    return STANDARD_TUNING[string_index]


def pitch_at_fret(string_index: int, fret: int) -> int:
    """MIDI pitch sounded by a string at a fret."""
    return tuning_entry(string_index).open_pitch + fret


def note_at_fret(string_index: int, fret: int) -> str:
    """Get the note name at a given fret on a given string."""
    open_index = NOTE_NAMES.index(tuning_entry(string_index).open_note)
    return NOTE_NAMES[(open_index + fret) % 12]


def note_with_octave_at_fret(string_index: int, fret: int) -> NoteWithOctave:
    """
    Get the note name and octave at a given fret.

    MIDI pitch 0 is C-1, so octave = pitch // 12 - 1 (open high E is E4).
    """
    pitch = pitch_at_fret(string_index, fret)
    return NoteWithOctave(note=note_at_fret(string_index, fret), octave=pitch // 12 - 1)


# =============================================================================
# POSITION INDEX
# =============================================================================

def scale_positions(notes: Iterable[str], max_fret: int = DEFAULT_MAX_FRET) -> List[FretPosition]:
    """
    Find every fretboard position that sounds one of the given notes.

    Positions are ordered string by string (high E first), then by fret
    from 0 up to and including max_fret.

    Args:
        notes: Note names to look for (duplicates are harmless)
        max_fret: Highest fret to check

    Returns:
        List of FretPosition
    """
    wanted = set(notes)
    positions = []

    for entry in STANDARD_TUNING:
        for fret in range(max_fret + 1):
            note = note_at_fret(entry.string_index, fret)
            if note in wanted:
                positions.append(
                    FretPosition(string_index=entry.string_index, fret=fret, note=note)
                )

    logger.debug(f"Found {len(positions)} positions for {sorted(wanted)} up to fret {max_fret}")
    return positions


def pentatonic_plus_positions(key: str, max_fret: int = DEFAULT_MAX_FRET) -> List[FretPosition]:
    """
    Positions of the 4th and 7th degrees of a major key.

    These are the two notes the major pentatonic leaves out; any cell
    already covered by the major-pentatonic overlay is skipped.
    """
    major = scale_notes(key, ScaleStyle.MAJOR)
    fourth, seventh = major[3], major[6]

    taken = {
        pos.key for pos in scale_positions(scale_notes(key, ScaleStyle.PENTATONIC_MAJOR), max_fret)
    }
    candidates = scale_positions([fourth], max_fret) + scale_positions([seventh], max_fret)
    return [pos for pos in candidates if pos.key not in taken]
