"""
Notes Module - Note Names, Scale Styles and Key Functions

This module encodes the pitch-class side of the theory engine:
    1. The 12 canonical note names (sharps only)
    2. Scale styles as semitone offsets from a root
    3. Building the notes of a scale from any root
    4. Labelling a note by its degree in a major key
"""

from enum import Enum
from typing import Dict, List, Optional

from fretscope.data.schema import NOTE_NAMES
from fretscope.errors import InvalidRoot, InvalidStyle


# =============================================================================
# CONSTANTS
# =============================================================================

# Every key a user can pick is one of the 12 note names
KEYS = list(NOTE_NAMES)

DEGREE_LABELS = ["1", "2", "3", "4", "5", "6", "7"]


class ScaleStyle(str, Enum):
    """The scale styles the fretboard overlay can draw."""
    PENTATONIC = "pentatonic"
    PENTATONIC_MAJOR = "pentatonic-major"
    PENTATONIC_MINOR = "pentatonic-minor"
    MAJOR = "major"
    MINOR = "minor"
    DORIAN = "dorian"
    MIXOLYDIAN = "mixolydian"
    BLUES = "blues"


# Scale formulas as semitone intervals from the root.
# Plain "pentatonic" is the minor pentatonic.
SCALE_PATTERNS: Dict[ScaleStyle, List[int]] = {
    ScaleStyle.PENTATONIC: [0, 3, 5, 7, 10],
    ScaleStyle.PENTATONIC_MAJOR: [0, 2, 4, 7, 9],
    ScaleStyle.PENTATONIC_MINOR: [0, 3, 5, 7, 10],
    ScaleStyle.MAJOR: [0, 2, 4, 5, 7, 9, 11],        # W-W-H-W-W-W-H
    ScaleStyle.MINOR: [0, 2, 3, 5, 7, 8, 10],        # W-H-W-W-H-W-W
    ScaleStyle.DORIAN: [0, 2, 3, 5, 7, 9, 10],
    ScaleStyle.MIXOLYDIAN: [0, 2, 4, 5, 7, 9, 10],
    ScaleStyle.BLUES: [0, 3, 5, 6, 7, 10],
}

SCALE_STYLES = [style.value for style in ScaleStyle]


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def note_index(note: str) -> int:
    """Get the index of a note in the chromatic scale (0-11)."""
    try:
        return NOTE_NAMES.index(note)
    except ValueError:
        raise InvalidRoot(
            f"Unknown note: '{note}'. Valid notes are: {NOTE_NAMES}"
        ) from None


def transpose(note: str, semitones: int) -> str:
    """Move a note up (or down, for negative values) by semitones."""
    return NOTE_NAMES[(note_index(note) + semitones) % 12]


def to_scale_style(style) -> ScaleStyle:
    """Coerce a style name (or ScaleStyle) into a ScaleStyle."""
    try:
        return ScaleStyle(style)
    except ValueError:
        raise InvalidStyle(
            f"Invalid scale style: '{style}'. Valid styles are: {SCALE_STYLES}"
        ) from None


def scale_notes(root: str, style=ScaleStyle.PENTATONIC) -> List[str]:
    """
    Build the notes of a scale from a root note.

    Notes come back in pattern order, not pitch order, so the first
    entry is always the root.

    Args:
        root: One of NOTE_NAMES (e.g., "C", "F#")
        style: A ScaleStyle or its string value (e.g., "major")

    Returns:
        List of note names

    Raises:
        InvalidRoot: root is not one of the 12 canonical names
        InvalidStyle: style is not a known scale style
    """
    root_index = note_index(root)
    pattern = SCALE_PATTERNS[to_scale_style(style)]
    return [NOTE_NAMES[(root_index + offset) % 12] for offset in pattern]


def key_function(note: str, key: str) -> Optional[str]:
    """
    Get the function of a note within a major key ('1' through '7').

    Returns None when the note is not diatonic to the key, or when
    either name is not a canonical note.
    """
    if note not in NOTE_NAMES or key not in NOTE_NAMES:
        return None

    major = scale_notes(key, ScaleStyle.MAJOR)
    if note not in major:
        return None
    return DEGREE_LABELS[major.index(note)]
