"""
Chords Module - Chord Tones, Chord Functions and Context Chords

This module builds chords on top of the note and fretboard helpers:
    1. Chord tones for any root and voicing (with diatonic sus4 in a key)
    2. Function labels for a note inside a chord or a key
    3. The seven diatonic seventh chords of a major key
    4. The "context chord" picked from a key by degree, flavor and the
       flatten-root toggle, with its name and roman numeral
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from fretscope.data.schema import ContextChord, FretPosition, SeventhChord
from fretscope.errors import InvalidDegree, InvalidVoicing
from fretscope.theory.fretboard import DEFAULT_MAX_FRET, scale_positions
from fretscope.theory.notes import (
    NOTE_NAMES,
    ScaleStyle,
    key_function,
    note_index,
    scale_notes,
    transpose,
)


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

class Voicing(str, Enum):
    """Named chord-tone interval patterns."""
    MAJOR = "Major"
    MAJ7 = "maj7"
    DOMINANT7 = "7"
    MINOR = "minor"
    M7 = "m7"
    DIMINISHED = "diminished"
    HALF_DIMINISHED = "half-diminished"
    DIMINISHED7 = "diminished7"
    SUS2 = "sus2"
    SUS4 = "sus4"


CHORD_PATTERNS: Dict[Voicing, List[int]] = {
    Voicing.MAJOR: [0, 4, 7],                # 1, 3, 5
    Voicing.MAJ7: [0, 4, 7, 11],             # 1, 3, 5, 7
    Voicing.DOMINANT7: [0, 4, 7, 10],        # 1, 3, 5, b7
    Voicing.MINOR: [0, 3, 7],                # 1, b3, 5
    Voicing.M7: [0, 3, 7, 10],               # 1, b3, 5, b7
    Voicing.DIMINISHED: [0, 3, 6],           # 1, b3, b5
    Voicing.HALF_DIMINISHED: [0, 3, 6, 10],  # 1, b3, b5, b7
    Voicing.DIMINISHED7: [0, 3, 6, 9],       # 1, b3, b5, bb7
    Voicing.SUS2: [0, 2, 7],                 # 1, 2, 5
    Voicing.SUS4: [0, 5, 7],                 # 1, 4, 5
}

# Semitones above the chord root -> degree with accidental
SEMITONE_FUNCTIONS = {
    0: "1", 1: "b2", 2: "2", 3: "b3", 4: "3", 5: "4",
    6: "b5", 7: "5", 8: "#5", 9: "6", 10: "b7", 11: "7",
}

SUS_FUNCTIONS = {
    Voicing.SUS2: {0: "1", 2: "2", 7: "5"},
    Voicing.SUS4: {0: "1", 5: "4", 7: "5"},
}

# Diatonic seventh chords of a major key, one per scale degree
ROMAN_DEGREES = ["I", "ii", "iii", "IV", "V", "vi", "vii"]
SEVENTH_VOICINGS = [
    Voicing.MAJ7, Voicing.M7, Voicing.M7, Voicing.MAJ7,
    Voicing.DOMINANT7, Voicing.M7, Voicing.HALF_DIMINISHED,
]

# Suffix appended to a root note to name the chord
CHORD_NAME_SUFFIXES = {
    Voicing.MAJOR: "",
    Voicing.MAJ7: "maj7",
    Voicing.DOMINANT7: "7",
    Voicing.MINOR: "m",
    Voicing.M7: "m7",
    Voicing.DIMINISHED: "°",
    Voicing.HALF_DIMINISHED: "°",
    Voicing.DIMINISHED7: "°7",
    Voicing.SUS2: "sus2",
    Voicing.SUS4: "sus4",
}

MINOR_VOICINGS = {Voicing.MINOR, Voicing.M7}
DIMINISHED_VOICINGS = {Voicing.DIMINISHED, Voicing.HALF_DIMINISHED, Voicing.DIMINISHED7}

# Default flavor for a diatonic chord when shown as a seventh or as a triad
SEVENTH_FLAVORS = {
    Voicing.MAJ7: Voicing.MAJ7,
    Voicing.M7: Voicing.M7,
    Voicing.DOMINANT7: Voicing.DOMINANT7,
    Voicing.HALF_DIMINISHED: Voicing.HALF_DIMINISHED,
}
TRIAD_FLAVORS = {
    Voicing.MAJ7: Voicing.MAJOR,
    Voicing.DOMINANT7: Voicing.MAJOR,
    Voicing.M7: Voicing.MINOR,
    Voicing.HALF_DIMINISHED: Voicing.DIMINISHED,
}

# Flavor button names that are not voicing values
FLAVOR_ALIASES = {"dim": Voicing.HALF_DIMINISHED}


class DisplayMode(str, Enum):
    """What to print inside a highlighted fretboard cell."""
    NOTE = "note"
    CHORD = "chord"
    KEY = "key"


# =============================================================================
# CHORD TONES
# =============================================================================

def to_voicing(voicing) -> Voicing:
    """Coerce a voicing name (or Voicing) into a Voicing."""
    if isinstance(voicing, str) and voicing in FLAVOR_ALIASES:
        return FLAVOR_ALIASES[voicing]
    try:
        return Voicing(voicing)
    except ValueError:
        raise InvalidVoicing(
            f"Invalid voicing: '{voicing}'. Valid voicings are: {[v.value for v in Voicing]}"
        ) from None


def chord_notes(
    root: str,
    voicing,
    flatten_fifth: bool = False,
    key_context: Optional[str] = None
) -> List[str]:
    """
    Get the notes of a chord.

    A sus4 chord inside a key takes its 4th from the key's major scale
    (three scale steps above the root) instead of a fixed 5 semitones,
    so e.g. F sus4 in the key of C gets B rather than A#.

    Args:
        root: Root note (e.g., 'C', 'D#')
        voicing: A Voicing or its value (e.g., 'Major', 'm7', '7')
        flatten_fifth: Lower any perfect fifth (7 semitones) to 6
        key_context: Optional key for a diatonic sus4

    Returns:
        List of note names, root first

    Raises:
        InvalidRoot: root (or key_context) is not a canonical note name
        InvalidVoicing: voicing is not known
    """
    root_index = note_index(root)
    voicing = to_voicing(voicing)
    pattern = CHORD_PATTERNS[voicing]

    if voicing is Voicing.SUS4 and key_context:
        key_scale = scale_notes(key_context, ScaleStyle.MAJOR)
        if root in key_scale:
            fourth = key_scale[(key_scale.index(root) + 3) % len(key_scale)]
            fifth_offset = 6 if flatten_fifth else 7
            return [root, fourth, NOTE_NAMES[(root_index + fifth_offset) % 12]]
        logger.debug(f"{root} is not diatonic to {key_context}; using a fixed-interval sus4")

    notes = []
    for interval in pattern:
        if flatten_fifth and interval == 7:
            interval = 6
        notes.append(NOTE_NAMES[(root_index + interval) % 12])
    return notes


def chord_positions(
    root: str,
    voicing,
    flatten_fifth: bool = False,
    max_fret: int = DEFAULT_MAX_FRET
) -> List[FretPosition]:
    """Get all fret positions that sound a tone of the chord."""
    return scale_positions(chord_notes(root, voicing, flatten_fifth), max_fret)


# =============================================================================
# FUNCTION LABELS
# =============================================================================

def chord_function(note: str, chord_root: str, voicing) -> Optional[str]:
    """
    Get the function of a note within a chord (e.g., '1', 'b3', '5', 'b7').

    sus2 and sus4 chords label their tones 1/2/5 and 1/4/5. Other chord
    tones are labelled from their semitone distance to the root.

    Returns None when the note is not a tone of the chord's pattern, or
    when the note, root or voicing is unknown. A diatonic sus4 whose 4th
    is an augmented 4th (F sus4 in C) therefore leaves that 4th unlabelled.
    """
    if note not in NOTE_NAMES or chord_root not in NOTE_NAMES:
        return None
    try:
        voicing = to_voicing(voicing)
    except InvalidVoicing:
        return None

    semitones = (NOTE_NAMES.index(note) - NOTE_NAMES.index(chord_root)) % 12

    if voicing in SUS_FUNCTIONS and semitones in SUS_FUNCTIONS[voicing]:
        return SUS_FUNCTIONS[voicing][semitones]

    if semitones not in CHORD_PATTERNS[voicing]:
        return None

    return SEMITONE_FUNCTIONS[semitones]


def position_label(
    position: FretPosition,
    mode=DisplayMode.NOTE,
    chord: Optional[ContextChord] = None,
    key: Optional[str] = None
) -> Optional[str]:
    """
    Label for a highlighted fretboard cell under a display mode.

    Chord mode with no chord selected has nothing to show and returns None.
    """
    mode = DisplayMode(mode)
    if mode is DisplayMode.CHORD:
        if chord is None:
            return None
        return chord_function(position.note, chord.root, chord.voicing)
    if mode is DisplayMode.KEY and key:
        return key_function(position.note, key)
    return position.note


# =============================================================================
# CHORDS FROM A KEY
# =============================================================================

def seventh_chords_from_key(key: str) -> List[SeventhChord]:
    """Get the 7 chords of a major key as seventh chords (jazz style)."""
    chords = []
    for degree, note, voicing in zip(ROMAN_DEGREES, scale_notes(key, ScaleStyle.MAJOR), SEVENTH_VOICINGS):
        suffix = "ø7" if voicing is Voicing.HALF_DIMINISHED else voicing.value
        chords.append(SeventhChord(degree=degree, note=note, voicing=voicing.value, label=f"{note}{suffix}"))
    return chords


def default_flavor(voicing, use_sevenths: bool = True) -> Voicing:
    """Flavor a diatonic seventh chord falls back to when none is chosen."""
    voicing = to_voicing(voicing)
    table = SEVENTH_FLAVORS if use_sevenths else TRIAD_FLAVORS
    return table.get(voicing, voicing)


def chord_name(root: str, voicing) -> str:
    """Name a chord from its root and voicing (e.g., 'C' + m7 -> 'Cm7')."""
    return f"{root}{CHORD_NAME_SUFFIXES[to_voicing(voicing)]}"


def roman_numeral(degree: str, voicing, flattened: bool = False) -> str:
    """
    Roman numeral label for a chord on a degree.

    Minor and diminished voicings lower-case the numeral, a flattened
    root gets a 'b' prefix, and the voicing suffix goes last.
    """
    voicing = to_voicing(voicing)
    numeral = degree
    if voicing in MINOR_VOICINGS or voicing in DIMINISHED_VOICINGS:
        numeral = numeral.lower()
    if flattened:
        numeral = f"b{numeral}"
    return f"{numeral}{CHORD_NAME_SUFFIXES[voicing]}"


def build_context_chord(
    key: str,
    degree: str,
    use_sevenths: bool = True,
    flavor=None,
    flatten_root: bool = False
) -> ContextChord:
    """
    Build the chord picked from a key by degree.

    Args:
        key: Key of the context (e.g., 'C')
        degree: Roman degree, one of ROMAN_DEGREES
        use_sevenths: Default to seventh chords instead of triads
        flavor: Optional voicing overriding the degree's default
        flatten_root: Lower the root by one semitone

    Returns:
        ContextChord with notes, name and roman numeral

    Example:
        >>> build_context_chord("C", "I", flatten_root=True).roman
        'bviimaj7'
    """
    chords = seventh_chords_from_key(key)
    selected = next((chord for chord in chords if chord.degree == degree), None)
    if selected is None:
        raise InvalidDegree(f"Degree must be one of {ROMAN_DEGREES}. Got: '{degree}'")

    voicing = to_voicing(flavor) if flavor else default_flavor(selected.voicing, use_sevenths)

    root = transpose(selected.note, -1) if flatten_root else selected.note

    # The numeral follows the root: a flattened root may land on another degree
    landed = next((chord for chord in chords if chord.note == root), selected)

    notes = chord_notes(root, voicing, key_context=key)
    chord = ContextChord(
        root=root,
        voicing=voicing.value,
        degree=selected.degree,
        notes=notes,
        name=chord_name(root, voicing),
        roman=roman_numeral(landed.degree, voicing, flattened=flatten_root),
        flattened=flatten_root,
    )
    logger.debug(f"Context chord in {key}: {chord.name} ({chord.roman}) -> {chord.notes}")
    return chord


def context_chord_positions(chord: ContextChord, max_fret: int = DEFAULT_MAX_FRET) -> List[FretPosition]:
    """Map a context chord's notes onto the fretboard."""
    return scale_positions(chord.notes, max_fret)
