"""
Theory Subpackage

    - notes.py: Note names, scale styles, scale notes, key functions
    - fretboard.py: Standard tuning table and fretboard position lookup
    - chords.py: Chord tones, chord functions and chords from a key

Usage:
    from fretscope.theory import scale_notes, scale_positions

    positions = scale_positions(scale_notes("A", "pentatonic"), max_fret=12)
"""

from fretscope.theory.notes import (
    KEYS,
    NOTE_NAMES,
    SCALE_STYLES,
    ScaleStyle,
    key_function,
    scale_notes,
)
from fretscope.theory.fretboard import (
    STANDARD_TUNING,
    note_at_fret,
    note_with_octave_at_fret,
    pentatonic_plus_positions,
    scale_positions,
)
from fretscope.theory.chords import (
    DisplayMode,
    Voicing,
    build_context_chord,
    chord_function,
    chord_notes,
    chord_positions,
    context_chord_positions,
    position_label,
    seventh_chords_from_key,
)
