"""
Schema definitions for fretscope.

This module defines the Pydantic models passed between the tab parser,
the theory engine and whatever renders the fretboard. All of them are
frozen: a position or event is recomputed, never edited in place.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


NUM_STRINGS = 6

# The 12 pitch classes, sharps only. Index = semitones above C.
NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Canonical string letters, high E first
STRING_NAMES = ["E", "B", "G", "D", "A", "E"]


# =============================================================================
# HELPER FUNCTION
# =============================================================================

def _check_note_name(v: str) -> str:
    if v not in NOTE_NAMES:
        raise ValueError(
            f"Note must be one of {NOTE_NAMES}. Got: '{v}'"
        )
    return v


# =============================================================================
# FRETBOARD MODELS
# =============================================================================

class TuningEntry(BaseModel):
    """One open string of the tuning table."""
    model_config = ConfigDict(frozen=True)

    string_index: int = Field(..., ge=0, le=NUM_STRINGS - 1)
    open_note: str
    open_pitch: int = Field(..., ge=0, le=127, description="MIDI pitch of the open string")

    @field_validator('open_note')
    @classmethod
    def validate_open_note(cls, v: str) -> str:
        return _check_note_name(v)


class FretPosition(BaseModel):
    """
    A (string, fret) pair on the fretboard with the note it sounds.

    Example:
        >>> FretPosition(string_index=0, fret=3, note="G")
    """
    model_config = ConfigDict(frozen=True)

    string_index: int = Field(..., ge=0, le=NUM_STRINGS - 1)
    fret: int = Field(..., ge=0)
    note: str

    @field_validator('note')
    @classmethod
    def validate_note(cls, v: str) -> str:
        return _check_note_name(v)

    @property
    def key(self) -> str:
        """Identity of the fretboard cell, e.g. '0-3'."""
        return f"{self.string_index}-{self.fret}"


class NoteWithOctave(BaseModel):
    model_config = ConfigDict(frozen=True)

    note: str
    octave: int

    @field_validator('note')
    @classmethod
    def validate_note(cls, v: str) -> str:
        return _check_note_name(v)

    def __str__(self) -> str:
        return f"{self.note}{self.octave}"


# =============================================================================
# TAB MODELS
# =============================================================================

class TabPosition(BaseModel):
    """
    A column of the ribbon where at least one string has a fret number.

    width is the number of character columns taken by the widest fret
    number starting at this column (2 for "12").
    """
    model_config = ConfigDict(frozen=True)

    column: int = Field(..., ge=0)
    width: int = Field(default=1, ge=1)

    @property
    def end(self) -> int:
        return self.column + self.width


class TabNoteEvent(BaseModel):
    """A single fretted note read from one string at one ribbon column."""
    model_config = ConfigDict(frozen=True)

    string_index: int = Field(..., ge=0, le=NUM_STRINGS - 1)
    fret: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    width: int = Field(default=1, ge=1, description="Digits consumed on this string")
    note: Optional[str] = Field(default=None, description="Filled in when the caller resolves pitch")

    @field_validator('note')
    @classmethod
    def validate_note(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_note_name(v)

    @property
    def string_name(self) -> str:
        return STRING_NAMES[self.string_index]


class TabStep(BaseModel):
    """Every note event sounding at one unique position."""
    model_config = ConfigDict(frozen=True)

    column: int = Field(..., ge=0)
    width: int = Field(default=1, ge=1)
    events: List[TabNoteEvent] = Field(default_factory=list)


class ParsedTab(BaseModel):
    """
    Result of a successful parse: the canonical 6-line ribbon and the
    unique positions found in it. Replaced wholesale on re-parse.
    """
    model_config = ConfigDict(frozen=True)

    ribbon: str = Field(..., min_length=1)
    positions: List[TabPosition] = Field(default_factory=list)

    @property
    def lines(self) -> List[str]:
        return self.ribbon.split("\n")


# =============================================================================
# CHORD MODELS
# =============================================================================

class SeventhChord(BaseModel):
    """A diatonic seventh chord of a major key (e.g., ii = Dm7 in C)."""
    model_config = ConfigDict(frozen=True)

    degree: str = Field(..., examples=["I", "ii", "vii"])
    note: str
    voicing: str = Field(..., examples=["maj7", "m7", "7", "half-diminished"])
    label: str = Field(..., examples=["Cmaj7", "Dm7", "Bø7"])

    @field_validator('note')
    @classmethod
    def validate_note(cls, v: str) -> str:
        return _check_note_name(v)


class ContextChord(BaseModel):
    """
    The chord currently chosen from a key: degree, voicing and the
    root-flatten toggle all folded into concrete notes and labels.
    """
    model_config = ConfigDict(frozen=True)

    root: str
    voicing: str
    degree: str
    notes: List[str] = Field(..., min_length=1)
    name: str = Field(..., examples=["Cmaj7", "Dm", "Bsus4"])
    roman: str = Field(..., examples=["Imaj7", "iim7", "bviimaj7"])
    flattened: bool = False

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        return _check_note_name(v)

    @field_validator('notes')
    @classmethod
    def validate_notes(cls, v: List[str]) -> List[str]:
        for note in v:
            _check_note_name(note)
        return v
