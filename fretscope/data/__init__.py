"""
Data Subpackage

Pydantic models shared by the theory engine and the tab parser:
    - FretPosition / TuningEntry / NoteWithOctave: fretboard cells
    - TabPosition / TabNoteEvent / TabStep / ParsedTab: parsed tablature
    - SeventhChord / ContextChord: chords derived from a key
"""

from fretscope.data.schema import (
    ContextChord,
    FretPosition,
    NoteWithOctave,
    ParsedTab,
    SeventhChord,
    TabNoteEvent,
    TabPosition,
    TabStep,
    TuningEntry,
)
