"""
Fretscope - Guitar Tab Parsing and Fretboard Position Engine

Recovers column-aligned note events from pasted ASCII guitar tablature and
maps scales and chords onto a standard-tuned 6-string fretboard.

Subpackages:
    - fretscope.data: Pydantic models for positions, tab events and chords
    - fretscope.theory: Note names, scales, chords and fretboard lookup
    - fretscope.tab: Tab text normalizer, event extractor and navigator

Example usage:
    from fretscope.tab.pipeline import parse_tab

    parsed = parse_tab(pasted_text)
    print(parsed.positions[0])   # column=4 width=1
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
