"""
Tab Subpackage

    - normalizer.py: Finds tab blocks in pasted text and builds the ribbon
    - extractor.py: Unique positions and note events read from the ribbon
    - pipeline.py: Pasted text -> ParsedTab (or MalformedTab)
    - navigator.py: Cursor over the positions of a parsed tab

Usage:
    from fretscope.tab import parse_tab, TabNavigator

    navigator = TabNavigator(parse_tab(pasted_text))
    print(navigator.current_events)
"""

from fretscope.tab.normalizer import extract_tab_content, is_valid_tab_text
from fretscope.tab.extractor import (
    find_unique_character_positions,
    format_steps,
    parse_notes_at_column,
    parse_steps,
)
from fretscope.tab.pipeline import parse_tab
from fretscope.tab.navigator import NotePlayer, TabNavigator, play_events
