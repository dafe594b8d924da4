"""
Tab Pipeline - Pasted Text to ParsedTab

INPUT:  raw pasted text (headers, lyrics, several tab blocks)
                              │
                              ▼
                    ┌─────────────────┐
                    │   normalizer    │ → 6-line ribbon
                    └─────────────────┘
                              │
                              ▼
                    ┌─────────────────┐
                    │    extractor    │ → unique positions
                    └─────────────────┘
                              │
                              ▼
OUTPUT: ParsedTab, or MalformedTab with a message for the user
"""

import logging

from fretscope.data.schema import ParsedTab
from fretscope.errors import MalformedTab
from fretscope.tab.extractor import find_unique_character_positions
from fretscope.tab.normalizer import extract_tab_content, is_valid_tab_text


logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please paste tab text"


def parse_tab(text: str) -> ParsedTab:
    """
    Parse pasted tab text into a ribbon and its unique positions.

    Raises:
        MalformedTab: the text is empty or holds no valid tab block
    """
    if not text or not text.strip():
        raise MalformedTab(EMPTY_INPUT_MESSAGE, reason="empty input")

    ribbon = extract_tab_content(text)
    if not ribbon:
        raise MalformedTab(reason="no lines start with a string letter and a pipe")

    if not is_valid_tab_text(ribbon):
        logger.warning("Extracted tab failed validation")
        raise MalformedTab(reason="extracted tab is missing string lines")

    positions = find_unique_character_positions(ribbon)
    logger.debug(f"Parsed tab with {len(positions)} positions")
    return ParsedTab(ribbon=ribbon, positions=positions)
