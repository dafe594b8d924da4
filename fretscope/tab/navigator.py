"""
Tab Navigator - Step Through the Positions of a Parsed Tab

Holds the one piece of mutable state in the tab engine: which unique
position the user is looking at. The index only moves through load(),
previous(), next() and go_to(), and always stays inside
[0, len(positions) - 1].

Sound is left to a NotePlayer collaborator, any callable taking
(string_index, fret). The player resolves pitch and deals with its own
playback failures.
"""

import logging
from typing import Callable, Iterable, List, Optional

from fretscope.data.schema import ParsedTab, TabNoteEvent, TabPosition
from fretscope.tab.extractor import parse_notes_at_column, with_note_names


logger = logging.getLogger(__name__)

NotePlayer = Callable[[int, int], None]


def play_events(events: Iterable[TabNoteEvent], player: NotePlayer) -> None:
    """Hand every event of a position to the player at once."""
    for event in events:
        player(event.string_index, event.fret)


class TabNavigator:
    """
    Cursor over the unique positions of a ParsedTab.

    Usage:
        navigator = TabNavigator(parse_tab(text))
        navigator.next()
        print(navigator.indicator)        # '2 / 37'
        play_events(navigator.current_events, player)
    """

    def __init__(self, tab: Optional[ParsedTab] = None):
        self._tab: Optional[ParsedTab] = None
        self._index = 0
        if tab is not None:
            self.load(tab)

    # ---------------------------
    # Tab lifecycle
    # ---------------------------

    def load(self, tab: ParsedTab) -> None:
        """Replace the current tab and go back to the first position."""
        self._tab = tab
        self._index = 0
        logger.debug(f"Navigator loaded tab with {len(tab.positions)} positions")

    def clear(self) -> None:
        self._tab = None
        self._index = 0

    @property
    def tab(self) -> Optional[ParsedTab]:
        return self._tab

    @property
    def positions(self) -> List[TabPosition]:
        return self._tab.positions if self._tab is not None else []

    # ---------------------------
    # Movement
    # ---------------------------

    @property
    def index(self) -> int:
        return self._index

    @property
    def has_previous(self) -> bool:
        return self._index > 0

    @property
    def has_next(self) -> bool:
        return self._index < len(self.positions) - 1

    def previous(self) -> int:
        if self.has_previous:
            self._index -= 1
        return self._index

    def next(self) -> int:
        if self.has_next:
            self._index += 1
        return self._index

    def go_to(self, index: int) -> int:
        """Jump to a position, clamped to the valid range."""
        last = max(len(self.positions) - 1, 0)
        self._index = min(max(index, 0), last)
        return self._index

    # ---------------------------
    # Current position
    # ---------------------------

    @property
    def current_position(self) -> Optional[TabPosition]:
        if not self.positions:
            return None
        return self.positions[self._index]

    @property
    def current_events(self) -> List[TabNoteEvent]:
        """Named note events at the current position ([] without a tab)."""
        position = self.current_position
        if position is None:
            return []
        return with_note_names(parse_notes_at_column(self._tab.ribbon, position.column))

    @property
    def indicator(self) -> str:
        if not self.positions:
            return "0 / 0"
        return f"{self._index + 1} / {len(self.positions)}"
