"""Layout rules for the scrolling list of history search results."""

from __future__ import annotations

from dataclasses import dataclass

# The longest line prefix: selection marker, duration and relative time.
PREFIX_LENGTH = len(" > 123ms 59s ago")

# Three-character slices: " > " for the selected row, " n " for the nine
# rows after it, and blanks for everything else.
_INDEX_SLICES = " > 1 2 3 4 5 6 7 8 9   "
_MAX_SCROLL_SPACE = 10


@dataclass
class ListState:
    """Scroll offset, selected row and how many rows fit on screen."""

    offset: int = 0
    selected: int = 0
    max_entries: int = 0

    def select(self, index: int) -> None:
        self.selected = index


def items_bounds(length: int, selected: int, offset: int, height: int) -> tuple[int, int]:
    """The ``(start, end)`` slice of ``length`` items to show in ``height`` rows.

    The window keeps up to ten rows of context after the selected item and
    scrolls back when the selection moves above the current offset.
    """
    offset = min(offset, max(length - 1, 0))
    scroll_space = min(height, _MAX_SCROLL_SPACE)
    if offset + height < selected + scroll_space:
        end = selected + scroll_space
        return end - height, end
    if selected < offset:
        return selected, selected + height
    return offset, offset + height


def index_prefix(row: int, offset: int, selected: int) -> str:
    """The three-character marker drawn at the start of a list row."""
    distance = row + offset - selected
    if distance < 0:
        distance = _MAX_SCROLL_SPACE
    i = min(distance, _MAX_SCROLL_SPACE) * 2
    return _INDEX_SLICES[i : i + 3]


def time_padding(time_text: str) -> int:
    """Column at which ``time_text`` starts so that ``"<time> ago"`` ends aligned."""
    column = PREFIX_LENGTH - 4 - len(time_text)
    if column < 0:
        raise ValueError(f"time text too long to align: {time_text!r}")
    return column