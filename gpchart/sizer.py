"""Layout of windows in rows, each row holding windows side by side."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass
class SizerItem:
    """A window and its share of the row width."""

    window: Any
    proportion: int = 1


class WindowRow:
    """One horizontal row of distinct windows."""

    def __init__(self, window: Any = None) -> None:
        self._items: List[SizerItem] = []
        if window is not None:
            self.add_window(window)

    def add_window(self, window: Any, proportion: int = 1) -> bool:
        """Append a window; False if it is already in the row."""
        if window in self:
            return False
        self._items.append(SizerItem(window, proportion))
        return True

    def clear(self) -> None:
        """Remove every window from the row."""
        self._items.clear()

    def __contains__(self, window: Any) -> bool:
        return any(item.window is window for item in self._items)

    def __iter__(self) -> Iterator[SizerItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class Sizer:
    """Vertical stack of window rows."""

    def __init__(self, border: int = 2) -> None:
        self.border = border
        self._rows: List[WindowRow] = []

    @property
    def rows(self) -> List[WindowRow]:
        """The rows, top to bottom."""
        return list(self._rows)

    def add_null_row(self) -> None:
        """Append an empty row."""
        self._rows.append(WindowRow())

    def add_window(self, window: Any) -> int:
        """Append a new row holding ``window``; returns its index."""
        self._rows.append(WindowRow(window))
        return len(self._rows) - 1

    def add_to_row(self, row: int, window: Any, proportion: int = 1) -> bool:
        """Add ``window`` to an existing row.

        False if the row does not exist or already holds the window.
        """
        if row < 0 or row >= len(self._rows):
            return False
        return self._rows[row].add_window(window, proportion)

    def delete_window(self, window: Any) -> bool:
        """Remove the first row holding ``window``; False if none does."""
        for index, row in enumerate(self._rows):
            if window in row:
                del self._rows[index]
                return True
        return False

    def realize(self) -> List[List[SizerItem]]:
        """The current layout: for each row, its items left to right."""
        return [list(row) for row in self._rows]