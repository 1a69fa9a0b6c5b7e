"""Scrollable, filterable list of transactions."""
from __future__ import annotations

from typing import Sequence

from .config import ROWS_PER_ENTRY
from .keys import is_printable
from .models import Transaction


class TransactionList:
    """Read-only projection of the ledger with a selected entry.

    ``index`` points into the filtered entries. Filtering matches the note
    case-insensitively; ``/`` starts typing a filter, Enter applies it and
    Escape clears it.
    """

    def __init__(self, items: Sequence[Transaction] = (), height: int = 10):
        self.items: list[Transaction] = list(items)
        self.height = max(ROWS_PER_ENTRY, height)
        self.index = 0
        self.filter_text = ""
        self.filtering = False
        self._matches: list[int] = []
        self._refilter()

    # -- items -------------------------------------------------------------

    def set_items(self, items: Sequence[Transaction]) -> None:
        """Replace the entries, keeping the selection where possible."""
        self.items = list(items)
        self._refilter()

    def set_height(self, rows: int) -> None:
        self.height = max(ROWS_PER_ENTRY, rows)

    @property
    def per_page(self) -> int:
        return max(1, self.height // ROWS_PER_ENTRY)

    @property
    def entries(self) -> list[Transaction]:
        return [self.items[i] for i in self._matches]

    @property
    def selected(self) -> Transaction | None:
        if not self._matches:
            return None
        return self.items[self._matches[self.index]]

    def _refilter(self) -> None:
        needle = self.filter_text.lower()
        self._matches = [
            i for i, t in enumerate(self.items) if needle in t.filter_value.lower()
        ]
        self.index = min(self.index, max(0, len(self._matches) - 1))

    def visible(self) -> list[tuple[int, Transaction, bool]]:
        """Entries that fit on screen as ``(position, txn, is_selected)``."""
        count = len(self._matches)
        rows = self.per_page
        top = min(max(0, self.index - rows // 2), max(0, count - rows))
        return [
            (pos, self.items[self._matches[pos]], pos == self.index)
            for pos in range(top, min(count, top + rows))
        ]

    # -- input -------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        if self.filtering:
            self._filter_key(key)
            return
        count = len(self._matches)
        if key in ("up", "k"):
            self.index = max(0, self.index - 1)
        elif key in ("down", "j"):
            self.index = min(max(0, count - 1), self.index + 1)
        elif key in ("pgup", "left", "h"):
            self.index = max(0, self.index - self.per_page)
        elif key in ("pgdn", "right", "l"):
            self.index = min(max(0, count - 1), self.index + self.per_page)
        elif key in ("home", "g"):
            self.index = 0
        elif key in ("end", "G"):
            self.index = max(0, count - 1)
        elif key == "/":
            self.filtering = True
        elif key == "esc" and self.filter_text:
            self.clear_filter()

    def _filter_key(self, key: str) -> None:
        if key == "enter":
            self.filtering = False
        elif key == "esc":
            self.clear_filter()
        elif key == "backspace":
            self.filter_text = self.filter_text[:-1]
            self._refilter()
        elif is_printable(key):
            self.filter_text += key
            self.index = 0
            self._refilter()

    def clear_filter(self) -> None:
        self.filtering = False
        self.filter_text = ""
        self._refilter()

    def status(self) -> str:
        """Footer text such as ``"2/5"`` or ``"filter: cof 1/1"``."""
        count = len(self._matches)
        pos = f"{self.index + 1}/{count}" if count else "0/0"
        if self.filtering or self.filter_text:
            cursor = "_" if self.filtering else ""
            return f"filter: {self.filter_text}{cursor} {pos}"
        return pos
