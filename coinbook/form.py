"""Data-entry form for new transactions."""
from __future__ import annotations

import math
import re

from .config import AMOUNT_CHAR_LIMIT, NOTE_CHAR_LIMIT
from .keys import is_printable
from .models import Kind, Transaction

# Sentinel cursor value after a successful submit: no control is focused
UNFOCUSED = -1

NOTE_FIELD = 0
AMOUNT_FIELD = 1
CREDIT_OPTION = 2
DEBIT_OPTION = 3
SUBMIT_BUTTON = 4


class InvalidAmount(ValueError):
    """The amount field does not hold a usable number."""


# Plain ASCII decimal with optional exponent; no spaces, underscores or
# spelled-out infinities
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_amount(text: str) -> float:
    """Parse the amount field as a non-negative, finite number.

    Only ASCII decimal notation such as ``4.50``, ``.5`` or ``1e3`` is
    accepted. Whitespace, ``_`` separators and non-ASCII digits that
    :func:`float` would tolerate are rejected.
    """
    if not text:
        raise InvalidAmount("Amount is required")
    if _AMOUNT_RE.fullmatch(text) is None:
        raise InvalidAmount(f"Invalid amount: {text!r} is not a number")
    value = float(text)
    if not math.isfinite(value):
        raise InvalidAmount(f"Invalid amount: {text!r} is not a finite number")
    if value < 0:
        raise InvalidAmount("Invalid amount: use Debit instead of a negative value")
    # folds "-0" into 0.0
    return abs(value)


class TextField:
    """Single-line editable text buffer with an insertion point."""

    def __init__(self, placeholder: str = "", char_limit: int = 0):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ""
        self.pos = 0

    def set_value(self, value: str) -> None:
        if self.char_limit:
            value = value[: self.char_limit]
        self.value = value
        self.pos = len(value)

    def reset(self) -> None:
        self.value = ""
        self.pos = 0

    def insert(self, text: str) -> None:
        if self.char_limit:
            room = self.char_limit - len(self.value)
            if room <= 0:
                return
            text = text[:room]
        self.value = self.value[: self.pos] + text + self.value[self.pos :]
        self.pos += len(text)

    def handle_key(self, key: str) -> bool:
        """Apply an editing key; return ``True`` if the key was consumed."""
        if is_printable(key):
            self.insert(key)
        elif key == "backspace":
            if self.pos > 0:
                self.value = self.value[: self.pos - 1] + self.value[self.pos :]
                self.pos -= 1
        elif key == "delete":
            self.value = self.value[: self.pos] + self.value[self.pos + 1 :]
        elif key == "left":
            self.pos = max(0, self.pos - 1)
        elif key == "right":
            self.pos = min(len(self.value), self.pos + 1)
        elif key == "home":
            self.pos = 0
        elif key == "end":
            self.pos = len(self.value)
        elif key == "ctrl+u":
            self.value = self.value[self.pos :]
            self.pos = 0
        else:
            return False
        return True


class EntryForm:
    """Note and amount fields, a credit/debit selector and a submit button.

    ``cursor`` indexes the controls in drawing order: the text fields first,
    then the two kind options, then the submit button. The focused text field
    is derived from ``cursor``; there is no separate per-field focus flag.
    """

    def __init__(self):
        self.fields = [
            TextField("Transaction Note", NOTE_CHAR_LIMIT),
            TextField("Transaction Value", AMOUNT_CHAR_LIMIT),
        ]
        self.cursor = NOTE_FIELD
        self.kind = Kind.CREDIT

    @property
    def positions(self) -> int:
        # text fields + credit + debit + submit
        return len(self.fields) + 3

    @property
    def submit_index(self) -> int:
        return len(self.fields) + 2

    @property
    def focused_field(self) -> TextField | None:
        if 0 <= self.cursor < len(self.fields):
            return self.fields[self.cursor]
        return None

    @property
    def note(self) -> TextField:
        return self.fields[NOTE_FIELD]

    @property
    def amount(self) -> TextField:
        return self.fields[AMOUNT_FIELD]

    def move(self, step: int) -> None:
        """Move the cursor ``step`` positions, wrapping at both ends."""
        if self.cursor == UNFOCUSED:
            self.cursor = 0 if step > 0 else self.submit_index
            return
        self.cursor = (self.cursor + step) % self.positions

    def select_kind(self) -> bool:
        """Pick the kind under the cursor; ``False`` if not on an option."""
        if self.cursor == CREDIT_OPTION:
            self.kind = Kind.CREDIT
        elif self.cursor == DEBIT_OPTION:
            self.kind = Kind.DEBIT
        else:
            return False
        return True

    def edit(self, key: str) -> bool:
        field = self.focused_field
        if field is None:
            return False
        return field.handle_key(key)

    def values(self) -> tuple[str, str]:
        return self.note.value, self.amount.value

    def submit(self) -> Transaction:
        """Build a transaction from the current input.

        Raises :class:`InvalidAmount` when the amount does not parse; the
        form is left untouched in that case.
        """
        note, amount_text = self.values()
        amount = parse_amount(amount_text)
        try:
            return Transaction(note=note, amount=amount, kind=self.kind)
        except ValueError as exc:
            raise InvalidAmount(str(exc)) from exc

    def reset(self) -> None:
        """Clear both text fields."""
        for field in self.fields:
            field.reset()
