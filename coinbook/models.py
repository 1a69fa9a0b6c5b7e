"""Transaction records and the append-only ledger that owns them."""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Iterator

NOTE_MAX_LEN = 64


class Kind(enum.Enum):
    """Direction of a transaction."""

    CREDIT = "credit"
    DEBIT = "debit"

    @property
    def sign(self) -> str:
        return "+" if self is Kind.CREDIT else "-"


@dataclass(frozen=True)
class Transaction:
    """A single credit or debit entry.

    Instances are immutable; the constructor rejects notes longer than
    ``NOTE_MAX_LEN`` and amounts that are negative or not finite.
    """

    note: str
    amount: float
    kind: Kind = Kind.CREDIT

    def __post_init__(self) -> None:
        if len(self.note) > NOTE_MAX_LEN:
            raise ValueError(f"note longer than {NOTE_MAX_LEN} characters")
        if not math.isfinite(self.amount) or self.amount < 0:
            raise ValueError(f"amount must be a non-negative number, got {self.amount!r}")
        if not isinstance(self.kind, Kind):
            raise ValueError(f"kind must be a Kind, got {self.kind!r}")

    @property
    def signed_amount(self) -> float:
        return self.amount if self.kind is Kind.CREDIT else -self.amount

    @property
    def title(self) -> str:
        return f"[{self.note}]"

    @property
    def description(self) -> str:
        return f"{self.kind.sign} {self.amount:f}"

    @property
    def filter_value(self) -> str:
        return self.note


class Ledger:
    """Ordered, append-only sequence of transactions."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: tuple[Transaction, ...] = tuple(transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __getitem__(self, idx: int) -> Transaction:
        return self._transactions[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._transactions == other._transactions

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Ledger({list(self._transactions)!r})"

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def appended(self, txn: Transaction) -> "Ledger":
        """Return a new ledger with ``txn`` added at the end."""
        return Ledger(self._transactions + (txn,))

    def balance(self) -> float:
        """Credits minus debits over the whole ledger.

        Recomputed on every call from the full sequence.
        """
        return sum(t.signed_amount for t in self._transactions)
