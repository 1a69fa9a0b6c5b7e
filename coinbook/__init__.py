"""Terminal ledger for recording credits and debits."""

__version__ = "0.1.0"
