"""JSON file storage for the ledger.

The file holds a JSON array of records shaped like
``{"Note": "Coffee", "Value": 4.5, "Kind": false}`` where ``Kind`` is ``true``
for credits and ``false`` for debits.
"""
from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path

from .logging_setup import get_logger
from .models import Kind, Ledger, Transaction

logger = get_logger(__name__)


class LedgerError(Exception):
    """Base class for ledger file problems."""

    def __init__(self, path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class LedgerLoadError(LedgerError):
    """The ledger file could not be read or decoded."""


class LedgerSaveError(LedgerError):
    """The ledger file could not be written."""


def _encode(txn: Transaction) -> dict:
    return {"Note": txn.note, "Value": txn.amount, "Kind": txn.kind is Kind.CREDIT}


def _decode(path, idx: int, record) -> Transaction:
    if not isinstance(record, dict):
        raise LedgerLoadError(path, f"record {idx} is not an object")
    try:
        note = record["Note"]
        value = record["Value"]
        kind = record["Kind"]
    except KeyError as exc:
        raise LedgerLoadError(path, f"record {idx} is missing {exc.args[0]!r}") from None
    if not isinstance(note, str):
        raise LedgerLoadError(path, f"record {idx}: Note must be a string")
    # bool is an int subclass; a boolean Value is a corrupt record
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LedgerLoadError(path, f"record {idx}: Value must be a number")
    if not isinstance(kind, bool):
        raise LedgerLoadError(path, f"record {idx}: Kind must be true or false")
    try:
        return Transaction(
            note=note,
            amount=float(value),
            kind=Kind.CREDIT if kind else Kind.DEBIT,
        )
    except ValueError as exc:
        raise LedgerLoadError(path, f"record {idx}: {exc}") from exc


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def dumps(ledger: Ledger) -> str:
    return json.dumps([_encode(t) for t in ledger])


def load(path) -> Ledger:
    """Read the ledger at ``path``, creating an empty file if it is missing."""
    path = Path(path)
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        ledger = Ledger()
        try:
            save(path, ledger)
        except LedgerSaveError as exc:
            raise LedgerLoadError(path, f"cannot create ledger file: {exc.__cause__}") from exc
        logger.info("Created empty ledger at %s", path)
        return ledger
    except (OSError, UnicodeDecodeError) as exc:
        raise LedgerLoadError(path, f"cannot read ledger file: {exc}") from exc

    try:
        records = json.loads(data)
    except json.JSONDecodeError as exc:
        raise LedgerLoadError(path, f"malformed ledger file: {exc}") from exc
    if not isinstance(records, list):
        raise LedgerLoadError(path, "malformed ledger file: expected a list of transactions")

    ledger = Ledger(_decode(path, idx, rec) for idx, rec in enumerate(records))
    logger.info("Loaded %d transactions from %s", len(ledger), path)
    return ledger


def save(path, ledger: Ledger) -> None:
    """Overwrite ``path`` with the full ledger.

    The data goes to a temporary file next to the resolved target which then
    replaces it, so an interrupted write leaves the old file intact. Symlinks
    are followed and the target keeps its permission bits; a new ledger gets
    the usual 0o666 less the umask.
    """
    path = Path(path).resolve()
    payload = dumps(ledger)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise LedgerSaveError(path, f"cannot write ledger file: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:  # pragma: no cover - cleanup best effort
                pass
    logger.debug("Saved %d transactions to %s", len(ledger), path)
