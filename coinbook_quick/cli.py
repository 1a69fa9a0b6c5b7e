"""Prompt-driven interface for adding and listing ledger entries."""
from __future__ import annotations

import sys

import questionary

from coinbook import store
from coinbook.config import Settings
from coinbook.form import InvalidAmount, parse_amount
from coinbook.logging_setup import configure_logging, get_logger
from coinbook.models import NOTE_MAX_LEN, Kind, Transaction

logger = get_logger(__name__)

USAGE = "usage: coinbook-quick LEDGER_FILE"


def _note_ok(text: str) -> bool | str:
    if len(text) > NOTE_MAX_LEN:
        return f"Keep the note under {NOTE_MAX_LEN + 1} characters"
    return True


def enter_transaction(path, ledger):
    """Prompt for one transaction, save it and return the updated ledger."""
    note = questionary.text("Note:", validate=_note_ok).ask()
    if note is None:
        return ledger
    amount_str = questionary.text("Amount:").ask()
    if amount_str is None:
        return ledger
    try:
        amount = parse_amount(amount_str)
    except InvalidAmount as exc:
        print(f"{exc}. Please enter a non-negative number.")
        return ledger
    kind = questionary.select(
        "Kind:",
        choices=[
            questionary.Choice("Credit", value=Kind.CREDIT),
            questionary.Choice("Debit", value=Kind.DEBIT),
        ],
    ).ask()
    if kind is None:
        return ledger

    updated = ledger.appended(Transaction(note=note, amount=amount, kind=kind))
    try:
        store.save(path, updated)
    except store.LedgerSaveError as exc:
        logger.exception("Could not save ledger")
        print(f"Transaction not saved: {exc}\n")
        return ledger
    print("Transaction saved.\n")
    return updated


def list_transactions(ledger) -> None:
    if not len(ledger):
        print("No transactions recorded.\n")
        return
    for txn in ledger:
        print(f"{txn.title} {txn.description}")
    print(f"Balance: {ledger.balance():f}\n")


def main(argv=None) -> int:
    """Entry point for the prompt interface."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    path = args[0]

    settings = Settings.from_env()
    if settings.log_file is not None:
        try:
            configure_logging(settings.log_level, path=settings.log_file)
        except OSError as exc:
            print(f"error: cannot open log file {settings.log_file}: {exc}")
            return 1

    try:
        ledger = store.load(path)
    except store.LedgerLoadError as exc:
        print(f"error: {exc}")
        return 1

    while True:
        choice = questionary.select(
            "Choose an option:",
            choices=["Enter transaction", "List transactions", "Quit"],
        ).ask()

        if choice == "Enter transaction":
            ledger = enter_transaction(path, ledger)
        elif choice == "List transactions":
            list_transactions(ledger)
            questionary.press_any_key_to_continue("Press any key to return to menu").ask()
        else:
            break
    return 0


def entry_point() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
