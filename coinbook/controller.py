"""Focus and navigation state machine tying the views to the ledger file."""
from __future__ import annotations

import enum
from pathlib import Path

from . import store
from .config import FOOTER_ROWS, HEADER_ROWS, PADDING_Y
from .form import AMOUNT_FIELD, CREDIT_OPTION, DEBIT_OPTION, UNFOCUSED, EntryForm, InvalidAmount
from .listview import TransactionList
from .logging_setup import get_logger
from .models import Kind, Ledger
from .render import Frame, Role, text_width

logger = get_logger(__name__)

FIELD_PROMPT = "> "
SUBMIT_LABEL = "Submit"


class FocusMode(enum.Enum):
    LIST = "list"
    FORM = "form"


class App:
    """Route key names to the list view or the entry form.

    ``+`` opens the form, ``-`` returns to the list and ``ctrl+c`` quits from
    anywhere. Within the form ``tab``/``down`` and ``shift+tab``/``up`` cycle
    the cursor and ``enter`` acts on the control under it. A successful
    submit writes the whole ledger to ``path`` before the list is refreshed.
    """

    def __init__(self, path, ledger: Ledger | None = None, *, save=store.save):
        self.path = Path(path)
        self.ledger = ledger if ledger is not None else Ledger()
        self._save = save
        self.form = EntryForm()
        self.list_view = TransactionList(self.ledger.transactions)
        self.focus = FocusMode.LIST
        self.status: tuple[str, Role] | None = None
        self.size = (24, 80)

    # -- input -------------------------------------------------------------

    def handle_key(self, key: str | None) -> bool:
        """Process one key; return ``False`` when the application should exit."""
        if key is None:
            return True
        if key == "resize":
            return True
        self.status = None

        if key == "ctrl+c":
            logger.debug("Quit requested")
            return False
        if key == "+":
            self._set_focus(FocusMode.FORM)
            return True
        if key == "-":
            self._set_focus(FocusMode.LIST)
            return True

        if self.focus is FocusMode.LIST:
            self.list_view.handle_key(key)
        else:
            self._form_key(key)
        return True

    def _set_focus(self, mode: FocusMode) -> None:
        if mode is not self.focus:
            logger.debug("Focus %s -> %s", self.focus.value, mode.value)
        self.focus = mode

    def _form_key(self, key: str) -> None:
        form = self.form
        if key in ("tab", "down"):
            form.move(1)
        elif key in ("shift+tab", "up"):
            form.move(-1)
        elif key == "enter":
            if form.cursor == form.submit_index:
                self.submit()
            elif form.cursor in (CREDIT_OPTION, DEBIT_OPTION):
                form.select_kind()
            else:
                form.move(1)
        else:
            form.edit(key)

    def resize(self, height: int, width: int) -> None:
        self.size = (height, width)
        self.list_view.set_height(height - 2 * PADDING_Y - HEADER_ROWS - FOOTER_ROWS)

    # -- submission --------------------------------------------------------

    def submit(self) -> bool:
        """Validate the form, persist the new ledger and refresh the list.

        Returns ``True`` when a transaction was recorded. On a bad amount or a
        failed write the form keeps its contents and stays focused.
        """
        try:
            txn = self.form.submit()
        except InvalidAmount as exc:
            logger.info("Rejected submission: %s", exc)
            self.form.cursor = AMOUNT_FIELD
            self.status = (str(exc), Role.ERROR)
            return False

        updated = self.ledger.appended(txn)
        try:
            self._save(self.path, updated)
        except store.LedgerSaveError as exc:
            logger.exception("Could not save ledger")
            self.status = (f"Not saved: {exc}", Role.ERROR)
            return False

        self.ledger = updated
        logger.info("Recorded %s %s %r", txn.kind.value, txn.amount, txn.note)
        self.list_view.set_items(self.ledger.transactions)
        self.form.reset()
        self.form.cursor = UNFOCUSED
        self._set_focus(FocusMode.LIST)
        self.status = (f"Saved {txn.title} {txn.description}", Role.HELP)
        return True

    # -- drawing -----------------------------------------------------------

    def render(self) -> Frame:
        frame = Frame()
        frame.add((" coinbook ", Role.TITLE), (f"  {self.path.name}", Role.BLURRED))
        frame.blank()
        if self.focus is FocusMode.LIST:
            self._render_list(frame)
        else:
            self._render_form(frame)
        if self.status is not None:
            frame.add(self.status)
        return frame

    def _render_list(self, frame: Frame) -> None:
        frame.add(("Balance", Role.TITLE), (f" {self.ledger.balance():f}", Role.FOCUSED))
        frame.blank()
        entries = self.list_view.visible()
        if not entries:
            empty = "No matching transactions." if self.list_view.filter_text else "No transactions."
            frame.add((empty, Role.BLURRED))
        for _, txn, selected in entries:
            if selected:
                frame.add(("| " + txn.title, Role.SELECTED))
                frame.add(("| " + txn.description, Role.SELECTED))
            else:
                frame.add(("  " + txn.title, Role.NORMAL))
                frame.add(("  " + txn.description, Role.BLURRED))
        frame.blank()
        frame.add(
            (self.list_view.status(), Role.HELP),
            ("  Use + to add a new transaction", Role.HELP),
        )

    def _render_form(self, frame: Frame) -> None:
        form = self.form
        frame.add(("Add New Transaction", Role.TITLE))
        frame.blank()
        for idx, field in enumerate(form.fields):
            focused = idx == form.cursor
            style = Role.FOCUSED if focused else Role.NORMAL
            if field.value:
                frame.add((FIELD_PROMPT, style), (field.value, style))
            else:
                frame.add((FIELD_PROMPT, style), (field.placeholder, Role.BLURRED))
            if focused:
                frame.cursor = (
                    len(frame.lines) - 1,
                    text_width(FIELD_PROMPT) + text_width(field.value[: field.pos]),
                )
        frame.blank()
        for option, kind, label in (
            (CREDIT_OPTION, Kind.CREDIT, "Credit"),
            (DEBIT_OPTION, Kind.DEBIT, "Debit"),
        ):
            mark = "x" if form.kind is kind else " "
            style = Role.FOCUSED if form.cursor == option else Role.BLURRED
            frame.add((f"[{mark}] {label}", style))
        frame.blank()
        if form.cursor == form.submit_index:
            frame.add((f"[ {SUBMIT_LABEL} ]", Role.FOCUSED))
        else:
            frame.add(("[ ", Role.NORMAL), (SUBMIT_LABEL, Role.BLURRED), (" ]", Role.NORMAL))
        frame.blank()
        frame.add(("Use - to return to transaction list", Role.HELP))
