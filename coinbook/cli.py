"""Command-line entry point and curses event loop."""
from __future__ import annotations

import curses
import sys
from contextlib import contextmanager

from . import store
from .config import Settings
from .controller import App
from .keys import key_name
from .logging_setup import configure_logging, get_logger
from .render import Renderer
from .theme import Theme, get_theme

logger = get_logger(__name__)

USAGE = """usage: coinbook LEDGER_FILE

Provide a file to store the transactions. It is created if it does not exist."""

# Milliseconds curses waits after Escape for the rest of a key sequence
ESCAPE_DELAY_MS = 25


@contextmanager
def keypad_mode(win):
    """Enable keypad mode and ensure it is disabled afterwards."""

    try:
        win.keypad(True)
    except curses.error:  # pragma: no cover - fake windows
        pass
    try:
        yield
    finally:
        try:
            win.keypad(False)
        except curses.error:  # pragma: no cover - fake windows
            pass


@contextmanager
def raw_mode():
    """Deliver ctrl+c as a key instead of SIGINT while the UI runs."""

    try:
        curses.raw()
    except curses.error:  # pragma: no cover - not a terminal
        pass
    try:
        yield
    finally:
        try:
            curses.noraw()
        except curses.error:  # pragma: no cover - cleanup best effort
            pass


def run(stdscr, app: App, theme: Theme | None = None) -> None:
    """Draw, read one key, dispatch; repeat until the app asks to quit."""

    theme = theme or get_theme("green")
    with keypad_mode(stdscr), raw_mode():
        theme.install()
        try:
            curses.set_escdelay(ESCAPE_DELAY_MS)
        except (AttributeError, curses.error):  # pragma: no cover - older curses
            pass
        renderer = Renderer(stdscr, theme)
        app.resize(*stdscr.getmaxyx())
        while True:
            renderer.draw(app.render())
            try:
                key = stdscr.get_wch()
            except curses.error:
                continue
            name = key_name(key)
            if name == "resize":
                curses.update_lines_cols()
                curses.resize_term(0, 0)
                stdscr.clearok(True)
                app.resize(*stdscr.getmaxyx())
            if not app.handle_key(name):
                break


def main(argv=None) -> int:
    """Run the full-screen ledger on the file named in ``argv``."""

    args = sys.argv[1:] if argv is None else list(argv)
    if args in (["-h"], ["--help"]):
        print(USAGE)
        return 0
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
        logger.error("Startup failed: %s", exc)
        print(f"error: {exc}")
        return 1

    app = App(path, ledger)
    try:
        curses.wrapper(run, app, get_theme(settings.theme))
    except KeyboardInterrupt:
        logger.debug("Interrupted")
    except curses.error as exc:
        logger.exception("Terminal error")
        print(f"could not start program: {exc}")
        return 1
    return 0
