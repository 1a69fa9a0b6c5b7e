"""Translate curses key codes into key names.

``stdscr.get_wch()`` returns a ``str`` for characters (including control
characters) and an ``int`` for function keys. Everything downstream works with
the names produced here, e.g. ``"tab"``, ``"shift+tab"``, ``"ctrl+c"`` or a
single printable character.
"""
from __future__ import annotations

import curses

_SPECIAL_CODES = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_PPAGE: "pgup",
    curses.KEY_NPAGE: "pgdn",
    curses.KEY_BTAB: "shift+tab",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_RESIZE: "resize",
}

_CONTROL_CHARS = {
    "\t": "tab",
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
    "\x15": "ctrl+u",
}


def key_name(key) -> str | None:
    """Return the name for ``key`` or ``None`` if it has no meaning here."""
    if isinstance(key, int):
        if key in _SPECIAL_CODES:
            return _SPECIAL_CODES[key]
        if 0 <= key < 256:
            # getch() style codes for plain characters
            return key_name(chr(key))
        return None
    if not key:
        return None
    if key in _CONTROL_CHARS:
        return _CONTROL_CHARS[key]
    if key.isprintable():
        return key
    return None


def is_printable(name: str | None) -> bool:
    """``True`` for names that stand for a single typed character."""
    return name is not None and len(name) == 1 and name.isprintable()
