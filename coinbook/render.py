"""Draw frames produced by the controller onto a curses window."""
from __future__ import annotations

import curses
import enum
import unicodedata
from dataclasses import dataclass, field

from .config import PADDING_X, PADDING_Y


def text_width(text: str) -> int:
    """Terminal columns taken by ``text``.

    Wide and fullwidth characters (CJK, most emoji) take two columns and
    combining marks none.
    """
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


class Role(enum.Enum):
    """Visual emphasis of a piece of text."""

    NORMAL = "normal"
    TITLE = "title"
    FOCUSED = "focused"
    BLURRED = "blurred"
    HELP = "help"
    ERROR = "error"
    SELECTED = "selected"


@dataclass
class Frame:
    """Lines of styled segments plus an optional text cursor position.

    ``cursor`` is ``(line, column)`` relative to the first line, or ``None``
    to hide the terminal cursor.
    """

    lines: list = field(default_factory=list)
    cursor: tuple | None = None

    def add(self, *segments: tuple) -> None:
        self.lines.append(list(segments))

    def blank(self) -> None:
        self.lines.append([])

    def text(self) -> str:
        return "\n".join("".join(text for text, _ in line) for line in self.lines)


def _set_cursor(state: int) -> None:
    try:
        curses.curs_set(state)
    except curses.error:  # pragma: no cover - some terminals
        pass


class Renderer:
    """Paint :class:`Frame` objects using the attributes of a theme."""

    def __init__(self, stdscr, theme):
        self.stdscr = stdscr
        self.theme = theme

    def draw(self, frame: Frame) -> None:
        stdscr = self.stdscr
        h, w = stdscr.getmaxyx()
        h = max(1, h)
        w = max(1, w)
        stdscr.erase()
        for row, line in enumerate(frame.lines):
            y = PADDING_Y + row
            if y >= h:
                break
            x = PADDING_X
            for text, role in line:
                room = w - 1 - x
                if room <= 0:
                    break
                try:
                    stdscr.addnstr(y, x, text, room, self.theme.attr(role))
                except curses.error:
                    pass
                x += text_width(text)

        if frame.cursor is not None:
            line, col = frame.cursor
            y = min(h - 1, PADDING_Y + line)
            x = min(w - 1, PADDING_X + col)
            _set_cursor(1)
            try:
                stdscr.move(y, x)
            except curses.error:
                pass
        else:
            _set_cursor(0)
        stdscr.refresh()
