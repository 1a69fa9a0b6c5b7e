"""Color themes for the renderer.

A :class:`Theme` maps each line :class:`~coinbook.render.Role` to a curses
attribute. It is built once and handed to the renderer; nothing reads colors
from module globals.
"""
from __future__ import annotations

import curses
from dataclasses import dataclass, field

from .render import Role

GREEN_256 = 83
GREY_256 = 240


@dataclass
class Theme:
    name: str
    # role -> (foreground, background, extra attributes); -1 keeps the
    # terminal default color
    colors: dict = field(default_factory=dict)
    attrs: dict = field(default_factory=dict)

    def attr(self, role: Role) -> int:
        return self.attrs.get(role, curses.A_NORMAL)

    def install(self) -> None:
        """Allocate color pairs; call once curses has been initialised."""
        try:
            if not self.colors or not curses.has_colors():
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:  # pragma: no cover - terminals without defaults
                pass
            wide = curses.COLORS >= 256
            for pair, (role, (fg, bg, extra)) in enumerate(self.colors.items(), start=1):
                fg = _fallback(fg, wide)
                bg = _fallback(bg, wide)
                curses.init_pair(pair, fg, bg)
                self.attrs[role] = curses.color_pair(pair) | extra
        except curses.error:  # pragma: no cover - limited terminals
            pass


def _fallback(color: int, wide: bool) -> int:
    if wide or color < 8:
        return color
    if color == GREEN_256:
        return curses.COLOR_GREEN
    return curses.COLOR_WHITE


def mono_theme() -> Theme:
    return Theme(
        name="mono",
        attrs={
            Role.NORMAL: curses.A_NORMAL,
            Role.TITLE: curses.A_REVERSE,
            Role.FOCUSED: curses.A_BOLD,
            Role.BLURRED: curses.A_DIM,
            Role.HELP: curses.A_DIM,
            Role.ERROR: curses.A_BOLD | curses.A_UNDERLINE,
            Role.SELECTED: curses.A_BOLD,
        },
    )


def green_theme() -> Theme:
    theme = mono_theme()
    theme.name = "green"
    theme.colors = {
        Role.TITLE: (curses.COLOR_BLACK, GREEN_256, curses.A_NORMAL),
        Role.FOCUSED: (GREEN_256, -1, curses.A_NORMAL),
        Role.BLURRED: (GREY_256, -1, curses.A_NORMAL),
        Role.HELP: (GREY_256, -1, curses.A_NORMAL),
        Role.ERROR: (curses.COLOR_RED, -1, curses.A_BOLD),
        Role.SELECTED: (GREEN_256, -1, curses.A_BOLD),
    }
    return theme


def get_theme(name: str) -> Theme:
    if name == "mono":
        return mono_theme()
    return green_theme()
