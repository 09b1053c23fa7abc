"""The credits screen."""

from __future__ import annotations

import curses

from denarius.menu import _open_window
from denarius.ui import center_text

WIN_HEIGHT = 10
WIN_WIDTH = 40
CREDITS = ("Main Scripter: frynor", "Main Designer: frynor")
_CONFIRM_KEYS = (ord("\n"), ord("\r"), curses.KEY_ENTER)


def show_credits(term_height: int, term_width: int) -> None:
    """Show the credits until the player presses Enter."""
    win = _open_window(WIN_HEIGHT, WIN_WIDTH, term_height, term_width)

    for row, line in enumerate(CREDITS, start=1):
        center_text(win, row, line, WIN_WIDTH)
    win.attron(curses.A_REVERSE)
    center_text(win, WIN_HEIGHT - 2, "Back", WIN_WIDTH)
    win.attroff(curses.A_REVERSE)
    win.refresh()

    while win.getch() not in _CONFIRM_KEYS:
        pass

    win.erase()
    win.refresh()