"""A vertical selection menu drawn in a curses window, and shared menu helpers."""

from __future__ import annotations

import curses
from typing import Any, Sequence

from denarius.ui import center_text

ENTER = 10

_STEPS = {curses.KEY_UP: -1, curses.KEY_DOWN: 1}


def _open_window(height: int, width: int, term_height: int, term_width: int) -> Any:
    """Create a boxed window centred on the terminal with keypad input on."""
    win = curses.newwin(
        height, width, (term_height - height) // 2, (term_width - width) // 2
    )
    win.box()
    win.keypad(True)
    win.refresh()
    return win


def _move(highlight: int, key: int, count: int) -> int:
    """Move the highlight up or down one entry, wrapping at both ends."""
    return (highlight + _STEPS.get(key, 0)) % count


def _draw_choices(win: Any, choices: Sequence[str], highlight: int, width: int) -> None:
    """Draw the choices on consecutive rows from row 1, the highlighted one reversed."""
    for index, choice in enumerate(choices):
        if index == highlight:
            win.attron(curses.A_REVERSE)
        center_text(win, index + 1, choice, width)
        win.attroff(curses.A_REVERSE)


def run_menu(win: Any, choices: Sequence[str], win_width: int) -> int:
    """Let the user pick one of the choices and return its index."""
    highlight = 0
    while True:
        win.erase()
        win.box()
        _draw_choices(win, choices, highlight, win_width)
        win.refresh()

        key = win.getch()
        if key == ENTER:
            return highlight
        highlight = _move(highlight, key, len(choices))