"""Entry point: the title menu that leads to the game and the credits."""

from __future__ import annotations

import curses
from typing import Any, Sequence

from denarius.credits import show_credits
from denarius.game_loop import game_loop
from denarius.menu import run_menu

WIN_HEIGHT = 10
WIN_WIDTH = 30
MENU_CHOICES = ("Start the game", "Settings", "Credits", "Exit")


def _redraw_menu(stdscr: Any, win: Any) -> None:
    stdscr.clear()
    stdscr.refresh()
    win.erase()
    win.box()
    win.refresh()


def _run(stdscr: Any) -> int:
    try:
        curses.curs_set(0)
    except curses.error:
        pass

    term_height, term_width = stdscr.getmaxyx()
    win = curses.newwin(
        WIN_HEIGHT,
        WIN_WIDTH,
        (term_height - WIN_HEIGHT) // 2,
        (term_width - WIN_WIDTH) // 2,
    )
    win.keypad(True)
    stdscr.refresh()

    while True:
        curses.flushinp()
        selected = run_menu(win, MENU_CHOICES, WIN_WIDTH)
        if selected == 0:
            stdscr.clear()
            stdscr.refresh()
            game_loop(term_height, term_width)
            _redraw_menu(stdscr, win)
        elif selected == 2:
            stdscr.clear()
            stdscr.refresh()
            show_credits(term_height, term_width)
            _redraw_menu(stdscr, win)
        elif selected == 3:
            break

    win.refresh()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the terminal interface and return the exit status."""
    return curses.wrapper(_run)


if __name__ == "__main__":
    raise SystemExit(main())