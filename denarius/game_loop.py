"""The main game screen: the running calendar, taxes and the action menu."""

from __future__ import annotations

import curses
import time
from typing import Any

from denarius.economy import Economy
from denarius.gameclock import GameClock
from denarius.kingdom import Kingdom
from denarius.menu import _draw_choices, _move, _open_window
from denarius.province import Province
from denarius.ui import center_text

WIN_HEIGHT = 40
WIN_WIDTH = 80
TICK_MS = 1000
FRAME_DELAY = 0.01
ENTER = 10
SPACE = 32

OPTIONS = ("Manage an economy", "Show stats", "Exit to the menu")

STARTING_PROVINCES = (
    ("Zatahania", 41400),
    ("Pekhla", 77500),
    ("Okinas", 59700),
    ("Daario", 26500),
    ("Asshai", 87300),
)


def show_stats(win: Any, kingdom: Kingdom, width: int) -> None:
    """Show the kingdom's treasury and size, then wait for a key."""
    win.erase()
    win.box()
    lines = (kingdom.display_denars(), kingdom.display_provinces(), "Press any key to return")
    for row, line in enumerate(lines, start=1):
        center_text(win, row, line, width)
    win.refresh()
    win.getch()


def _new_kingdom() -> Kingdom:
    provinces = [Province(name, population) for name, population in STARTING_PROVINCES]
    return Kingdom("My Kingdom", Economy(1000.0, 100.0, 50.0), provinces)


def _draw(win: Any, clock: GameClock, highlight: int) -> None:
    win.erase()
    win.box()
    win.addstr(WIN_HEIGHT - 2, 2, clock.date_string())
    win.addstr(WIN_HEIGHT - 4, 2, f"Speed: {int(clock.time_scale)}x")
    if clock.paused:
        win.addstr(WIN_HEIGHT - 3, 2, "[PAUSED]")
    _draw_choices(win, OPTIONS, highlight, WIN_WIDTH)
    win.refresh()


def game_loop(term_height: int, term_width: int) -> int:
    """Run a game until the player exits to the menu; returns 0."""
    win = _open_window(WIN_HEIGHT, WIN_WIDTH, term_height, term_width)
    win.nodelay(True)

    kingdom = _new_kingdom()
    clock = GameClock(1, 1, 1000, paused=False, time_scale=1.0)
    highlight = 0
    last_tick = time.monotonic()
    accumulated = 0.0
    last_tax_month = 0

    while True:
        _draw(win, clock, highlight)

        now = time.monotonic()
        accumulated += int((now - last_tick) * 1000) * clock.time_scale
        while accumulated >= TICK_MS:
            if not clock.paused:
                clock.advance_day()
            accumulated -= TICK_MS
        last_tick = now

        if clock.day == 1 and clock.month != last_tax_month:
            kingdom.collect_income()
            last_tax_month = clock.month

        key = win.getch()
        if key == ENTER:
            if highlight == 0:
                kingdom.manage_provinces()
                win.erase()
                win.box()
                win.refresh()
            elif highlight == 1:
                win.nodelay(False)
                show_stats(win, kingdom, WIN_WIDTH)
                win.nodelay(True)
            else:
                win.erase()
                win.refresh()
                return 0
        elif key == SPACE:
            if clock.paused:
                clock.resume()
            else:
                clock.pause()
        elif key == curses.KEY_RIGHT:
            clock.increase_time_scale()
        elif key == curses.KEY_LEFT:
            clock.decrease_time_scale()
        else:
            highlight = _move(highlight, key, len(OPTIONS))

        time.sleep(FRAME_DELAY)