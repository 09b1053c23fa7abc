"""The kingdom: its treasury, its provinces and the screens that manage them."""

from __future__ import annotations

import curses
import shutil
from dataclasses import dataclass, field
from typing import Any

from denarius.economy import Economy
from denarius.province import Province
from denarius.ui import center_text

ENTER = 10
ESC = 27
LOAN_AMOUNT = 50.0
WIN_HEIGHT = 40
WIN_WIDTH = 80

ECONOMY_OPTIONS = ("Take a loan (50 denars)", "Lower the taxes", "Return back")
PROVINCE_HELP = "Arrow keys to navigate, ENTER to apply, ESC to return"


def _terminal_size() -> tuple[int, int]:
    try:
        return curses.LINES, curses.COLS
    except AttributeError:
        size = shutil.get_terminal_size()
        return size.lines, size.columns


def _open_window(height: int, width: int) -> Any:
    term_height, term_width = _terminal_size()
    win = curses.newwin(
        height, width, (term_height - height) // 2, (term_width - width) // 2
    )
    win.box()
    win.keypad(True)
    win.refresh()
    return win


def _close_window(win: Any) -> None:
    win.erase()
    win.refresh()


@dataclass
class Kingdom:
    """A named realm with a treasury and a list of provinces."""

    name: str
    economy: Economy
    provinces: list[Province] = field(default_factory=list)

    def collect_income(self) -> None:
        """Tax every province and settle the month's accounts."""
        total = sum(province.update_income() for province in self.provinces)
        self.economy.add_income(total)
        self.economy.update_monthly()

    def display_denars(self) -> str:
        """The treasury as shown to the player."""
        return f"Denars: {self.economy.denars:.2f}"

    def display_provinces(self) -> str:
        """The number of provinces as shown to the player."""
        return f"Provinces: {len(self.provinces)}"

    def manage_economy(self) -> None:
        """Run the economy screen until the player chooses to return."""
        win = _open_window(WIN_HEIGHT, WIN_WIDTH)
        highlight = 0
        while True:
            win.erase()
            win.box()
            for index, option in enumerate(ECONOMY_OPTIONS):
                if index == highlight:
                    win.attron(curses.A_REVERSE)
                center_text(win, index + 1, option, WIN_WIDTH)
                win.attroff(curses.A_REVERSE)
            win.refresh()

            key = win.getch()
            if key == curses.KEY_UP:
                highlight = (highlight - 1) % len(ECONOMY_OPTIONS)
            elif key == curses.KEY_DOWN:
                highlight = (highlight + 1) % len(ECONOMY_OPTIONS)
            elif key == ENTER:
                if highlight == 0:
                    self.economy.take_loan(LOAN_AMOUNT)
                elif highlight == 2:
                    _close_window(win)
                    return

    def _draw_provinces(self, win: Any, highlight: int, action: int) -> None:
        win.erase()
        win.box()
        for index, province in enumerate(self.provinces):
            y = 2 + index * 3
            win.addstr(
                y,
                2,
                f"{province.name} - Population: {province.population}, "
                f"Income: {province.income:.2f}",
            )
            for slot, (symbol, x) in enumerate(
                (("+", WIN_WIDTH - 10), ("-", WIN_WIDTH - 8))
            ):
                selected = index == highlight and action == slot
                if selected:
                    win.attron(curses.A_REVERSE)
                win.addstr(y, x, symbol)
                if selected:
                    win.attroff(curses.A_REVERSE)
        center_text(win, WIN_HEIGHT - 3, PROVINCE_HELP, WIN_WIDTH)
        win.refresh()

    def manage_provinces(self) -> None:
        """Run the tax screen until the player presses ESC."""
        win = _open_window(WIN_HEIGHT, WIN_WIDTH)
        highlight = 0
        action = 0  # 0 raises taxes, 1 lowers them
        while True:
            self._draw_provinces(win, highlight, action)
            key = win.getch()
            count = len(self.provinces)
            if key == curses.KEY_UP and count:
                highlight = (highlight - 1) % count
            elif key == curses.KEY_DOWN and count:
                highlight = (highlight + 1) % count
            elif key in (curses.KEY_LEFT, curses.KEY_RIGHT):
                action = 1 - action
            elif key == ENTER and count:
                province = self.provinces[highlight]
                if action == 0:
                    province.increase_multiplier()
                else:
                    province.decrease_multiplier()
            elif key == ESC:
                _close_window(win)
                return