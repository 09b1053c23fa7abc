"""Helpers for placing text inside a curses window."""

from __future__ import annotations

from typing import Any


def center_text(win: Any, row: int, text: str, win_width: int) -> None:
    """Write text centred on the given row."""
    x = (win_width - len(text)) // 2
    win.addstr(row, x, text)


def left_text(win: Any, row: int, text: str, win_width: int) -> None:
    """Write text against the window's right border on the given row."""
    x = win_width - len(text)
    win.addstr(row, x - 1, text)