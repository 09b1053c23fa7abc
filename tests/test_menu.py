import curses
from unittest import mock

import pytest

from denarius.menu import run_menu

CHOICES = ["Start the game", "Settings", "Credits", "Exit"]
UP, DOWN = curses.KEY_UP, curses.KEY_DOWN


def scripted(keys):
    return mock.MagicMock(**{"getch.side_effect": list(keys)})


def last_frame(win):
    """Rows written since the last erase, as (row, text, reversed)."""
    frame, lit = [], False
    for name, args, _ in win.method_calls:
        if name == "erase":
            frame = []
        elif name in ("attron", "attroff") and args == (curses.A_REVERSE,):
            lit = name == "attron"
        elif name == "addstr":
            frame.append((args[0], args[2], lit))
    return frame


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([10], 0),
        ([DOWN, DOWN, 10], 2),
        ([UP, 10], len(CHOICES) - 1),
        ([DOWN] * len(CHOICES) + [10], 0),
        ([ord("x"), -1, DOWN, 10], 1),
    ],
)
def test_selection(keys, expected):
    win = scripted(keys)
    assert run_menu(win, CHOICES, 30) == expected
    assert win.getch.call_count == len(keys)
    assert [text for _, text, lit in last_frame(win) if lit] == [CHOICES[expected]]


def test_choices_drawn_on_consecutive_rows():
    win = scripted([10])
    run_menu(win, CHOICES, 30)
    assert [(row, text) for row, text, _ in last_frame(win)] == list(
        enumerate(CHOICES, start=1)
    )
    assert win.box.call_count == 1