import curses
from unittest import mock

import pytest

from denarius.app import main

DOWN, UP = curses.KEY_DOWN, curses.KEY_UP


def keyed(keys):
    return mock.MagicMock(**{"getch.side_effect": list(keys)})


def shown(target):
    return {entry.args[-1] for entry in target.addstr.call_args_list}


def launch(menu_keys, *others):
    stdscr = mock.MagicMock(**{"getmaxyx.return_value": (50, 120)})
    menu = keyed(menu_keys)
    with mock.patch("curses.wrapper", side_effect=lambda func: func(stdscr)), \
            mock.patch("curses.curs_set"), \
            mock.patch("curses.flushinp") as flushinp, \
            mock.patch("curses.newwin", side_effect=[menu, *others]) as newwin, \
            mock.patch("time.monotonic", return_value=0.0), \
            mock.patch("time.sleep"):
        assert main() == 0
    return stdscr, menu, newwin, flushinp


def test_menu_window_is_centred():
    _, menu, newwin, _ = launch([DOWN] * 3 + [10])
    newwin.assert_called_once_with(10, 30, 20, 45)
    assert "Exit" in shown(menu)


def test_credits_clear_the_screen_twice():
    credits_window = keyed([10])
    stdscr, *_ = launch([DOWN, DOWN, 10, UP, 10], credits_window)
    assert "Back" in shown(credits_window)
    assert stdscr.clear.call_count == 2


def test_game_draws_start_date():
    game_window = keyed([UP, 10])
    launch([10, UP, 10], game_window)
    assert "Date: 1 January, 1000" in shown(game_window)