import curses

import pytest

from dirjump.entry import Entry
from dirjump.menu import (
    PAIR_BLUE,
    PAIR_RED,
    PAIR_YELLOW,
    format_row,
    interactive_menu,
    next_choice,
    visible_offset,
)


def test_offset_zero_while_choice_fits():
    assert visible_offset(0, 10) == 0


@pytest.mark.parametrize("height", [3, 5, 10, 24])
@pytest.mark.parametrize("choice", range(0, 40))
def test_choice_always_visible(choice, height):
    offset = visible_offset(choice, height)
    assert offset >= 0
    assert 0 <= choice - offset < height - 2


def test_down_wraps_to_first():
    assert next_choice(4, curses.KEY_DOWN, 5) == 0


def test_up_wraps_to_last():
    assert next_choice(0, curses.KEY_UP, 5) == 4


def test_down_then_up_returns():
    moved = next_choice(2, curses.KEY_DOWN, 7)
    assert next_choice(moved, curses.KEY_UP, 7) == 2


def test_other_key_keeps_choice():
    assert next_choice(3, ord("x"), 7) == 3


def test_row_of_unvisited_entry():
    row = format_row(3, Entry("/a/b", 0, 0))
    assert row[0] == ("[3]", PAIR_RED)
    assert row[1] == (" /a/b", PAIR_YELLOW)
    assert row[2] == (" 0 0", PAIR_RED)


def test_row_of_visited_entry():
    row = format_row(1, Entry("/a/b", 10, 1000))
    assert row[1] == (" /a/b", PAIR_BLUE)
    assert row[2] == (" 10 1000", PAIR_RED)


def test_menu_rejects_empty_list():
    with pytest.raises(ValueError):
        interactive_menu([])