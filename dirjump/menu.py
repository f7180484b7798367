"""Full-screen picker for choosing one entry from a list."""

from __future__ import annotations

import curses
import os
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator

from dirjump.entry import Entry

PAIR_LINE = 1
PAIR_RED = 2
PAIR_BLUE = 3
PAIR_YELLOW = 4

_ENTER = ord("\n")


def visible_offset(choice: int, height: int) -> int:
    """Index of the first row shown so that ``choice`` stays on screen.

    Two rows of the screen are taken by the frame lines.
    """
    visible_count = height - 2
    if choice >= visible_count:
        return choice - visible_count + 1
    return 0


def next_choice(choice: int, key: int, count: int) -> int:
    """Move the selection for an arrow key, wrapping round; other keys keep it."""
    if key == curses.KEY_UP:
        return (choice - 1 + count) % count
    if key == curses.KEY_DOWN:
        return (choice + 1) % count
    return choice


def format_row(index: int, entry: Entry) -> list[tuple[str, int]]:
    """Text pieces of one menu row, each with the colour pair it is drawn in.

    Entries never visited (rank and time both zero) show their path in yellow,
    the others in blue.
    """
    unvisited = entry.rank == 0 and entry.last_access == 0
    path_pair = PAIR_YELLOW if unvisited else PAIR_BLUE
    return [
        (f"[{index}]", PAIR_RED),
        (f" {entry.path}", path_pair),
        (f" {entry.rank} {entry.last_access}", PAIR_RED),
    ]


@contextmanager
def _stdout_to_stderr() -> Iterator[None]:
    """Send everything written to file descriptor 1 to stderr for a while.

    The screen is then drawn on stderr, keeping stdout free for the result.
    """
    sys.stdout.flush()
    saved = os.dup(1)
    try:
        os.dup2(2, 1)
        yield
    finally:
        sys.stdout.flush()
        os.dup2(saved, 1)
        os.close(saved)


def _colour(pair: int, enabled: bool) -> int:
    return curses.color_pair(pair) if enabled else 0


def _draw_line(screen, y: int, width: int, colours: bool) -> None:
    line = "<" + "-" * max(width - 2, 0) + ">"
    try:
        screen.addstr(y, 0, line, _colour(PAIR_LINE, colours))
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _run_menu(screen, options: list[Entry]) -> Entry:
    colours = curses.has_colors()
    if colours:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_LINE, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_RED, curses.COLOR_RED, -1)
        curses.init_pair(PAIR_BLUE, curses.COLOR_BLUE, -1)
        curses.init_pair(PAIR_YELLOW, curses.COLOR_YELLOW, -1)
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)

    choice = 0
    while True:
        screen.erase()
        height, width = screen.getmaxyx()
        offset = visible_offset(choice, height)
        _draw_line(screen, 0, width, colours)

        stop = min(len(options), offset + max(height - 2, 0))
        for row, idx in enumerate(range(offset, stop), start=1):
            reverse = curses.A_REVERSE if idx == choice else 0
            for position, (text, pair) in enumerate(format_row(idx, options[idx])):
                attr = _colour(pair, colours) | reverse
                try:
                    if position == 0:
                        screen.addstr(row, 0, text, attr)
                    else:
                        screen.addstr(text, attr)
                except curses.error:
                    pass

        _draw_line(screen, height - 1, width, colours)
        screen.refresh()

        key = screen.getch()
        if key == _ENTER:
            return options[choice]
        choice = next_choice(choice, key, len(options))


def interactive_menu(entries: Iterable[Entry]) -> Entry:
    """Let the user pick an entry with the arrow keys and Enter; return it.

    Raises ValueError when there is nothing to choose from.
    """
    options = list(entries)
    if not options:
        raise ValueError("no entries to choose from")
    with _stdout_to_stderr():
        return curses.wrapper(_run_menu, options)