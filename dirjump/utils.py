"""Terminal helpers and the choose-and-record step."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Sequence, TextIO

from dirjump.entry import RED, RESET, Entry
from dirjump.scan import add_new_visits, update_visit

_DEFAULT_WIDTH = 80


def terminal_width() -> int:
    """Width in columns of the terminal on stderr, or 80 when there is none."""
    try:
        return os.get_terminal_size(2).columns
    except (OSError, ValueError):
        return _DEFAULT_WIDTH


def print_out(
    entries: Sequence[Entry],
    visit_path: str,
    choose: Callable[[Sequence[Entry]], Entry] | None = None,
    out: TextIO | None = None,
) -> Entry:
    """Let the user choose an entry, print its path and record the visit.

    The chosen path gets one more visit at the current time, and every listed
    entry not yet in the visit file is added to it. Returns the chosen entry.
    """
    if choose is None:
        from dirjump.menu import interactive_menu

        choose = interactive_menu
    target = sys.stdout if out is None else out

    chosen = choose(entries)
    target.write(f"{chosen.path}\n")
    target.flush()
    try:
        update_visit(chosen.path, int(time.time()), visit_path)
    except OSError as exc:
        sys.stderr.write(f"{RED}File open: {exc}{RESET}\n")
    add_new_visits(entries, visit_path)
    return chosen