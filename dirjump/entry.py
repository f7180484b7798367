"""Directory entries: ranking order and coloured listing."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, TextIO

YELLOW = "\033[1;33m"
GREEN = "\033[1;32m"
RED = "\033[1;31m"
BLUE = "\033[1;34m"
RESET = "\033[0m"

_TIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass
class Entry:
    """A directory path with its visit count and last visit time (epoch seconds)."""

    path: str
    rank: int = 0
    last_access: int = 0


def entry_compare(a: Entry, b: Entry) -> int:
    """Compare two entries: negative when ``a`` ranks before ``b``.

    Higher rank comes first; for equal ranks the more recent visit comes first.
    """
    if a.rank != b.rank:
        return b.rank - a.rank
    if a.last_access != b.last_access:
        return 1 if b.last_access > a.last_access else -1
    return 0


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return the entries ordered best first, as decided by :func:`entry_compare`."""
    return sorted(entries, key=cmp_to_key(entry_compare))


def _format_time(timestamp: int) -> str:
    try:
        return time.strftime(_TIME_FORMAT, time.localtime(timestamp))
    except (OverflowError, OSError, ValueError):
        return "invalid"


def format_entries(entries: Iterable[Entry]) -> str:
    """Render the entries as a numbered, coloured listing."""
    lines = []
    for index, entry in enumerate(entries):
        if entry.last_access == 0:
            path_colour, when = YELLOW, "never"
        else:
            path_colour, when = BLUE, _format_time(entry.last_access)
        lines.append(
            f"[{YELLOW}{index}{RESET}] {path_colour}{entry.path:<100}{RED} "
            f"{entry.rank:<10d} {when}{RESET}\n\n"
        )
    return "".join(lines)


def print_entries(entries: Iterable[Entry], stream: TextIO | None = None) -> None:
    """Write the listing of :func:`format_entries` to ``stream`` (stderr by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_entries(entries))