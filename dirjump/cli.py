"""Command line entry point: jump to a directory by name."""

from __future__ import annotations

import os
import sys
from typing import NamedTuple, Sequence

from dirjump.entry import RED, RESET
from dirjump.parser import parse_config_and_print_matches
from dirjump.scan import scan_and_write_dirs

PROGRAM = "jump"


class JumpPaths(NamedTuple):
    """Locations of the data files."""

    history: str
    visit: str
    config: str


def default_paths(home: str) -> JumpPaths:
    """The history, visit and config file paths under ``home``."""
    base = os.path.join(home, "Desktop", "Project", "jump", "config")
    return JumpPaths(
        history=os.path.join(base, ".jump_history"),
        visit=os.path.join(base, ".jump_visit"),
        config=os.path.join(base, ".jump.conf"),
    )


def run(argv: Sequence[str]) -> int:
    """Run with the given arguments (program name excluded); return the status.

    ``--update`` rebuilds the history from every directory under ``/``; any
    other argument is a directory name to look up.
    """
    if not argv:
        sys.stderr.write(f"{RED}Usage: {PROGRAM} [--update|search_term]{RESET}\n")
        return 1

    arg = argv[0]
    home = os.environ.get("HOME")
    if not home:
        sys.stderr.write(f"{RED}HOME environment variable not set{RESET}\n")
        return 1

    paths = default_paths(home)
    if arg == "--update":
        try:
            handle = open(paths.history, "w", encoding="utf-8")
        except OSError:
            sys.stderr.write(f"{RED}Error creating history{RESET}")
            return 1
        with handle:
            scan_and_write_dirs("/", handle)
        return 0

    return parse_config_and_print_matches(paths.config, paths.visit, paths.history, arg)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    return run(sys.argv[1:] if argv is None else list(argv))


if __name__ == "__main__":
    sys.exit(main())