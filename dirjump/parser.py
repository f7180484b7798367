"""Finding directories by name in the visit and history files."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Sequence, TextIO

from dirjump.entry import RED, RESET, Entry, sort_entries
from dirjump.scan import config_result, scan_config
from dirjump.utils import print_out


def is_match(string: str, name: str) -> str | None:
    """Return ``string`` when its last path component equals ``name``."""
    slash = string.rfind("/")
    if slash < 0:
        return None
    return string if string[slash + 1 :] == name else None


def _read_records(lines: Iterable[str]) -> list[Entry]:
    records = []
    for line in lines:
        fields = line.split()
        if len(fields) < 3:
            continue
        try:
            records.append(Entry(fields[0], int(fields[1]), int(fields[2])))
        except ValueError:
            continue
    return records


def parse_history_file(filename: str, name: str, config: str) -> list[Entry]:
    """Entries of ``filename`` whose last component is ``name``, best first.

    Entries listed in the config file are preferred; when none of the matches
    is listed there, every match is returned. Raises OSError when either file
    cannot be read.
    """
    with open(filename, encoding="utf-8") as handle:
        allowed = scan_config(config)
        records = _read_records(handle)

    matches = [record for record in records if is_match(record.path, name)]
    preferred = [record for record in matches if config_result(allowed, record.path)]
    return sort_entries(preferred or matches)


def _try_parse(filename: str, name: str, config: str) -> list[Entry] | None:
    try:
        return parse_history_file(filename, name, config)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return None


def parse_config_and_print_matches(
    config_visit: str,
    visit_path: str,
    history_path: str,
    arg: str,
    out: TextIO | None = None,
    choose: Callable[[Sequence[Entry]], Entry] | None = None,
) -> int:
    """Print the directory named ``arg``; return the exit status.

    The visit file is searched first and the history file only when the visit
    file holds no match. One match is printed at once; several are offered
    for choosing. Returns 1 when nothing is found, 0 otherwise.
    """
    target = sys.stdout if out is None else out
    entries = _try_parse(visit_path, arg, config_visit)
    if entries is not None and not entries:
        entries = _try_parse(history_path, arg, config_visit)

    if not entries:
        sys.stderr.write(f"{RED}Nothing found for{RESET}: {arg}\n")
        return 1
    if len(entries) == 1:
        target.write(f"{entries[0].path}\n")
    else:
        print_out(entries, visit_path, choose, target)
    return 0