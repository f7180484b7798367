"""Directory scanning, the visit file and the config file."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, TextIO

from dirjump.entry import Entry


def _parse_record(line: str) -> tuple[str, int, int] | None:
    """Split a ``path count time`` line; ``None`` when it does not have that shape."""
    fields = line.split()
    if len(fields) < 3:
        return None
    try:
        return fields[0], int(fields[1]), int(fields[2])
    except ValueError:
        return None


def _join(base: str, name: str) -> str:
    return base + name if base.endswith("/") else f"{base}/{name}"


def _walk_dirs(root: str) -> Iterator[str]:
    """Yield every directory below ``root`` depth first, without following links."""
    try:
        first = os.scandir(root)
    except OSError:
        return
    stack = [(root, first)]
    try:
        while stack:
            base, iterator = stack[-1]
            try:
                item = next(iterator)
            except (StopIteration, OSError):
                iterator.close()
                stack.pop()
                continue
            try:
                is_dir = item.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if not is_dir:
                continue
            full_path = _join(base, item.name)
            yield full_path
            try:
                stack.append((full_path, os.scandir(full_path)))
            except OSError:
                pass
    finally:
        for _, iterator in stack:
            iterator.close()


def scan_and_write_dirs(path: str, out: TextIO) -> None:
    """Write a ``<dir> 0 0`` line for every directory found below ``path``."""
    for directory in _walk_dirs(path):
        out.write(f"{directory} 0 0\n")


def update_visit(target_path: str, new_time: int, visit_path: str) -> None:
    """Count one visit to ``target_path`` at ``new_time`` in the visit file.

    An existing record gets its count raised by one and its time replaced;
    otherwise a new record with count 1 is appended. Malformed lines are dropped.
    Raises OSError when the file cannot be read or replaced.
    """
    tmp_path = f"{visit_path}_tmp"
    found = False
    with open(visit_path, encoding="utf-8") as source, open(
        tmp_path, "w", encoding="utf-8"
    ) as target:
        for line in source:
            record = _parse_record(line)
            if record is None:
                continue
            path, count, _ = record
            if path == target_path:
                target.write(f"{path} {count + 1} {int(new_time)}\n")
                found = True
            else:
                target.write(line if line.endswith("\n") else line + "\n")
        if not found:
            target.write(f"{target_path} 1 {int(new_time)}\n")
    os.replace(tmp_path, visit_path)


def _recorded_paths(filename: str) -> set[str]:
    try:
        with open(filename, encoding="utf-8") as handle:
            return {fields[0] for fields in map(str.split, handle) if fields}
    except OSError:
        return set()


def path_exists(filename: str, path: str) -> bool:
    """Tell whether ``path`` is the first field of some line in ``filename``."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return any(fields and fields[0] == path for fields in map(str.split, handle))
    except OSError:
        return False


def add_new_visits(entries: Iterable[Entry], visit_path: str) -> None:
    """Append a ``<path> 0 0`` record for each entry not yet in the visit file."""
    known = _recorded_paths(visit_path)
    try:
        handle = open(visit_path, "a", encoding="utf-8")
    except OSError:
        return
    with handle:
        for entry in entries:
            if entry.path not in known:
                handle.write(f"{entry.path} 0 0\n")
                known.add(entry.path)


def scan_config(config: str) -> list[str]:
    """Read the allowed paths from a config file, skipping ``[section]`` lines.

    Raises OSError when the file cannot be opened.
    """
    with open(config, encoding="utf-8") as handle:
        lines = (line.split("\n", 1)[0] for line in handle)
        return [line for line in lines if not line.startswith("[")]


def config_result(config: Iterable[str], path: str) -> bool:
    """Tell whether ``path`` is listed in the config."""
    return path in config