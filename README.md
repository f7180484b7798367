# dirjump

`dirjump` finds a directory by its last path component and prints its full
path, so a shell function can `cd` into it. Directories you have chosen from
the menu before are ranked first: by how many times you picked them and, for
equal counts, by how recently.

It needs nothing beyond the Python standard library (the menu uses `curses`).

## Installation

```
pip install .
```

## Usage

First build the index of every directory on the system:

```
dirjump --update
```

This walks the tree from `/` (without following symbolic links) and writes
each directory it finds into the history file as `<path> 0 0`. The
directory holding the history file must already exist; if the file cannot
be created, a message is printed and the exit status is 1.

Then look a directory up by name:

```
dirjump projects
```

- If exactly one directory named `projects` matches, its path is printed to
  standard output. No visit is recorded in this case.
- If several match, a full-screen menu opens. Use the up and down arrow keys
  (the selection wraps round) and Enter to pick one. The chosen path is
  printed, its visit count goes up by one with the current time as its last
  visit, and every other candidate not yet in the visit file is added to it
  as `<path> 0 0`.
- If nothing matches, `Nothing found for: projects` goes to standard error
  and the exit status is 1.

Run without an argument, it prints a usage line and exits with status 1; it
also exits with status 1 when `HOME` is not set.

The menu and the messages are drawn on standard error, so only the chosen
path reaches standard output. A shell function can wrap it:

```
j() { cd "$(dirjump "$1")"; }
```

## Files

All three files live under `$HOME/Desktop/Project/jump/config/`:

| File            | Contents                                              |
|-----------------|-------------------------------------------------------|
| `.jump_history` | every directory found by `--update`, one per line     |
| `.jump_visit`   | `path count last-visit-time` for directories seen in the menu |
| `.jump.conf`    | preferred paths, one per line; lines starting with `[` are ignored |

Lookups try the visit file first and fall back to the history file only when
the visit file holds no match. Within either file, matches listed in
`.jump.conf` are preferred; if none of the matches is listed there, every
match is offered. Matches are ordered by visit count, then by last visit
time, most recent first.

Both `.jump_visit` and `.jump.conf` have to exist (they may be empty): if
either cannot be read, the lookup reports that nothing was found and the
history file is not consulted.

## Using it from Python

- `dirjump.cli.run(argv)` runs the command with a list of arguments and
  returns the exit status; `dirjump.cli.default_paths(home)` gives the three
  file locations.
- `dirjump.parser.parse_history_file(filename, name, config)` returns the
  matching `Entry` objects, best first.
- `dirjump.parser.parse_config_and_print_matches(...)` performs a full
  lookup; its `out` and `choose` arguments replace standard output and the
  menu.
- `dirjump.entry.Entry` holds `path`, `rank` and `last_access`;
  `sort_entries` and `entry_compare` give the ranking order, and
  `format_entries` / `print_entries` render a coloured listing.
- `dirjump.scan` reads and updates the visit and config files
  (`update_visit`, `add_new_visits`, `path_exists`, `scan_config`,
  `config_result`) and writes the directory index (`scan_and_write_dirs`).
- `dirjump.menu.interactive_menu(entries)` shows the picker and returns the
  chosen entry.

## What it does not do

- It cannot change the directory of your shell by itself; it only prints the
  path, so a shell function such as the one above is needed.
- The file locations are fixed under `$HOME/Desktop/Project/jump/config/`;
  there is no option to move them.
- The index is only refreshed when you run `dirjump --update`.

## Testing

```
pip install .[test]
pytest
```