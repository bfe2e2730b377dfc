# autorename

Watch the sub-folders of a working folder and give each new image a name
taken, in order, from a list you supply. This is useful when a camera or
scanner drops pictures into folders and every shot must carry a fixed name.

## How it works

1. You name a working folder. It must already exist.
2. You list the sub-folders to create inside it.
3. You list the names to give, in order.

When a session starts:

- everything already inside the working folder is **deleted**;
- the sub-folders are created afresh;
- each sub-folder is watched on its own.

Every new `.jpg`, `.jpeg` or `.png` file that appears in a sub-folder is
renamed to the next name in the list, and keeps its extension. The check on
the extension is case-sensitive. A file moved into the folder counts as new.
Before each rename the watcher waits half a second, so the file can finish
being written.

Each sub-folder hands out the whole list of names itself, starting from the
first. A sub-folder is done once every name has been used. The session ends
when all sub-folders are done.

## Installation

```
pip install .
```

## Command line

```
autorename ROOT -d SUBFOLDER [-d SUBFOLDER ...] [-n NAME ...] [-c CONFIG]
```

| Option | Meaning |
| --- | --- |
| `ROOT` | Working folder. It must exist. |
| `-d`, `--dir` | Sub-folder to create and watch. Repeat it for more sub-folders. |
| `-n`, `--name` | Name for the next image. Repeat it for more names. |
| `-c`, `--config` | File that holds the saved naming order. The default is `config.json` in the current directory. |
| `--about` | Prints the program name and version. |
| `--version` | Prints the version. |

If no `-n` is given, the names saved in the configuration file are used. If
there is no such file, a notice is printed and no names are used.

The command checks its settings before it changes anything. It fails with
exit status 1 in these cases:

- the working folder is missing or empty;
- a sub-folder name is empty;
- a name in the list is empty.

Once the settings pass, the naming order is saved to the configuration file
as a JSON array. The session then starts and prints `renaming...`, and
prints `done` when it finishes. Press Ctrl+C to stop early: it prints
`stopped` and exits with status 130.

## Using it from Python

```python
from autorename.session import RenameSession

session = RenameSession("/path/to/work", ["front", "back"], ["a", "b", "c"])
session.start()        # validates, empties the working folder, starts watching
session.wait(None)     # True once every sub-folder has used all names
print(session.results) # renamed paths, one list per sub-folder
```

`RenameSession` provides these members:

- `validate()` raises `ValidationError` if a setting is unusable.
- `prepare_workspace()` only resets the folder.
- `start()` validates, resets the folder and starts one watcher per sub-folder.
- `stop()` asks every watcher to finish, and returns once they have.
- `done` tells whether every watcher has finished.

The other modules can be used on their own:

- `autorename.config.read_config(path)` returns the saved list of names. It
  raises `FileNotFoundError` when the file is missing and `ConfigError` for
  other problems.
- `autorename.config.save_config(names, path)` writes the list as compact JSON.
- `autorename.renamer.DirectoryRenamer(directory, names, settle_delay)` handles
  a single folder. `run(stop_event)` watches until every name is used or the
  event is set. `handle_created(path)` renames one file directly.
- `autorename.renamer.monitor_dir(root_path, dir_name, names, stop_event)` is a
  shorthand for watching `root_path/dir_name`.
- `autorename.renamer.is_image_file(path)` checks the extension.

## What it does not do

The package works only from the command line and from Python. It has no
graphical window. That means no folder picker, no help page and no about
dialog. The working folder, the sub-folders and the names are given as
command-line options or as arguments.

## Running the tests

```
pip install .[test]
pytest
```