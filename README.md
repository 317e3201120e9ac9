# treasurehunt

A small command-line manager for treasure hunts. It works in the current
directory.

- Each hunt lives in its own directory under `hunts/`.
- A hunt directory holds `treasure.txt`, with one treasure per line.
- It also holds `logged_hunt.txt`, which records every command run against the hunt.
- When a hunt is created, a symbolic link to its log is placed in `logs/` as
  `logged_hunt-<hunt_id>.txt`.
- When a hunt is removed, its log is appended to `masterLog.txt`.

## Installation

```
pip install .
```

## Preparing a working directory

The manager needs these in the directory it is run from:

- a `hunts/` directory, for every command;
- a `logs/` directory, when a new hunt is created;
- an existing `masterLog.txt` file, when a hunt is removed.

```
mkdir hunts logs
touch masterLog.txt
```

## Usage

```
treasure-manager --add <hunt_id> <treasure_id> [<treasure_id> ...]
treasure-manager --list <hunt_id>
treasure-manager --view <hunt_id> <treasure_id>
treasure-manager --remove_treasure <hunt_id> <treasure_id>
treasure-manager --remove_hunt <hunt_id>
```

### `--add`

Creates the hunt if it does not exist yet. It then asks for each treasure's
details in turn:

- user name: the first word of the line;
- latitude: a float;
- longitude: a float;
- clue: the rest of the line;
- value: an integer.

Each treasure is appended to `treasure.txt` as a line like this:

```
gold, alice, 45.500000, 25.100000, under the palm, 100
```

### `--list`

Prints a header line and then every recorded treasure. The header holds:

- the hunt's name;
- the size of its directory;
- the last modification time of its treasure file.

### `--view`

Prints the details of every record with the given treasure id. If there is
none, it reports that on standard error.

### `--remove_treasure`

Drops all records with the given treasure id from the hunt.

### `--remove_hunt`

Appends to `masterLog.txt`, in order:

1. the hunt's name;
2. its log;
3. the command itself.

It then deletes the hunt directory and its log link.

### Exit status

- 0: the command succeeded.
- 1: the command was unknown or arguments are missing. The usage text is printed.
- 255: the operation failed, for example because the hunt is missing. The reason
  is printed on standard error.

## Using it from Python

```python
from treasurehunt.manager import TreasureManager
from treasurehunt.records import Treasure

manager = TreasureManager(".")
manager.add("island", [Treasure("gold", "alice", 45.5, 25.1, "under the palm", 100)],
            command=["--add", "island", "gold"])
for treasure in manager.view("island", "gold", command=["--view", "island", "gold"]):
    print(treasure.describe())
```

The `TreasureManager` methods return their results instead of printing them:

| Method | Returns |
| --- | --- |
| `add` | `True` when the hunt was newly created |
| `list_hunt` | a `HuntSummary` |
| `view` | a list of `Treasure` records |
| `remove_treasure` | how many records were dropped |

Failures raise `treasurehunt.manager.HuntError`.

`Treasure.from_line` and `Treasure.to_line` convert records to and from lines
of the treasure file. `treasurehunt.cli.prompt_treasure` asks for a treasure's
fields through any line reader and writer.

## What it does not do

There is no monitor or hub process that watches hunts or serves listings to
other programs. Every operation is a single command run from the shell.

## Running the tests

```
pip install .[test]
pytest
```