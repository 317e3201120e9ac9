"""Command line front end for managing treasure hunts."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from treasurehunt.manager import HuntError, TreasureManager
from treasurehunt.records import Treasure

_PROG = "treasurehunt"
_USAGE = (
    "You have these options:\n"
    " --add <hunt_id> <treasure_id> (Optional more <treasure_id>'s)\n"
    " --list <hunt_id>\n"
    " --view <hunt_id> <treasure_id>\n"
    " --remove_treasure <hunt_id> <treasure_id>\n"
    " --remove_hunt <hunt_id>\n"
)


class _UsageError(Exception):
    pass


def _read_word(read_line: Callable[[], str]) -> str:
    while True:
        line = read_line()
        if not line:
            raise HuntError("unexpected end of input")
        words = line.split()
        if words:
            return words[0]


def _read_number(read_line: Callable[[], str], convert, name: str):
    word = _read_word(read_line)
    try:
        return convert(word)
    except ValueError:
        raise HuntError(f"invalid {name}: {word!r}") from None


def prompt_treasure(
    treasure_id: str, read_line: Callable[[], str], write: Callable[[str], object]
) -> Treasure:
    """Ask for the fields of a treasure and return it."""
    write(f"Now, let's add the treasure: {treasure_id}\n")
    write("User(String): ")
    user = _read_word(read_line)
    write("\n")
    write("Latitude(Float): ")
    latitude = _read_number(read_line, float, "latitude")
    write("\n")
    write("Longitude(Float): ")
    longitude = _read_number(read_line, float, "longitude")
    write("\n")
    write("Clue(Text): ")
    clue = read_line()
    if not clue:
        raise HuntError("unexpected end of input")
    clue = clue[:-1] if clue.endswith("\n") else clue
    write("\n")
    write("Value(Integer):")
    value = _read_number(read_line, int, "value")
    write("\n")
    return Treasure(treasure_id, user, latitude, longitude, clue, value)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _need(args: Sequence[str], count: int) -> None:
    if len(args) < count:
        raise _UsageError


def _add(manager: TreasureManager, args: Sequence[str], command: list[str]) -> None:
    _need(args, 1)
    hunt_id, *treasure_ids = args
    treasures = (prompt_treasure(tid, sys.stdin.readline, _write) for tid in treasure_ids)
    manager.add(hunt_id, treasures, command)


def _list(manager: TreasureManager, args: Sequence[str], command: list[str]) -> None:
    _need(args, 1)
    summary = manager.list_hunt(args[0], command)
    print(
        f"{summary.hunt_id}, {summary.size} bytes, "
        f"last modification: {summary.modified:%d.%m.%Y %H:%M:%S}"
    )
    print("-" * 64)
    print(summary.records, end="")


def _view(manager: TreasureManager, args: Sequence[str], command: list[str]) -> None:
    _need(args, 2)
    hunt_id, treasure_id = args[0], args[1]
    found = manager.view(hunt_id, treasure_id, command)
    print(f"---{treasure_id}---")
    for treasure in found:
        print(treasure.describe())
    if not found:
        print(
            f"The treasure '{treasure_id}' does not exist in the hunt '{hunt_id}'",
            file=sys.stderr,
        )


def _remove_treasure(manager: TreasureManager, args: Sequence[str], command: list[str]) -> None:
    _need(args, 2)
    manager.remove_treasure(args[0], args[1], command)


def _remove_hunt(manager: TreasureManager, args: Sequence[str], command: list[str]) -> None:
    _need(args, 1)
    manager.remove_hunt(args[0], command)


_COMMANDS = {
    "--add": _add,
    "--list": _list,
    "--view": _view,
    "--remove_treasure": _remove_treasure,
    "--remove_hunt": _remove_hunt,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    handler = _COMMANDS.get(args[0]) if args else None
    try:
        if handler is None:
            raise _UsageError
        handler(TreasureManager(Path.cwd()), args[1:], [_PROG, *args])
    except _UsageError:
        print("Wrong input", file=sys.stderr)
        print(_USAGE, end="")
        return 1
    except HuntError as exc:
        print(exc, file=sys.stderr)
        return 255
    return 0


if __name__ == "__main__":
    sys.exit(main())