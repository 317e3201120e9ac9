"""Storage of hunts and their treasures on disk."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from treasurehunt.records import Treasure, treasure_id_of

TREASURE_FILE = "treasure.txt"
LOG_FILE = "logged_hunt.txt"
MASTER_LOG = "masterLog.txt"


class HuntError(Exception):
    """An operation on a hunt could not be carried out."""


@dataclass(frozen=True)
class HuntSummary:
    """What listing a hunt reports."""

    hunt_id: str
    size: int
    modified: datetime
    records: str


def _read_lines(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8", newline="") as handle:
        yield from handle


def _append(path: Path, text: str) -> None:
    with path.open("a", encoding="utf-8", newline="") as handle:
        handle.write(text)


def _command_line(command: Sequence[str]) -> str:
    return "".join(f"{part} " for part in command) + "\n"


class TreasureManager:
    """Manages hunts below a root holding 'hunts', 'logs' and the master log."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.hunts = self.root / "hunts"
        self.logs = self.root / "logs"

    def hunt_dir(self, hunt_id: str) -> Path:
        return self.hunts / hunt_id

    def hunt_exists(self, hunt_id: str) -> bool:
        return self.hunt_dir(hunt_id).is_dir()

    def treasure_exists(self, hunt_id: str, treasure_id: str) -> bool:
        treasure_file = self.hunt_dir(hunt_id) / TREASURE_FILE
        if not treasure_file.is_file():
            return False
        return any(treasure_id_of(line) == treasure_id for line in _read_lines(treasure_file))

    def _require_hunts(self, message: str = "Cannot access the directory") -> None:
        if not self.hunts.is_dir():
            raise HuntError(message)

    def _existing_hunt(self, hunt_id: str, message: str) -> Path:
        self._require_hunts()
        directory = self.hunt_dir(hunt_id)
        if not directory.is_dir():
            raise HuntError(message)
        return directory

    @staticmethod
    def _log_command(log: Path, command: Sequence[str]) -> None:
        if log.is_file():
            _append(log, _command_line(command))

    @staticmethod
    def _record(directory: Path, treasures: Iterable[Treasure]) -> None:
        treasure_file = directory / TREASURE_FILE
        log = directory / LOG_FILE
        for treasure in treasures:
            if not treasure_file.is_file():
                raise HuntError("Cannot write")
            _append(treasure_file, treasure.to_line())
            if not log.is_file():
                raise HuntError("Cannot record in log-file")
            _append(log, f"{treasure.treasure_id} was recorded by user {treasure.user}.\n")

    def _link_log(self, hunt_id: str, log: Path) -> None:
        if not self.logs.is_dir():
            raise HuntError("Cannot access the 'logs' directory")
        link = self.logs / f"logged_hunt-{hunt_id}.txt"
        try:
            if link.is_symlink() or link.exists():
                link.unlink()
            link.symlink_to(log.resolve())
        except OSError as exc:
            raise HuntError(f"Cannot create the symbolic link: {exc}") from exc

    def add(self, hunt_id: str, treasures: Iterable[Treasure], command: Sequence[str]) -> bool:
        """Add treasures to a hunt, creating it first if needed.

        Returns True when the hunt was created.
        """
        self._require_hunts()
        directory = self.hunt_dir(hunt_id)
        log = directory / LOG_FILE
        if directory.is_dir():
            self._log_command(log, command)
            self._record(directory, treasures)
            return False
        try:
            directory.mkdir(mode=0o755)
            (directory / TREASURE_FILE).touch(mode=0o644)
            log.touch(mode=0o744)
        except OSError as exc:
            raise HuntError(f"Cannot create the hunt: {exc}") from exc
        self._log_command(log, command)
        _append(log, f"{hunt_id} was created and also treasure.txt and log.txt.\n")
        self._record(directory, treasures)
        self._link_log(hunt_id, log)
        return True

    def list_hunt(self, hunt_id: str, command: Sequence[str]) -> HuntSummary:
        directory = self._existing_hunt(
            hunt_id, "The directory doesn't exist or the name is wrong"
        )
        treasure_file = directory / TREASURE_FILE
        try:
            modified = datetime.fromtimestamp(treasure_file.stat().st_mtime)
            records = "".join(_read_lines(treasure_file))
        except OSError as exc:
            raise HuntError(f"Cannot read '{TREASURE_FILE}': {exc}") from exc
        summary = HuntSummary(hunt_id, directory.stat().st_size, modified, records)
        self._log_command(directory / LOG_FILE, command)
        return summary

    def view(self, hunt_id: str, treasure_id: str, command: Sequence[str]) -> list[Treasure]:
        """Return every record of the hunt with the given treasure id."""
        self._require_hunts("The 'hunts' directory does not exist")
        directory = self.hunt_dir(hunt_id)
        if not directory.is_dir():
            raise HuntError(
                f"The specified hunt directory '{hunt_id}' does not exist or is not a directory"
            )
        treasure_file = directory / TREASURE_FILE
        if not treasure_file.is_file():
            raise HuntError(f"Cannot open '{TREASURE_FILE}'")
        found = [
            Treasure.from_line(line)
            for line in _read_lines(treasure_file)
            if treasure_id_of(line) == treasure_id
        ]
        self._log_command(directory / LOG_FILE, command)
        return found

    def remove_treasure(self, hunt_id: str, treasure_id: str, command: Sequence[str]) -> int:
        """Drop every record with the given id; return how many were dropped."""
        directory = self._existing_hunt(hunt_id, "The hunt doesn't exist")
        treasure_file = directory / TREASURE_FILE
        lines = list(_read_lines(treasure_file)) if treasure_file.is_file() else []
        kept = [line for line in lines if treasure_id_of(line) != treasure_id]
        with treasure_file.open("w", encoding="utf-8", newline="") as handle:
            handle.writelines(kept)
        self._log_command(directory / LOG_FILE, command)
        return len(lines) - len(kept)

    def remove_hunt(self, hunt_id: str, command: Sequence[str]) -> None:
        """Delete a hunt, copying its log into the master log first."""
        directory = self._existing_hunt(hunt_id, "This directory doesn't exist")
        master = self.root / MASTER_LOG
        if not master.is_file():
            raise HuntError("Cannot open master log file")
        log = directory / LOG_FILE
        history = "".join(_read_lines(log)) if log.is_file() else ""
        _append(master, f"{hunt_id}\n{history}{_command_line(command)}")
        (directory / TREASURE_FILE).unlink(missing_ok=True)
        log.unlink(missing_ok=True)
        try:
            directory.rmdir()
        except OSError as exc:
            raise HuntError(f"Cannot remove the hunt: {exc}") from exc
        if not self.logs.is_dir():
            raise HuntError("Cannot access logs!")
        link = self.logs / f"logged_hunt-{hunt_id}.txt"
        try:
            link.unlink()
        except OSError:
            pass