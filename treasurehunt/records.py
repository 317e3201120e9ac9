"""Treasure records as stored one per line in a hunt's treasure file."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _single(value: float) -> float:
    """Round a float to single precision, as the record format stores it."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _tokens(line: str) -> list[str]:
    """Split on commas, dropping empty pieces the way strtok does."""
    return [token for token in line.split(",") if token]


def treasure_id_of(line: str) -> str | None:
    """Return the treasure id a record line starts with, or None for a blank one."""
    tokens = _tokens(line)
    return tokens[0] if tokens else None


@dataclass
class Treasure:
    """One treasure of a hunt."""

    treasure_id: str
    user: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    clue: str = ""
    value: int = 0

    def to_line(self) -> str:
        """Render the record as a line of the treasure file."""
        return (
            f"{self.treasure_id}, {self.user}, {_single(self.latitude):f}, "
            f"{_single(self.longitude):f}, {self.clue}, {self.value}\n"
        )

    @classmethod
    def from_line(cls, line: str) -> Treasure:
        """Parse a record line, keeping each text field exactly as stored."""
        tokens = _tokens(line)
        if not tokens:
            raise ValueError(f"not a treasure record: {line!r}")
        rest = tokens[1:]

        def field(index: int) -> str:
            return rest[index] if index < len(rest) else ""

        return cls(
            treasure_id=tokens[0],
            user=field(0),
            latitude=_single(_atof(field(1))),
            longitude=_single(_atof(field(2))),
            clue=field(3),
            value=_atoi(field(4)),
        )

    def describe(self) -> str:
        """One-line description used when viewing a treasure."""
        return (
            f"User: {self.user}, latitude: {_single(self.latitude):f}, "
            f"longitude: {_single(self.longitude):f}, clue: {self.clue}, "
            f"value: {self.value};"
        )