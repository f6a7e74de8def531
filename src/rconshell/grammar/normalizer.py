"""Repair listing text where several command entries share one line."""

from __future__ import annotations

from ..constants import COMMAND_PREFIX


def normalize(raw: str, prefix: str = COMMAND_PREFIX) -> str:
    """Start every command entry on its own line.

    A newline is inserted before each ``prefix`` character that is neither
    the first character of ``raw`` nor already line-initial. The result is
    stripped of surrounding whitespace. Applying it twice changes nothing.
    """
    pieces: list[str] = []
    previous: str | None = None
    for char in raw:
        if char == prefix and previous is not None and previous != "\n":
            pieces.append("\n")
        pieces.append(char)
        previous = char
    return "".join(pieces).strip()
