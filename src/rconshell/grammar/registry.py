"""Immutable command-name to command-spec mapping held for a session."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .types import CommandSpec


class CommandRegistry:
    """Read-only registry of commands, iterated in lexicographic name order.

    Built once per listing and never mutated; a grammar refresh builds a
    new registry instead.
    """

    __slots__ = ("_commands", "_names")

    def __init__(self, commands: Iterable[CommandSpec] = ()) -> None:
        by_name: dict[str, CommandSpec] = {}
        for command in commands:
            by_name[command.name] = command
        self._names: tuple[str, ...] = tuple(sorted(by_name))
        self._commands: Mapping[str, CommandSpec] = MappingProxyType(
            {name: by_name[name] for name in self._names}
        )

    @classmethod
    def empty(cls) -> CommandRegistry:
        return cls()

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __repr__(self) -> str:
        return f"CommandRegistry({len(self)} commands)"

    @property
    def is_empty(self) -> bool:
        return not self._names

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def names(self) -> tuple[str, ...]:
        return self._names

    def prefix_matches(self, prefix: str) -> list[str]:
        """Return command names starting with ``prefix``, sorted."""
        return [name for name in self._names if name.startswith(prefix)]
