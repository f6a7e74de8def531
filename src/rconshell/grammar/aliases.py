"""Give alias commands the argument grammar of their targets."""

from __future__ import annotations

from typing import Iterable

from ..errors import UnknownAliasTargetError
from .registry import CommandRegistry
from .types import AliasEdge, CommandSpec


def resolve(
    commands: Iterable[CommandSpec],
    aliases: Iterable[AliasEdge],
) -> CommandRegistry:
    """Build the registry, copying each target's arguments onto its alias.

    Runs after the whole listing is scanned, so an alias may appear before
    or after its target. Targets are looked up among parsed commands only.

    Raises:
        UnknownAliasTargetError: An alias target is not a parsed command.
            No registry is produced in that case.
    """
    command_map: dict[str, CommandSpec] = {}
    for command in commands:
        command_map[command.name] = command

    resolved: dict[str, CommandSpec] = {}
    for edge in aliases:
        target = command_map.get(edge.target)
        if target is None:
            raise UnknownAliasTargetError(edge.alias, edge.target)
        resolved[edge.alias] = CommandSpec(edge.alias, target.arguments)

    command_map.update(resolved)
    return CommandRegistry(command_map.values())
