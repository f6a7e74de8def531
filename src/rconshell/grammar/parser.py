"""Turn normalized listing text into command specs and alias edges.

Each trimmed line is matched independently:

    /gamemode <mode> [<target>]     -> command with two arguments
    /time (add|query|set) <value>   -> command with a choice and a value
    /tp -> teleport                 -> alias edge /tp => /teleport

Arguments are collected by pattern category, not by text position:
every ``<name>`` first, then every ``[<name>]``, then every ``(a|b)``
group, then every ``[a|b]`` group. Lines matching nothing are skipped.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator

from ..constants import COMMAND_PREFIX
from .types import AliasEdge, ArgumentSpec, CommandSpec, ParseResult

# "<name>" not wrapped in "[...]".
_REQUIRED_RE = re.compile(r"(?<!\[)<([^<>]+)>")
_OPTIONAL_RE = re.compile(r"\[<([^<>]+)>\]")
# "(a|b)" not wrapped in "[...]".
_REQUIRED_CHOICE_RE = re.compile(r"(?<!\[)\(([^()]+)\)")
# "[a|b]" or "[(a|b)]".
_OPTIONAL_CHOICE_RE = re.compile(r"\[\(?([^\[\]()<>]+\|[^\[\]()<>]+)\)?\]")


def _command_re(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^(?P<cmd>{re.escape(prefix)}\w+)(?P<args>.*)")


def _alias_re(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^(?P<alias>{re.escape(prefix)}\w+)\s*->\s*(?P<target>\w+)")


def _split_options(group: str) -> tuple[str, ...]:
    return tuple(option.strip() for option in group.split("|") if option.strip())


def _choices(
    pattern: re.Pattern[str],
    descriptor: str,
    build: Callable[[tuple[str, ...]], ArgumentSpec],
) -> Iterator[ArgumentSpec]:
    for match in pattern.finditer(descriptor):
        options = _split_options(match.group(1))
        if options:
            yield build(options)


def parse_arguments(descriptor: str) -> tuple[ArgumentSpec, ...]:
    """Parse the text after a command name into argument slots."""
    arguments: list[ArgumentSpec] = []
    arguments.extend(
        ArgumentSpec.required(match.group(1).strip())
        for match in _REQUIRED_RE.finditer(descriptor)
        if match.group(1).strip()
    )
    arguments.extend(
        ArgumentSpec.optional(match.group(1).strip())
        for match in _OPTIONAL_RE.finditer(descriptor)
        if match.group(1).strip()
    )
    arguments.extend(
        _choices(_REQUIRED_CHOICE_RE, descriptor, ArgumentSpec.required_choice)
    )
    arguments.extend(
        _choices(_OPTIONAL_CHOICE_RE, descriptor, ArgumentSpec.optional_choice)
    )
    return tuple(arguments)


def parse_line(
    line: str, prefix: str = COMMAND_PREFIX
) -> tuple[CommandSpec | None, AliasEdge | None]:
    """Parse one listing line into an optional command and optional alias."""
    line = line.strip()
    if not line:
        return None, None

    command = None
    match = _command_re(prefix).match(line)
    if match:
        command = CommandSpec(match.group("cmd"), parse_arguments(match.group("args")))

    alias = None
    match = _alias_re(prefix).match(line)
    if match:
        alias = AliasEdge(match.group("alias"), prefix + match.group("target"))

    return command, alias


def parse(normalized: str, prefix: str = COMMAND_PREFIX) -> ParseResult:
    """Parse a normalized listing into commands and alias edges.

    Commands are returned in text order, repeats included; the registry
    keeps the last definition of a repeated name.
    """
    commands: list[CommandSpec] = []
    aliases: list[AliasEdge] = []

    for line in normalized.splitlines():
        command, alias = parse_line(line, prefix)
        if command is not None:
            commands.append(command)
        if alias is not None:
            aliases.append(alias)

    return ParseResult(commands=tuple(commands), aliases=tuple(aliases))
