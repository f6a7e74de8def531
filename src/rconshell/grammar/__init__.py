"""Command grammar: listing text -> immutable command registry."""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import COMMAND_PREFIX
from ..logging import log_event
from .aliases import resolve
from .normalizer import normalize
from .parser import parse, parse_arguments, parse_line
from .registry import CommandRegistry
from .types import AliasEdge, ArgumentKind, ArgumentSpec, CommandSpec, ParseResult

__all__ = [
    "AliasEdge",
    "ArgumentKind",
    "ArgumentSpec",
    "CommandRegistry",
    "CommandSpec",
    "ParseResult",
    "build_registry",
    "normalize",
    "parse",
    "parse_arguments",
    "parse_line",
    "resolve",
]


def build_registry(raw_listing: Optional[str], prefix: str = COMMAND_PREFIX) -> CommandRegistry:
    """Run normalize -> parse -> resolve over a raw listing response.

    A missing or blank listing gives the empty registry.

    Raises:
        UnknownAliasTargetError: An alias names an undefined command.
    """
    if raw_listing is None or not raw_listing.strip():
        log_event("grammar_built", level=logging.INFO, command_count=0, alias_count=0)
        return CommandRegistry.empty()

    result = parse(normalize(raw_listing, prefix), prefix)
    registry = resolve(result.commands, result.aliases)
    log_event(
        "grammar_built",
        level=logging.INFO,
        command_count=len(registry),
        alias_count=len(result.aliases),
        listing_chars=len(raw_listing),
        commands=[command.usage() for command in registry],
    )
    return registry
