"""Formatting of server response bodies for the terminal."""

from __future__ import annotations

from .constants import COMMAND_PREFIX, ERROR_PREFIXES
from .grammar import normalize


def is_help_command(command: str) -> bool:
    """Return True for ``help``/``/help`` with or without arguments."""
    return command.startswith("help") or command.startswith(COMMAND_PREFIX + "help")


def format_help_response(body: str) -> str:
    """Put each command of a help listing on its own line."""
    return normalize(body)


def format_generic_response(body: str) -> str:
    """Break known error messages away from the echoed command text."""
    for prefix in ERROR_PREFIXES:
        if body.startswith(prefix):
            return f"{prefix}\n{body[len(prefix):].lstrip()}"
    return body


def format_response(command: str, body: str) -> str:
    if is_help_command(command):
        return format_help_response(body)
    return format_generic_response(body)
