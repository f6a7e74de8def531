"""Highlight the leading command token when the registry knows it."""

from __future__ import annotations

from typing import Callable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.styles import Style

from ..constants import STYLE_COMMAND_KNOWN, STYLE_COMMAND_SUGGESTED
from ..grammar import CommandRegistry

SHELL_STYLE = Style.from_dict(
    {
        "command.known": "ansigreen",
        "command.suggested": "ansiyellow",
    }
)

_ANSI_CODES = {
    STYLE_COMMAND_KNOWN: "\x1b[32m",
    STYLE_COMMAND_SUGGESTED: "\x1b[33m",
}
_ANSI_RESET = "\x1b[0m"


def _split_command(
    registry: CommandRegistry, text: str
) -> tuple[str, str, str] | None:
    """Return (leading whitespace, command, rest) if ``text`` starts with a known command."""
    words = text.split()
    if not words or words[0] not in registry:
        return None
    start = text.index(words[0])
    end = start + len(words[0])
    return text[:start], words[0], text[end:]


def highlight(
    registry: CommandRegistry, text: str, is_suggestion: bool = False
) -> StyleAndTextTuples:
    """Style the first token of ``text`` if it is a registered command.

    Candidates being offered (``is_suggestion``) and text already on the
    input line get different styles. Everything else stays unstyled.
    """
    parts = _split_command(registry, text)
    if parts is None:
        return [("", text)] if text else []

    leading, command, rest = parts
    style = STYLE_COMMAND_SUGGESTED if is_suggestion else STYLE_COMMAND_KNOWN
    fragments: StyleAndTextTuples = []
    if leading:
        fragments.append(("", leading))
    fragments.append((style, command))
    if rest:
        fragments.append(("", rest))
    return fragments


def highlight_ansi(registry: CommandRegistry, text: str, is_suggestion: bool = False) -> str:
    """Same decision as :func:`highlight`, rendered with ANSI color codes."""
    return "".join(
        f"{_ANSI_CODES[style]}{fragment}{_ANSI_RESET}" if style else fragment
        for style, fragment, *_ in highlight(registry, text, is_suggestion)
    )


class RegistryLexer(Lexer):
    """prompt_toolkit lexer that highlights known commands on each line."""

    def __init__(self, registry_getter: Callable[[], CommandRegistry]) -> None:
        self.registry_getter = registry_getter

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        registry = self.registry_getter()
        lines = document.lines

        def get_line(lineno: int) -> StyleAndTextTuples:
            if lineno >= len(lines):
                return []
            return highlight(registry, lines[lineno])

        return get_line
