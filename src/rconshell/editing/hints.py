"""Inline ghost-text hints for partially typed command names."""

from __future__ import annotations

from typing import Callable, Optional

from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from ..constants import COMMAND_PREFIX
from ..grammar import CommandRegistry


def hint(registry: CommandRegistry, line: str, prefix: str = COMMAND_PREFIX) -> Optional[str]:
    """Return the untyped rest of the first command name ``line`` starts.

    Only while the command name itself is being typed: ``line`` must start
    with ``prefix``, be longer than it, and contain no space. Ties go to
    the lexicographically first name. When ``line`` already equals a
    registered name there is no hint, even if longer names extend it
    (``/tp`` with ``/tpa`` registered gives None).
    """
    if not line or line == prefix or not line.startswith(prefix) or " " in line:
        return None
    matches = registry.prefix_matches(line)
    if not matches or matches[0] == line:
        return None
    return matches[0][len(line):]


class RegistryAutoSuggest(AutoSuggest):
    """prompt_toolkit auto-suggest backed by the session's command registry."""

    def __init__(self, registry_getter: Callable[[], CommandRegistry]) -> None:
        self.registry_getter = registry_getter

    def get_suggestion(self, buffer: Buffer, document: Document) -> Optional[Suggestion]:
        suffix = hint(self.registry_getter(), document.text)
        if suffix is None:
            return None
        return Suggestion(suffix)
