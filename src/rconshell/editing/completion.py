"""Tab completion of command names and choice-argument literals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from ..grammar import CommandRegistry
from .highlight import highlight


@dataclass(slots=True, frozen=True)
class Candidate:
    """One completion choice: what the menu shows and what gets inserted."""

    display: str
    replacement: str


@dataclass(slots=True, frozen=True)
class CompletionResult:
    """Candidates plus the line offset where their replacement starts."""

    start: int
    candidates: tuple[Candidate, ...] = ()


def _candidates(values: Iterable[str], partial: str) -> tuple[Candidate, ...]:
    # dict.fromkeys keeps first-seen order while dropping repeats.
    return tuple(
        Candidate(display=value, replacement=value + " ")
        for value in dict.fromkeys(values)
        if value.startswith(partial)
    )


def complete(registry: CommandRegistry, line: str, cursor: int) -> CompletionResult:
    """Complete the text of ``line`` before ``cursor``.

    - Typing the command name: every command with that prefix, replacing
      the whole token from offset 0.
    - Typing an argument of a known command: the literals of the choice
      slot at that position that start with the partial token, replacing
      only the partial token. Free-text slots, unknown commands, and more
      tokens than the command has slots give no candidates.
    """
    text = line[:cursor]
    if not text:
        return CompletionResult(start=0)

    tokens = text.split(" ")
    partial = tokens[-1]

    if len(tokens) == 1:
        return CompletionResult(start=0, candidates=_candidates(registry.prefix_matches(partial), partial))

    command = registry.get(tokens[0])
    if command is None:
        return CompletionResult(start=0)

    typed_arguments = len(tokens) - 1
    if len(command.arguments) < typed_arguments:
        return CompletionResult(start=0)

    start = cursor - len(partial)
    argument = command.arguments[typed_arguments - 1]
    if not argument.is_choice:
        return CompletionResult(start=start)
    return CompletionResult(start=start, candidates=_candidates(argument.options, partial))


class RegistryCompleter(Completer):
    """prompt_toolkit completer backed by the session's command registry."""

    def __init__(self, registry_getter: Callable[[], CommandRegistry]) -> None:
        self.registry_getter = registry_getter

    def get_completions(self, document: Document, complete_event: CompleteEvent):
        registry = self.registry_getter()
        cursor = document.cursor_position
        result = complete(registry, document.text, cursor)
        for candidate in result.candidates:
            yield Completion(
                candidate.replacement,
                start_position=result.start - cursor,
                display=highlight(registry, candidate.display, is_suggestion=True),
            )
