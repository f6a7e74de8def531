"""Typed command grammar values shared by the parser and editing engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, TypeAlias

from ..errors import GrammarError


ArgumentKind: TypeAlias = Literal[
    "required",
    "optional",
    "required_choice",
    "optional_choice",
]

_PLACEHOLDER_KINDS = frozenset(("required", "optional"))
_CHOICE_KINDS = frozenset(("required_choice", "optional_choice"))


@dataclass(slots=True, frozen=True)
class ArgumentSpec:
    """One argument slot of a command.

    Placeholder kinds (``required``/``optional``) carry ``name``; choice
    kinds (``required_choice``/``optional_choice``) carry ``options``, the
    ordered literals the slot accepts.
    """

    kind: ArgumentKind
    name: str | None = None
    options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind in _PLACEHOLDER_KINDS:
            if not self.name or self.options:
                raise GrammarError(f"{self.kind} argument needs a name and no options")
        elif self.kind in _CHOICE_KINDS:
            if self.name is not None:
                raise GrammarError(f"{self.kind} argument cannot have a name")
            if not self.options:
                raise GrammarError(f"{self.kind} argument needs at least one option")
            for option in self.options:
                if not option or option != option.strip():
                    raise GrammarError(f"Invalid choice literal: {option!r}")
        else:
            raise GrammarError(f"Unknown argument kind: {self.kind!r}")

    @classmethod
    def required(cls, name: str) -> ArgumentSpec:
        return cls(kind="required", name=name)

    @classmethod
    def optional(cls, name: str) -> ArgumentSpec:
        return cls(kind="optional", name=name)

    @classmethod
    def required_choice(cls, options: Iterable[str]) -> ArgumentSpec:
        return cls(kind="required_choice", options=tuple(options))

    @classmethod
    def optional_choice(cls, options: Iterable[str]) -> ArgumentSpec:
        return cls(kind="optional_choice", options=tuple(options))

    @property
    def is_choice(self) -> bool:
        return self.kind in _CHOICE_KINDS

    def __str__(self) -> str:
        if self.kind == "required":
            return f"<{self.name}>"
        if self.kind == "optional":
            return f"[<{self.name}>]"
        joined = "|".join(self.options)
        if self.kind == "required_choice":
            return f"({joined})"
        return f"[{joined}]"


@dataclass(slots=True, frozen=True)
class CommandSpec:
    """A command name (with prefix) and its argument slots in parse order."""

    name: str
    arguments: tuple[ArgumentSpec, ...] = ()

    def usage(self) -> str:
        """Render the command back in listing notation."""
        return " ".join([self.name, *(str(arg) for arg in self.arguments)])


@dataclass(slots=True, frozen=True)
class AliasEdge:
    """``alias -> target`` pair found while scanning a listing."""

    alias: str
    target: str


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Commands and alias edges collected from one listing."""

    commands: tuple[CommandSpec, ...] = ()
    aliases: tuple[AliasEdge, ...] = ()
