"""Line-editing callbacks: completion, hints, and highlighting."""

from .completion import Candidate, CompletionResult, RegistryCompleter, complete
from .highlight import SHELL_STYLE, RegistryLexer, highlight, highlight_ansi
from .hints import RegistryAutoSuggest, hint

__all__ = [
    "Candidate",
    "CompletionResult",
    "RegistryAutoSuggest",
    "RegistryCompleter",
    "RegistryLexer",
    "SHELL_STYLE",
    "complete",
    "highlight",
    "highlight_ansi",
    "hint",
]
