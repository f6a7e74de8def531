"""Interactive loop: prompt session wiring and command round trips."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .constants import EXIT_COMMANDS, LISTING_COMMAND
from .editing import (
    SHELL_STYLE,
    RegistryAutoSuggest,
    RegistryCompleter,
    RegistryLexer,
)
from .errors import GrammarError, RconError
from .grammar import CommandRegistry, build_registry
from .logging import log_event, summarize_command_args
from .path_utils import map_path
from .rcon import RconClient
from .responses import format_response

PROMPT = "> "


class ShellSession:
    """An authenticated connection plus the grammar used for editing.

    ``registry`` is replaced wholesale on refresh; editing callbacks read it
    through a getter, so every call works on one immutable registry.
    """

    def __init__(self, client: RconClient, registry: Optional[CommandRegistry] = None) -> None:
        self.client = client
        self.registry = registry if registry is not None else CommandRegistry.empty()

    def current_registry(self) -> CommandRegistry:
        return self.registry

    def refresh_registry(self, listing: Optional[str], trigger: str) -> bool:
        """Rebuild the grammar from ``listing`` and swap it in.

        The current registry stays in place when construction fails.
        """
        try:
            registry = build_registry(listing)
        except GrammarError as error:
            log_event(
                "grammar_error",
                level=logging.WARNING,
                trigger=trigger,
                error_type=type(error).__name__,
                error=str(error),
                alias=getattr(error, "alias", None),
                target=getattr(error, "target", None),
            )
            print(f"Warning: command grammar unavailable: {error}")
            return False
        self.registry = registry
        return True

    def load_registry(self) -> bool:
        """Fetch the command listing from the server and build the grammar."""
        try:
            listing = self.client.send_command(LISTING_COMMAND)
        except RconError as error:
            log_event(
                "grammar_error",
                level=logging.WARNING,
                trigger="startup",
                error_type=type(error).__name__,
                error=str(error),
            )
            print(f"Warning: could not fetch command list: {error}")
            return False
        return self.refresh_registry(listing, trigger="startup")

    def run_command(self, command: str) -> str:
        """Send ``command`` and return the formatted response."""
        started = time.perf_counter()
        body = self.client.send_command(command)
        log_event(
            "command_exec",
            level=logging.INFO,
            command=command.split(" ", 1)[0],
            args_summary=summarize_command_args(command.partition(" ")[2]),
            response_chars=len(body),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        if command == LISTING_COMMAND:
            self.refresh_registry(body, trigger="help")
        return format_response(command, body)


def ensure_history_file(history_file: str) -> Path:
    """Ensure the history file's directory exists and return its path."""
    path = Path(map_path(history_file))
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_prompt_session(shell: ShellSession, history_file: str) -> PromptSession:
    """Create the prompt-toolkit session with registry-backed editing."""
    return PromptSession(
        history=FileHistory(str(ensure_history_file(history_file))),
        completer=RegistryCompleter(shell.current_registry),
        auto_suggest=RegistryAutoSuggest(shell.current_registry),
        lexer=RegistryLexer(shell.current_registry),
        style=SHELL_STYLE,
        complete_while_typing=False,
    )


def repl_loop(shell: ShellSession, prompt_session: PromptSession) -> str:
    """Read commands until exit; return the stop reason."""
    log_event("session_start", level=logging.INFO, command_count=len(shell.registry))

    while True:
        try:
            line = prompt_session.prompt(PROMPT)
        except KeyboardInterrupt:
            # Ctrl+C clears the current line only.
            continue
        except EOFError:
            reason = "eof"
            break

        command = line.strip()
        if not command:
            continue
        if command.lower() in EXIT_COMMANDS:
            reason = "exit_command"
            break

        try:
            print(shell.run_command(command))
        except RconError as error:
            log_event(
                "command_error",
                level=logging.ERROR,
                command=command.split(" ", 1)[0],
                args_summary=summarize_command_args(command.partition(" ")[2]),
                error_type=type(error).__name__,
                error=str(error),
            )
            print(f"Error: {error}")
            if not shell.client.connected:
                reason = "connection_lost"
                break
        except Exception as error:
            log_event(
                "repl_error",
                level=logging.ERROR,
                command=command.split(" ", 1)[0],
                error_type=type(error).__name__,
                error=str(error),
            )
            logging.error("Unexpected REPL error: %s", error, exc_info=True)
            print(f"Error: {error}")

    log_event(
        "session_stop",
        level=logging.INFO,
        reason=reason,
        command_count=len(shell.registry),
    )
    return reason
