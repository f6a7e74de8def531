"""Structured log event key ordering."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER: list[str] = ["ts", "level"]

EVENT_KEY_ORDER: dict[str, list[str]] = {
    # Application lifecycle events
    "app_start": ["ts", "level", "address", "profile_file", "log_file", "history_file", "timeout"],
    "app_stop": ["ts", "level", "reason", "uptime_ms", "error_type", "error"],
    "session_start": ["ts", "level", "command_count"],
    "session_stop": ["ts", "level", "reason", "command_count"],
    # Transport events
    "rcon_connect": ["ts", "level", "host", "port", "elapsed_ms"],
    "rcon_retry": ["ts", "level", "operation", "attempt", "sleep_sec", "result", "error_type", "error"],
    "rcon_stale_packet": ["ts", "level", "request_id", "expected_id", "body_bytes"],
    # Grammar events
    "grammar_built": ["ts", "level", "command_count", "alias_count", "listing_chars", "commands"],
    "grammar_error": ["ts", "level", "trigger", "error_type", "error", "alias", "target"],
    # Command execution events
    "command_exec": ["ts", "level", "command", "args_summary", "response_chars", "elapsed_ms"],
    "command_error": ["ts", "level", "command", "args_summary", "error_type", "error"],
    "repl_error": ["ts", "level", "command", "error_type", "error"],
}

LOG_PATH_FIELDS = {
    "profile_file",
    "log_file",
    "history_file",
}
