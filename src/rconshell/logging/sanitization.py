"""Redaction helpers for text that may reach log files."""

from __future__ import annotations

import re

_PASSWORD_ASSIGNMENT_RE = re.compile(
    r"(?i)\b(password|passwd|pwd|secret)(\s*[=:]\s*)(\"[^\"]*\"|'[^']*'|\S+)"
)


def sanitize_error_message(error_msg: str, secrets: tuple[str, ...] = ()) -> str:
    """Sanitize error messages to remove passwords.

    Known secret values are replaced wherever they appear; ``password=...``
    style assignments are redacted regardless.
    """
    sanitized = error_msg
    for secret in secrets:
        if secret:
            sanitized = sanitized.replace(secret, "[REDACTED]")
    return _PASSWORD_ASSIGNMENT_RE.sub(r"\1\2[REDACTED]", sanitized)
