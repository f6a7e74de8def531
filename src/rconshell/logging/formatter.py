"""Plaintext log formatter: one ``=== event ===`` block per record.

    === grammar_built ===
    ts_utc: 2026-10-18T09:12:03.120044Z
    level: INFO
    command_count: 2
    commands:
      - /list
      - /time (add|query|set) <value>
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .sanitization import sanitize_error_message
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER

# Free-text fields that may carry connection details from library records.
_REDACTED_KEYS = frozenset(("message", "error"))


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace(
        "+00:00", "Z"
    )


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


def _ordered_keys(event_name: str, data: dict[str, Any]) -> list[str]:
    preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
    present = [k for k in preferred if data.get(k) is not None]
    return present + sorted(k for k, v in data.items() if k not in preferred and v is not None)


class StructuredTextFormatter(logging.Formatter):
    """Render JSON event records, and plain records from libraries, as blocks.

    List values such as the command usages of ``grammar_built`` get one
    indented line per item. ``message`` and ``error`` pass through password
    redaction.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._first_entry = True

    def _field_lines(self, key: str, value: Any) -> list[str]:
        if isinstance(value, list):
            return [f"{key}:"] + [f"  - {_one_line(item)}" for item in value]
        if key in _REDACTED_KEYS:
            value = sanitize_error_message(str(value))
        return [f"{key}: {_one_line(value)}"]

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "ts_utc": _utc_now_iso(),
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        try:
            parsed = json.loads(message) if message.startswith("{") else None
        except ValueError:
            parsed = None

        if isinstance(parsed, dict):
            data.update(parsed)
        else:
            data["event"] = record.name
            data["message"] = message

        event_name = str(data.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in _ordered_keys(event_name, data):
            lines.extend(self._field_lines(key, data[key]))

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        body = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return body
        return "\n" + body
