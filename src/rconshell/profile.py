"""Shell profile: optional JSON configuration for a server connection."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .constants import DEFAULT_LOGS_DIR, DEFAULT_TIMEOUT_SEC, REPL_HISTORY_FILE
from .errors import ConfigError
from .path_utils import map_path

_KNOWN_PROFILE_KEYS = {
    "address",
    "timeout",
    "password",
    "history_file",
    "logs_dir",
}


@dataclass(slots=True)
class ShellProfile:
    """Typed profile view consumed by the CLI and REPL."""

    address: str | None = None
    timeout: int | float = DEFAULT_TIMEOUT_SEC
    password: dict[str, Any] | None = None
    history_file: str = REPL_HISTORY_FILE
    logs_dir: str = DEFAULT_LOGS_DIR
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, profile: Mapping[str, Any]) -> ShellProfile:
        """Create a profile from raw JSON data."""
        if not isinstance(profile, Mapping):
            raise ConfigError("Profile must be a JSON object")

        address = profile.get("address")
        if address is not None and (not isinstance(address, str) or not address.strip()):
            raise ConfigError("'address' must be a non-empty string")

        timeout = profile.get("timeout", DEFAULT_TIMEOUT_SEC)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError("'timeout' must be a number")
        if timeout <= 0:
            raise ConfigError("'timeout' must be positive")

        password = profile.get("password")
        if password is not None:
            if not isinstance(password, Mapping):
                raise ConfigError("'password' must be a credential config object")
            if "type" not in password:
                raise ConfigError("'password' config requires a 'type'")
            password = dict(password)

        history_file = profile.get("history_file", REPL_HISTORY_FILE)
        logs_dir = profile.get("logs_dir", DEFAULT_LOGS_DIR)
        for key, value in (("history_file", history_file), ("logs_dir", logs_dir)):
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'{key}' must be a non-empty string")

        extras = {
            str(key): value
            for key, value in profile.items()
            if key not in _KNOWN_PROFILE_KEYS
        }

        return cls(
            address=address.strip() if address else None,
            timeout=timeout,
            password=password,
            history_file=history_file,
            logs_dir=logs_dir,
            extras=extras,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize profile to its JSON shape."""
        data: dict[str, Any] = {
            "timeout": self.timeout,
            "history_file": self.history_file,
            "logs_dir": self.logs_dir,
        }
        if self.address is not None:
            data["address"] = self.address
        if self.password is not None:
            data["password"] = dict(self.password)
        data.update(self.extras)
        return data


def load_profile(path: str) -> ShellProfile:
    """Load and validate a profile JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    profile_path = Path(map_path(path))
    if not profile_path.is_file():
        raise ConfigError(f"Profile not found: {profile_path}")

    try:
        with open(profile_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in profile {profile_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read profile {profile_path}: {e}") from e

    return ShellProfile.from_dict(data)
