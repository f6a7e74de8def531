"""RCON password loading from the configured source."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Mapping, cast

import keyring
from keyring.errors import KeyringError
from prompt_toolkit import prompt as pt_prompt

from .errors import ConfigError, CredentialError
from .path_utils import map_path


def _credential_store_hint(service: str, account: str) -> str:
    """Return a platform-appropriate command to add a credential."""
    if sys.platform == "darwin":
        return (
            f"Add it with: security add-generic-password "
            f"-s {service} -a {account} -w your-password"
        )
    elif sys.platform == "win32":
        return f"Add it with: cmdkey /generic:{service} /user:{account} /pass:your-password"
    else:
        return (
            f"Add it with: secret-tool store --label='{service}' "
            f"service {service} account {account}"
        )


def load_from_env(var_name: str) -> str:
    """Load password from an environment variable."""
    value = os.environ.get(var_name)
    if not value:
        raise CredentialError(f"Environment variable '{var_name}' not set")
    return value.strip()


def load_from_keyring(service: str, account: str) -> str:
    """Load password from the system credential store."""
    try:
        value = keyring.get_password(service, account)
    except KeyringError as e:
        raise CredentialError(
            f"Failed to access credential store: {e}\n"
            f"Service: {service}, Account: {account}"
        ) from e

    if not value:
        raise CredentialError(
            f"Password not found in credential store.\n"
            f"Service: {service}, Account: {account}\n"
            f"{_credential_store_hint(service, account)}"
        )
    return value


def load_from_json(file_path: str, key_name: str) -> str:
    """Load password stored under ``key_name`` in a JSON file."""
    path = Path(map_path(file_path))
    if not path.exists():
        raise CredentialError(f"Password file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CredentialError(f"Invalid JSON in {path}: {e}") from e

    value = data.get(key_name) if isinstance(data, dict) else None
    if not isinstance(value, str) or not value:
        raise CredentialError(f"Key '{key_name}' not found in {path}")
    return value


def _require(config: Mapping[str, Any], field_name: str, key_type: str) -> str:
    value = config.get(field_name)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Password config type '{key_type}' requires '{field_name}'")
    return value


def load_password(config: Mapping[str, Any]) -> str:
    """Load the RCON password described by ``config``.

    Example configs:
        {"type": "env", "key": "RCON_PASSWORD"}
        {"type": "keyring", "service": "rconshell", "account": "survival"}
        {"type": "json", "path": "~/.secrets/rcon.json", "key": "survival"}
        {"type": "direct", "value": "hunter2"}

    Raises:
        ConfigError: Unknown type or missing config fields.
        CredentialError: The source holds no password.
    """
    key_type = config.get("type")

    if key_type == "direct":
        return _require(config, "value", "direct")

    elif key_type == "env":
        return load_from_env(_require(config, "key", "env"))

    elif key_type in ("keyring", "keychain"):
        return load_from_keyring(
            _require(config, "service", cast(str, key_type)),
            _require(config, "account", cast(str, key_type)),
        )

    elif key_type == "json":
        return load_from_json(_require(config, "path", "json"), _require(config, "key", "json"))

    else:
        raise ConfigError(f"Unknown password config type '{key_type}'")


def prompt_password(message: str = "Enter RCON password: ") -> str:
    """Ask the operator for the password without echoing it."""
    return pt_prompt(message, is_password=True)
