"""Path mapping for profile, history, and log paths.

- ``~`` or ``~/...`` -> user home directory
- Native absolute paths -> used as-is
- Relative paths -> error (ambiguous relative to where the shell runs)
"""

from __future__ import annotations

import unicodedata
from pathlib import Path

from .errors import ConfigError


def has_home_path_prefix(path: str) -> bool:
    """Return True when path uses the supported home prefix forms."""
    return path == "~" or path.startswith("~/") or path.startswith("~\\")


def map_path(path: str) -> str:
    """Map ``path`` to an absolute path string.

    Raises:
        ConfigError: If the path is relative, contains NUL, or escapes
            the home directory through a ``~/`` prefix.
    """
    if "\x00" in path:
        raise ConfigError("Path contains NUL character")
    path = unicodedata.normalize("NFC", path)

    if has_home_path_prefix(path):
        home_dir = Path.home().resolve()
        if path == "~":
            return str(home_dir)
        resolved = (home_dir / path[2:]).resolve()
        try:
            resolved.relative_to(home_dir)
        except ValueError:
            raise ConfigError(f"Path escapes home directory: {path}")
        return str(resolved)

    if Path(path).is_absolute():
        return str(Path(path).resolve())

    raise ConfigError(
        f"Relative paths without prefix are not supported: {path}\n"
        f"Use '~/' for home directory or provide an absolute path"
    )
