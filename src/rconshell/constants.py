"""Application-level constants for rcon-shell.

This module keeps only cross-cutting app/file/protocol constants.
"""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "rconshell"

# ============================================================================
# Default directories and paths
# ============================================================================

USER_DATA_DIR = f"~/.{APP_NAME}"
REPL_HISTORY_FILE = f"{USER_DATA_DIR}/history"
DEFAULT_LOGS_DIR = f"{USER_DATA_DIR}/logs"

LOG_FILE_EXTENSION = ".log"
DATETIME_FORMAT_FILENAME = "%Y-%m-%d_%H-%M-%S"

# ============================================================================
# Command grammar
# ============================================================================

# Leading character of every remote command token.
COMMAND_PREFIX = "/"

# Command whose response is the listing text the grammar is built from.
LISTING_COMMAND = "/help"

# Local commands that end the session (case-insensitive).
EXIT_COMMANDS = frozenset(("exit", "quit"))

# ============================================================================
# Remote responses
# ============================================================================

# Error bodies run the explanation straight into the echoed input.
ERROR_PREFIXES = (
    "Unknown or incomplete command, see below for error",
    "Incorrect argument for command",
)

# ============================================================================
# RCON transport
# ============================================================================

DEFAULT_RCON_PORT = 25575
DEFAULT_TIMEOUT_SEC = 5.0

CONNECT_RETRY_ATTEMPTS = 3
RETRY_BACKOFF_INITIAL_SEC = 0.5
RETRY_BACKOFF_MAX_SEC = 4.0

# ============================================================================
# Highlight style classes
# ============================================================================

STYLE_COMMAND_KNOWN = "class:command.known"
STYLE_COMMAND_SUGGESTED = "class:command.suggested"
