"""Custom exception hierarchy for rcon-shell."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class ConfigError(ValueError, AppError):
    """Profile/configuration validation errors."""


class CredentialError(AppError):
    """Password could not be loaded from its configured source."""


class GrammarError(ValueError, AppError):
    """Command grammar could not be built from a listing."""


class UnknownAliasTargetError(GrammarError):
    """An alias points at a command the listing never defines."""

    def __init__(self, alias: str, target: str) -> None:
        super().__init__(f"Alias {alias} points to unknown command {target}")
        self.alias = alias
        self.target = target


class RconError(AppError):
    """RCON transport failures (connect, send, receive)."""


class AuthenticationError(RconError):
    """Server rejected the RCON password."""


class PacketError(RconError):
    """Malformed or oversized RCON packet."""
