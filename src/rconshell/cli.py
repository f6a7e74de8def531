"""CLI bootstrap entry point for rcon-shell."""

import argparse
import logging
import sys
import time
from typing import Optional

from . import __version__
from .credentials import load_password, prompt_password
from .errors import AppError, ConfigError
from .logging import build_run_log_path, log_event, sanitize_error_message, setup_logging
from .path_utils import map_path
from .profile import ShellProfile, load_profile
from .rcon import RconClient, parse_address
from .repl import ShellSession, create_prompt_session, repl_loop

__all__ = ["build_parser", "main", "resolve_password"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rconshell",
        description="rcon-shell - interactive RCON shell with command completion",
    )
    parser.add_argument("-a", "--address", help="Server address (host[:port])")
    parser.add_argument("-p", "--password", help="RCON password (prompted if omitted)")
    parser.add_argument("--profile", help="Path to profile JSON file (optional)")
    parser.add_argument("-l", "--log", help="Path to log file (optional)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_password(cli_password: Optional[str], profile_data: ShellProfile) -> str:
    """Pick the password: CLI flag, then profile source, then prompt."""
    if cli_password:
        return cli_password
    if profile_data.password is not None:
        return load_password(profile_data.password)
    return prompt_password()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


def main() -> None:
    """Main entry point for the rcon-shell CLI."""
    args = build_parser().parse_args()
    app_started = time.perf_counter()
    password: Optional[str] = None
    log_path: Optional[str] = None

    try:
        profile_path = map_path(args.profile) if args.profile else None
        profile_data = load_profile(profile_path) if profile_path else ShellProfile()

        address = args.address or profile_data.address
        if not address:
            raise ConfigError("-a/--address is required (or set 'address' in the profile)")
        host, port = parse_address(address)

        log_path = map_path(args.log) if args.log else build_run_log_path(map_path(profile_data.logs_dir))
        setup_logging(log_path)
        log_event(
            "app_start",
            level=logging.INFO,
            address=f"{host}:{port}",
            profile_file=profile_path,
            log_file=log_path,
            history_file=profile_data.history_file,
            timeout=profile_data.timeout,
        )

        print("RCON Shell")
        password = resolve_password(args.password, profile_data)

        with RconClient(host, port, timeout=profile_data.timeout) as client:
            client.authenticate(password)
            shell = ShellSession(client)
            shell.load_registry()
            print("Connected. Type server commands or 'exit' to quit.")
            prompt_session = create_prompt_session(shell, profile_data.history_file)
            reason = repl_loop(shell, prompt_session)

        log_event("app_stop", level=logging.INFO, reason=reason, uptime_ms=_elapsed_ms(app_started))

    except KeyboardInterrupt:
        log_event("app_stop", level=logging.INFO, reason="keyboard_interrupt", uptime_ms=_elapsed_ms(app_started))
        print("\nInterrupted")
        sys.exit(0)
    except AppError as e:
        message = sanitize_error_message(str(e), secrets=(password or "",))
        print(f"Error: {message}")
        if log_path:
            log_event(
                "app_stop",
                level=logging.ERROR,
                reason="app_error",
                error_type=type(e).__name__,
                error=message,
                uptime_ms=_elapsed_ms(app_started),
            )
        sys.exit(1)
    except Exception as e:
        message = sanitize_error_message(str(e), secrets=(password or "",))
        print(f"Error: {message}")
        log_event(
            "app_stop",
            level=logging.ERROR,
            reason="fatal_error",
            error_type=type(e).__name__,
            error=message,
            uptime_ms=_elapsed_ms(app_started),
        )
        logging.error("Fatal error: %s", message, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
