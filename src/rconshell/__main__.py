"""Entry point for running rcon-shell as a module.

This allows running: python -m rconshell
"""

from .cli import main

if __name__ == "__main__":
    # main() is the CLI boundary and already handles all exceptions.
    main()
