"""rcon-shell - interactive RCON shell with grammar-driven completion."""

__version__ = "0.1.0"
