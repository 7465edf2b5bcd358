"""Modal (Normal/Insert) text editor core with a Textual host."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
