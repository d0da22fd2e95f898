"""RTT: a small terminal text editor."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "editor",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
