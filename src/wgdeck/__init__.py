"""WireGuard profile dashboard with an embedded modal line editor."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "editor",
    "keymaps",
    "modes",
    "runtime",
    "wireguard",
]

__version__ = "0.1.0"
