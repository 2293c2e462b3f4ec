"""Cellular network capacity simulator covering 2G through 5G technologies."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "config",
    "console",
    "core",
    "device",
    "exceptions",
    "filemode",
    "interactive",
    "manager",
    "tower",
]