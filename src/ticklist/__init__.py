"""Ticklist - a minimal keyboard-driven to-do list for the terminal."""

try:
    from importlib.metadata import version

    __version__ = version("ticklist")
except Exception:
    __version__ = "0.0.0+unknown"
