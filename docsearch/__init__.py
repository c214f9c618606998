"""Inverted-index document search driven by JSON configuration and requests."""

__version__ = "0.1.0"
__all__ = ["index", "server", "converter", "cli"]