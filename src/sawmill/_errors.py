"""Sawmill error hierarchy.

All sawmill-specific errors inherit from SawmillError for easy catching.
Exceptions raised by a hook are never wrapped; they reach the caller as-is.
"""


class SawmillError(Exception):
    """Base error for all sawmill operations."""


class ConfigError(SawmillError):
    """Invalid or missing configuration."""


class HookError(SawmillError):
    """A bundled hook cannot deliver events (e.g. its output is closed)."""
