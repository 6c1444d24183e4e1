from __future__ import annotations


class ArgumentError(ValueError):
    """Raised when the positional request arguments are missing or malformed."""


class ConfigurationError(RuntimeError):
    """Raised when a required credential is not configured."""


__all__ = ["ArgumentError", "ConfigurationError"]
