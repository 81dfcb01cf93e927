"""
GSM Core Exceptions
===================
Exception classes for configuration and strict parsing.

The codec operations themselves never raise: unrepresentable input degrades
to a replacement character instead.
"""


class GsmCoreError(Exception):
    """Base class for all gsm_core exceptions."""
    pass


class ConfigurationError(GsmCoreError):
    """Raised when environment configuration cannot be parsed."""
    pass


class UnknownLocaleError(ConfigurationError, ValueError):
    """Raised when a locale name does not match any supported locale."""

    def __init__(self, name: str):
        super().__init__(f"Unknown GSM locale: {name!r}")
        self.name = name
