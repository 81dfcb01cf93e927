"""
GSM Core Models
===============
Enums for locale selection and transport encoding.
"""

from enum import Enum

from .exceptions import UnknownLocaleError


class Locale(str, Enum):
    """GSM 03.38 locales. Each one selects an extension table."""
    BASIC = "basic"
    SPANISH = "spanish"

    @classmethod
    def parse(cls, name: str) -> "Locale":
        """
        Strictly parse a locale name.

        Args:
            name: Locale value, case-insensitive (e.g. "basic", "Spanish")

        Returns:
            Matching Locale

        Raises:
            UnknownLocaleError: If no locale has that name
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownLocaleError(name) from None


class EncodingType(str, Enum):
    """SMS transport encodings."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"
