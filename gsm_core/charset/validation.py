"""
Charset Validation
==================
Checks whether text is representable in a locale's GSM character set.
"""

from typing import Optional, Union

from ..models import Locale
from .tables import EXTENSION_INDEXES, LOCALE_SPECIFIC_CHARS, PRIMARY_INDEX, resolve_locale


def first_unencodable(text: Optional[str], locale: Union[Locale, str, None] = Locale.BASIC) -> Optional[int]:
    """
    Find the first character that the locale cannot represent.

    Args:
        text: Text to check
        locale: Locale whose extension table applies

    Returns:
        Position of the first unrepresentable character, or None
    """
    if not text:
        return None

    extension = EXTENSION_INDEXES[resolve_locale(locale)]
    for position, char in enumerate(text):
        if char.isascii() and char.isalnum():
            continue
        if char not in PRIMARY_INDEX and char not in extension:
            return position
    return None


def can_encode(text: Optional[str], locale: Union[Locale, str, None] = Locale.BASIC) -> bool:
    """
    Verify that every character of the text is representable without loss.

    Args:
        text: Text to verify; None is trivially encodable
        locale: Locale whose extension table applies

    Returns:
        True if the text can be encoded in the locale's character set
    """
    return first_unencodable(text, locale) is None


def requires_wide_encoding(text: Optional[str]) -> bool:
    """
    Check for characters that only exist in a locale-specific extension table.

    Such characters (e.g. "ç" in the Spanish table) are not understood by
    handsets using the basic table, so the message has to go out as UCS-2.
    """
    if not text:
        return False
    return any(char in LOCALE_SPECIFIC_CHARS for char in text)
