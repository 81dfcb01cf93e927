"""
GSM Encoding
============
Unicode to GSM 03.38 byte conversion and septet accounting.
"""

from typing import Optional, Union

import structlog

from ..config import DEFAULT_REPLACE_CHAR, ESCAPE_BYTE, get_config
from ..models import Locale
from .tables import EXTENSION_INDEXES, PRIMARY_INDEX, resolve_locale

logger = structlog.get_logger(__name__)


def _resolve_replace_char(replace_char: Optional[str]) -> int:
    if replace_char is None:
        replace_char = get_config().replace_char
    code = PRIMARY_INDEX.get(replace_char)
    if code is None:
        # covers empty, multi-character and non-primary replacements
        logger.warning("invalid_replace_char", replace_char=replace_char, fallback=DEFAULT_REPLACE_CHAR)
        code = PRIMARY_INDEX[DEFAULT_REPLACE_CHAR]
    return code


def encode(
    text: Optional[str],
    replace_char: Optional[str] = DEFAULT_REPLACE_CHAR,
    locale: Union[Locale, str, None] = Locale.BASIC,
) -> Optional[bytes]:
    """
    Encode text as GSM 03.38 bytes (one byte per septet, unpacked).

    Characters from the extension table are written as the escape byte
    followed by their extension index. Anything the locale cannot represent
    becomes the replacement character.

    Args:
        text: Text to encode
        replace_char: Substitute for unrepresentable characters. Must be a
            single default-alphabet character, otherwise "?" is used
        locale: Locale whose extension table applies

    Returns:
        Encoded bytes, or None when text is None
    """
    if text is None:
        return None

    extension = EXTENSION_INDEXES[resolve_locale(locale)]
    replacement = None
    buffer = bytearray()

    for char in text:
        code = PRIMARY_INDEX.get(char)
        if code is not None:
            buffer.append(code)
            continue

        code = extension.get(char)
        if code is not None:
            buffer.append(ESCAPE_BYTE)
            buffer.append(code)
            continue

        if replacement is None:
            replacement = _resolve_replace_char(replace_char)
        buffer.append(replacement)

    return bytes(buffer)


def count_escaped_characters(text: Optional[str], locale: Union[Locale, str, None] = Locale.BASIC) -> int:
    """
    Count characters that need the escape byte in the given locale.

    Args:
        text: Message content
        locale: Locale whose extension table applies

    Returns:
        Number of extension-table characters
    """
    if not text:
        return 0
    extension = EXTENSION_INDEXES[resolve_locale(locale)]
    return sum(1 for char in text if char not in PRIMARY_INDEX and char in extension)


def count_septets(text: Optional[str], locale: Union[Locale, str, None] = Locale.BASIC) -> int:
    """
    Count GSM-7 septet units (extension characters count as 2).

    Args:
        text: Message content
        locale: Locale whose extension table applies

    Returns:
        Septet count for segmentation
    """
    if not text:
        return 0
    return len(text) + count_escaped_characters(text, locale)
