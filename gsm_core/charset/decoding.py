"""
GSM Decoding
============
GSM 03.38 bytes to Unicode conversion.
"""

from typing import Iterable, Iterator, Optional, Tuple, Union

from ..config import DEFAULT_REPLACE_CHAR, ESCAPE_BYTE
from ..models import Locale
from .tables import PRIMARY_TABLE, extension_table

ByteInput = Union[bytes, bytearray, memoryview, Iterable[int]]


def iter_decode(
    data: ByteInput,
    locale: Union[Locale, str, None] = Locale.BASIC,
) -> Iterator[Tuple[int, int, Optional[str]]]:
    """
    Walk encoded data and yield one entry per decoded character.

    Yields (start, end, char) where start/end delimit the consumed bytes and
    char is None for an unmapped byte. An escape byte at the end of the data
    yields nothing.
    """
    extension = extension_table(locale)
    escaped = False
    start = 0

    for position, value in enumerate(data):
        code = value & 0xFF

        if escaped:
            # the byte after an escape always indexes the extension table,
            # even when it is another escape byte
            escaped = False
            yield start, position + 1, extension.get(code)
        elif code == ESCAPE_BYTE:
            escaped = True
            start = position
        elif code < len(PRIMARY_TABLE):
            yield position, position + 1, PRIMARY_TABLE[code]
        else:
            yield position, position + 1, None


def decode(data: Optional[ByteInput], locale: Union[Locale, str, None] = Locale.BASIC) -> Optional[str]:
    """
    Decode GSM 03.38 bytes (one septet per byte, unpacked) into text.

    Unmapped bytes and unmapped escape sequences become "?"; decoding never
    fails.

    Args:
        data: Encoded bytes or an iterable of byte values
        locale: Locale whose extension table applies

    Returns:
        Decoded text, or None when data is None
    """
    if data is None:
        return None

    return "".join(
        DEFAULT_REPLACE_CHAR if char is None else char
        for _, _, char in iter_decode(data, locale)
    )
