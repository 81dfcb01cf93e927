"""
Python Codec
============
Registers GSM 03.38 as Python codecs, so text can be converted with the
builtin str/bytes methods:

    >>> import gsm_core
    >>> "{ brackets }".encode("gsm0338")
    b'\\x1b( brackets \\x1b)'
    >>> b"\\x1b\\t".decode("gsm0338_spanish")
    'ç'

Codec names map to locales: "gsm0338" is the basic locale and
"gsm0338_<locale>" any other supported one. Error handlers "strict",
"replace" and "ignore" are supported.
"""

import codecs
from typing import Optional, Tuple

import structlog

from ..models import Locale
from .decoding import iter_decode
from .encoding import encode
from .tables import EXTENSION_INDEXES, PRIMARY_INDEX
from .validation import first_unencodable

logger = structlog.get_logger(__name__)

CODEC_PREFIX = "gsm0338"

_ERROR_HANDLERS = ("strict", "replace", "ignore")

_registered = False


def _check_errors(errors: str) -> None:
    if errors not in _ERROR_HANDLERS:
        raise ValueError(f"Unsupported error handler for {CODEC_PREFIX}: {errors!r}")


def codec_name(locale: Locale) -> str:
    """Codec name for a locale."""
    if locale is Locale.BASIC:
        return CODEC_PREFIX
    return f"{CODEC_PREFIX}_{locale.value}"


def _make_codec(locale: Locale) -> codecs.CodecInfo:
    name = codec_name(locale)
    extension = EXTENSION_INDEXES[locale]

    def encode_func(text: str, errors: str = "strict") -> Tuple[bytes, int]:
        _check_errors(errors)
        if errors == "strict":
            position = first_unencodable(text, locale)
            if position is not None:
                raise UnicodeEncodeError(
                    name, text, position, position + 1, "character not in GSM 03.38 alphabet"
                )
            data = encode(text, locale=locale)
        elif errors == "ignore":
            data = encode(
                "".join(c for c in text if c in PRIMARY_INDEX or c in extension),
                locale=locale,
            )
        else:
            data = encode(text, locale=locale)
        return data, len(text)

    def decode_func(data: bytes, errors: str = "strict") -> Tuple[str, int]:
        _check_errors(errors)
        data = bytes(data)
        chars = []
        for start, end, char in iter_decode(data, locale):
            if char is not None:
                chars.append(char)
            elif errors == "strict":
                raise UnicodeDecodeError(name, data, start, end, "byte not in GSM 03.38 alphabet")
            elif errors == "replace":
                chars.append("?")
        return "".join(chars), len(data)

    return codecs.CodecInfo(encode=encode_func, decode=decode_func, name=name)


_CODECS = {codec_name(locale): _make_codec(locale) for locale in Locale}


def search_function(name: str) -> Optional[codecs.CodecInfo]:
    """Codec lookup hook for codecs.register."""
    return _CODECS.get(name.lower().replace("-", "_"))


def register() -> None:
    """Register the GSM 03.38 codecs with Python's codec registry."""
    global _registered
    if _registered:
        return
    codecs.register(search_function)
    _registered = True
    logger.debug("gsm_codec_registered", codecs=sorted(_CODECS))
