"""
Character Tables
================
GSM 03.38 default alphabet and per-locale extension tables.

Every table and reverse index in this module is built once at import and
never mutated.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

import structlog

from ..config import ESCAPE_BYTE, get_config
from ..models import Locale

logger = structlog.get_logger(__name__)

# Index 0x1B is the escape code; it holds a space placeholder that decode
# never emits and encode never selects.
PRIMARY_TABLE: Tuple[str, ...] = (
    "@", "£", "$", "¥", "è", "é", "ù", "ì",
    "ò", "Ç", "\n", "Ø", "ø", "\r", "Å", "å",
    "Δ", "_", "Φ", "Γ", "Λ", "Ω", "Π", "Ψ",
    "Σ", "Θ", "Ξ", " ", "Æ", "æ", "ß", "É",
    " ", "!", '"', "#", "¤", "%", "&", "'",
    "(", ")", "*", "+", ",", "-", ".", "/",
    "0", "1", "2", "3", "4", "5", "6", "7",
    "8", "9", ":", ";", "<", "=", ">", "?",
    "¡", "A", "B", "C", "D", "E", "F", "G",
    "H", "I", "J", "K", "L", "M", "N", "O",
    "P", "Q", "R", "S", "T", "U", "V", "W",
    "X", "Y", "Z", "Ä", "Ö", "Ñ", "Ü", "§",
    "¿", "a", "b", "c", "d", "e", "f", "g",
    "h", "i", "j", "k", "l", "m", "n", "o",
    "p", "q", "r", "s", "t", "u", "v", "w",
    "x", "y", "z", "ä", "ö", "ñ", "ü", "à",
)

BASIC_EXTENSION_TABLE: Mapping[int, str] = MappingProxyType({
    0x14: "^",
    0x28: "{",
    0x29: "}",
    0x2F: "\\",
    0x3C: "[",
    0x3D: "~",
    0x3E: "]",
    0x40: "|",
    0x65: "€",
})

SPANISH_EXTENSION_TABLE: Mapping[int, str] = MappingProxyType({
    **BASIC_EXTENSION_TABLE,
    0x09: "ç",
    0x41: "Á",
    0x49: "Í",
    0x4F: "Ó",
    0x55: "Ú",
    0x61: "á",
    0x69: "í",
    0x6F: "ó",
    0x75: "ú",
})

EXTENSION_TABLES: Mapping[Locale, Mapping[int, str]] = MappingProxyType({
    Locale.BASIC: BASIC_EXTENSION_TABLE,
    Locale.SPANISH: SPANISH_EXTENSION_TABLE,
})


def _build_primary_index() -> Mapping[str, int]:
    index = {}
    for code, char in enumerate(PRIMARY_TABLE):
        if code == ESCAPE_BYTE:
            # placeholder slot, never an encode target
            continue
        # ascending walk: a duplicate keeps its highest index
        index[char] = code
    return MappingProxyType(index)


def _build_extension_index(table: Mapping[int, str]) -> Mapping[str, int]:
    index = {}
    for code in sorted(table):
        index.setdefault(table[code], code)
    return MappingProxyType(index)


PRIMARY_INDEX: Mapping[str, int] = _build_primary_index()

EXTENSION_INDEXES: Mapping[Locale, Mapping[str, int]] = MappingProxyType({
    locale: _build_extension_index(table)
    for locale, table in EXTENSION_TABLES.items()
})

# Characters reachable only through a non-basic locale's extension table.
# Their presence forces the wide transport encoding.
LOCALE_SPECIFIC_CHARS = frozenset(
    char
    for locale, table in EXTENSION_TABLES.items()
    if locale is not Locale.BASIC
    for char in table.values()
    if char not in PRIMARY_INDEX and char not in EXTENSION_INDEXES[Locale.BASIC]
)


def resolve_locale(locale: Union[Locale, str, None] = None) -> Locale:
    """
    Resolve a locale argument to a supported Locale.

    None selects the configured default locale. Unknown names fall back to
    the basic locale rather than failing.
    """
    if locale is None:
        return get_config().default_locale
    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(locale)
    except ValueError:
        logger.warning("unknown_locale_fallback", locale=str(locale), fallback=Locale.BASIC.value)
        return Locale.BASIC


def primary_table() -> Tuple[str, ...]:
    """The 128-entry GSM 03.38 default alphabet."""
    return PRIMARY_TABLE


def extension_table(locale: Union[Locale, str, None] = None) -> Mapping[int, str]:
    """Sparse extension table (index -> character) for a locale."""
    return EXTENSION_TABLES[resolve_locale(locale)]


def primary_index(char: str) -> Optional[int]:
    """Index of a character in the default alphabet, or None."""
    return PRIMARY_INDEX.get(char)


def extension_index(char: str, locale: Union[Locale, str, None] = None) -> Optional[int]:
    """Index of a character in a locale's extension table, or None."""
    return EXTENSION_INDEXES[resolve_locale(locale)].get(char)
