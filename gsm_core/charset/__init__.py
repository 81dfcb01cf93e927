"""
GSM 03.38 Charset
=================
Encoding, decoding, validation and segmentation for the SMS default alphabet.
"""

# Re-export all public APIs
from ..models import EncodingType, Locale
from .tables import (
    PRIMARY_TABLE,
    BASIC_EXTENSION_TABLE,
    SPANISH_EXTENSION_TABLE,
    primary_table,
    extension_table,
    resolve_locale,
)
from .validation import can_encode, first_unencodable, requires_wide_encoding
from .encoding import encode, count_escaped_characters, count_septets
from .decoding import decode
from .segmentation import calculate_segments, detect_encoding, split_message
from .codec import register as register_codec

__all__ = [
    # Models
    "EncodingType",
    "Locale",
    # Tables
    "PRIMARY_TABLE",
    "BASIC_EXTENSION_TABLE",
    "SPANISH_EXTENSION_TABLE",
    "primary_table",
    "extension_table",
    "resolve_locale",
    # Validation
    "can_encode",
    "first_unencodable",
    "requires_wide_encoding",
    # Encoding
    "encode",
    "count_escaped_characters",
    "count_septets",
    # Decoding
    "decode",
    # Segmentation
    "calculate_segments",
    "detect_encoding",
    "split_message",
    # Codec
    "register_codec",
]
