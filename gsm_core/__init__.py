"""
GSM Core Library
================
GSM 03.38 codec and SMS message segmentation.
"""

__version__ = "0.1.0"

# Models
from gsm_core.models import EncodingType, Locale

# Errors
from gsm_core.exceptions import GsmCoreError, ConfigurationError, UnknownLocaleError

# Configuration
from gsm_core.config import CharsetConfig, load_config, get_config

# Charset
from gsm_core.charset import (
    can_encode,
    encode,
    decode,
    split_message,
    detect_encoding,
    calculate_segments,
    count_septets,
    count_escaped_characters,
    register_codec,
)

# Logging
from gsm_core.logging import setup_logging

register_codec()

__all__ = [
    "__version__",
    "EncodingType",
    "Locale",
    "GsmCoreError",
    "ConfigurationError",
    "UnknownLocaleError",
    "CharsetConfig",
    "load_config",
    "get_config",
    "can_encode",
    "encode",
    "decode",
    "split_message",
    "detect_encoding",
    "calculate_segments",
    "count_septets",
    "count_escaped_characters",
    "register_codec",
    "setup_logging",
]
