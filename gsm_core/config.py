"""
GSM Core Configuration
======================
Protocol constants and environment-driven defaults.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .models import Locale

# GSM 03.38 constants
ESCAPE_BYTE = 0x1B
DEFAULT_REPLACE_CHAR = "?"

# Transport limits
GSM7_MAX_SEPTETS = 160
GSM7_CONCAT_SEPTETS = 153
UCS2_MAX_CHARS = 70
UCS2_CONCAT_CHARS = 67

# Greedy split charges every word for its separator on top of its own units
GREEDY_WORD_OVERHEAD = 2

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class CharsetConfig:
    """Process-wide defaults for the codec and segmenter."""
    default_locale: Locale = Locale.BASIC
    replace_char: str = DEFAULT_REPLACE_CHAR
    greedy_split: bool = False
    log_level: str = "INFO"


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> CharsetConfig:
    """
    Build configuration from environment variables.

    Recognized variables:
    - GSM_CORE_DEFAULT_LOCALE: "basic" or "spanish"
    - GSM_CORE_REPLACE_CHAR: replacement for unrepresentable characters
    - GSM_CORE_GREEDY_SPLIT: use the greedy word split by default
    - GSM_CORE_LOG_LEVEL: level passed to setup_logging

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Frozen CharsetConfig

    Raises:
        UnknownLocaleError: If the default locale is not supported
        ConfigurationError: If a boolean flag cannot be parsed
    """
    env = os.environ if environ is None else environ

    return CharsetConfig(
        default_locale=Locale.parse(env.get("GSM_CORE_DEFAULT_LOCALE", Locale.BASIC.value)),
        replace_char=env.get("GSM_CORE_REPLACE_CHAR", DEFAULT_REPLACE_CHAR),
        greedy_split=_parse_bool(
            "GSM_CORE_GREEDY_SPLIT", env.get("GSM_CORE_GREEDY_SPLIT", "false")
        ),
        log_level=env.get("GSM_CORE_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_config() -> CharsetConfig:
    """Get the cached process-wide configuration."""
    return load_config()
