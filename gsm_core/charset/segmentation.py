"""
Message Segmentation
====================
Functions for SMS segment calculation and splitting.
"""

from typing import List, Optional, Tuple, Union

import structlog

from ..config import (
    GREEDY_WORD_OVERHEAD,
    GSM7_CONCAT_SEPTETS,
    GSM7_MAX_SEPTETS,
    UCS2_CONCAT_CHARS,
    UCS2_MAX_CHARS,
    get_config,
)
from ..models import EncodingType, Locale
from .encoding import count_escaped_characters, count_septets
from .validation import can_encode, requires_wide_encoding

logger = structlog.get_logger(__name__)


def detect_encoding(text: str, locale: Union[Locale, str, None] = Locale.BASIC) -> EncodingType:
    """
    Detect the required encoding for a message.

    Args:
        text: Message content
        locale: Locale whose extension table applies

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    if requires_wide_encoding(text) or not can_encode(text, locale):
        return EncodingType.UCS2
    return EncodingType.GSM7


def calculate_segments(text: str, locale: Union[Locale, str, None] = Locale.BASIC) -> Tuple[int, EncodingType, int]:
    """
    Calculate the number of SMS segments required.

    Segment limits:
    - GSM-7: 160 septets (single), 153 septets (concatenated)
    - UCS-2: 70 chars (single), 67 chars (concatenated)

    Args:
        text: Message content
        locale: Locale whose extension table applies

    Returns:
        Tuple of (segments, encoding, char_count)
    """
    encoding = detect_encoding(text, locale)

    if encoding == EncodingType.GSM7:
        char_count = count_septets(text, locale)
        if char_count <= GSM7_MAX_SEPTETS:
            return 1, encoding, char_count
        segments = (char_count + GSM7_CONCAT_SEPTETS - 1) // GSM7_CONCAT_SEPTETS
        return segments, encoding, char_count

    char_count = len(text)
    if char_count <= UCS2_MAX_CHARS:
        return 1, encoding, char_count
    segments = (char_count + UCS2_CONCAT_CHARS - 1) // UCS2_CONCAT_CHARS
    return segments, encoding, char_count


def _wrap_line(line: str, width: int) -> List[str]:
    fragments = []
    words: List[str] = []
    length = 0

    for word in line.split(" "):
        # a word wider than a whole fragment is hard-broken
        while len(word) > width:
            if words:
                fragments.append(" ".join(words))
                words, length = [], 0
            fragments.append(word[:width])
            word = word[width:]

        added = len(word) + 1 if words else len(word)
        if words and length + added > width:
            fragments.append(" ".join(words))
            words, length = [], 0
            added = len(word)

        words.append(word)
        length += added

    if words:
        fragments.append(" ".join(words))
    return fragments


def wrap_text(text: str, width: int) -> List[str]:
    """
    Wrap text into fragments of at most `width` characters.

    Breaks at the space nearest the limit; the space itself is consumed.
    Line breaks always end a fragment. Empty fragments are dropped.

    Only one space is consumed per break, so a run of spaces keeps its extra
    spaces at the edge of a fragment ("ab  cd" at width 4 gives ["ab ", "cd"]).
    Joining the fragments with single spaces restores each line.
    """
    fragments = []
    for line in text.split("\n"):
        fragments.extend(_wrap_line(line, width))
    return [fragment for fragment in fragments if fragment]


def greedy_split(text: str) -> List[str]:
    """
    Pack whole words into fragments of at most 160 septets.

    Each word is charged len(word) + escaped characters + 2. A word that
    costs more than a full fragment is kept whole in a fragment of its own.
    """
    fragments: List[List[str]] = []
    available = GSM7_MAX_SEPTETS

    for word in text.split():
        cost = len(word) + count_escaped_characters(word) + GREEDY_WORD_OVERHEAD
        available -= cost
        if available < 0:
            available = GSM7_MAX_SEPTETS - cost
            fragments.append([])
        elif not fragments:
            fragments.append([])
        fragments[-1].append(word)

    return [" ".join(words) for words in fragments]


def split_message(text: str, use_greedy_split: Optional[bool] = False) -> List[str]:
    """
    Split an SMS into parts that fit the transport limits.

    If the text holds locale-specific characters (e.g. Spanish "ç"), the
    message has to be sent as UCS-2 and is wrapped into parts of at most 70
    characters. Otherwise GSM-7 is used and every extension-table character
    costs an extra escape septet:

    - use_greedy_split=False: fast approximation. All escaped characters of
      the message are assumed to land in the same part, so every part is
      limited to 160 minus that count.
    - use_greedy_split=True: words are packed one at a time while the
      running septet budget allows.

    Args:
        text: Message content
        use_greedy_split: Select the greedy word packing; None uses the
            configured default

    Returns:
        List of message parts
    """
    if not text:
        return []

    if use_greedy_split is None:
        use_greedy_split = get_config().greedy_split

    if requires_wide_encoding(text):
        mode = EncodingType.UCS2.value
        fragments = wrap_text(text, UCS2_MAX_CHARS)
    elif use_greedy_split:
        mode = "greedy"
        fragments = greedy_split(text)
    else:
        mode = "approximate"
        safe_length = GSM7_MAX_SEPTETS - count_escaped_characters(text)
        if safe_length <= 0:
            # 160+ escaped characters: 80 characters always fit
            safe_length = GSM7_MAX_SEPTETS // 2
        fragments = wrap_text(text, safe_length)

    logger.debug("message_split", mode=mode, fragments=len(fragments), length=len(text))
    return fragments
