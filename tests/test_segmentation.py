"""
Segmentation Tests
==================
Tests for message splitting and segment calculation.
"""

import pytest

# 170 chars, plain GSM-7
MSG_170 = " ".join(["hello"] * 28) + " ab"

# 209 chars, contains the Spanish-only "ç"
MSG_SPANISH = " ".join(["Garçon"] * 30)

MSG_ESCAPED = " ".join(["price", "€5", "{ok}", "[x]", "hello", "world~"] * 20)


def _greedy_cost(fragment):
    from gsm_core import count_escaped_characters

    return sum(len(word) + count_escaped_characters(word) + 2 for word in fragment.split())


class TestApproximateSplit:
    """Tests for the default (approximate) split."""

    def test_short_message(self):
        """A short message should stay in one part."""
        from gsm_core import split_message

        assert split_message("Hello world") == ["Hello world"]

    def test_empty_message(self):
        """An empty message should produce no parts."""
        from gsm_core import split_message

        assert split_message("") == []

    def test_plain_170_chars(self):
        """A 170 char message should split into two parts at a space."""
        from gsm_core import split_message

        assert len(MSG_170) == 170
        parts = split_message(MSG_170)

        assert len(parts) == 2
        assert all(len(part) <= 160 for part in parts)
        assert " ".join(parts) == MSG_170
        assert parts[1] == "hello hello ab"

    def test_escaped_characters_shrink_parts(self):
        """Every escaped character should reduce the part length."""
        from gsm_core import split_message, count_septets

        text = " ".join(["{a}"] * 10 + ["hello"] * 25)  # 20 escaped chars
        parts = split_message(text)

        assert len(parts) == 2
        assert all(len(part) <= 140 for part in parts)
        assert all(count_septets(part) <= 160 for part in parts)
        assert " ".join(parts) == text

    def test_escaped_limit_below_half_a_part(self):
        """With 81-159 escaped chars the limit should still be 160 minus the count."""
        from gsm_core import split_message, count_escaped_characters

        text = " ".join(["{a}"] * 50 + ["hello"] * 20)
        limit = 160 - count_escaped_characters(text)
        parts = split_message(text)

        assert limit == 60
        assert all(len(part) <= limit for part in parts)
        assert max(len(part) for part in parts) > 50
        assert " ".join(parts) == text

    def test_many_escaped_characters(self):
        """With 160+ escaped chars parts should be capped at 80, which always fit."""
        from gsm_core import split_message, count_septets

        text = " ".join(["{}"] * 100)  # 200 escaped chars
        parts = split_message(text)

        assert all(len(part) <= 80 for part in parts)
        assert all(count_septets(part) <= 160 for part in parts)
        assert max(len(part) for part in parts) == 80

    def test_whole_message_count_underfills(self):
        """Escapes in one part should also shrink the other parts."""
        from gsm_core import split_message, count_septets

        text = " ".join(["hello"] * 40) + " " + "{}" * 10  # 20 escaped chars
        parts = split_message(text)

        # first part has no escapes but is still capped at 140 chars
        assert len(parts) == 2
        assert len(parts[0]) == 137
        assert count_septets(parts[0]) == 137

    def test_line_breaks_end_parts(self):
        """Line breaks should always start a new part."""
        from gsm_core import split_message

        assert split_message("hello\nworld") == ["hello", "world"]
        assert split_message("hello\n\nworld") == ["hello", "world"]

    def test_space_runs_keep_extra_spaces(self):
        """Only one space should be consumed at a break."""
        from gsm_core.charset.segmentation import wrap_text

        parts = wrap_text("ab  cd", 4)

        assert parts == ["ab ", "cd"]
        assert " ".join(parts) == "ab  cd"

    def test_long_word_is_hard_broken(self):
        """A word longer than a part should be cut at the part limit."""
        from gsm_core import split_message

        parts = split_message("x" * 200)

        assert parts == ["x" * 160, "x" * 40]


class TestGreedySplit:
    """Tests for the greedy word split."""

    def test_plain_170_chars(self):
        """A 170 char message should split into two parts at a space."""
        from gsm_core import split_message

        parts = split_message(MSG_170, use_greedy_split=True)

        assert len(parts) == 2
        assert all(len(part) <= 160 for part in parts)
        assert " ".join(parts) == MSG_170

    def test_greedy_budget(self):
        """Each part should respect the 160 unit budget."""
        from gsm_core import split_message

        parts = split_message(MSG_ESCAPED, use_greedy_split=True)

        assert len(parts) > 1
        assert all(_greedy_cost(part) <= 160 for part in parts)
        assert " ".join(parts) == MSG_ESCAPED

    def test_greedy_packs_tighter(self):
        """Greedy split should not need more parts than the approximation."""
        from gsm_core import split_message

        text = "{}" * 30 + " " + " ".join(["hello"] * 60)
        approximate = split_message(text)
        greedy = split_message(text, use_greedy_split=True)

        assert len(greedy) <= len(approximate)

    def test_oversized_word(self):
        """A word costing more than a part should sit alone, unsplit."""
        from gsm_core import split_message

        long_word = "x" * 200
        parts = split_message(f"short {long_word} tail", use_greedy_split=True)

        assert parts == ["short", long_word, "tail"]

    def test_oversized_first_word(self):
        """An oversized first word should not leave an empty part."""
        from gsm_core import split_message

        long_word = "x" * 200
        parts = split_message(f"{long_word} a", use_greedy_split=True)

        assert parts == [long_word, "a"]

    def test_collapses_whitespace(self):
        """Words should be re-joined with single spaces."""
        from gsm_core import split_message

        assert split_message("a  b\nc", use_greedy_split=True) == ["a b c"]

    def test_default_from_config(self, monkeypatch):
        """use_greedy_split=None should follow GSM_CORE_GREEDY_SPLIT."""
        from gsm_core import split_message
        from gsm_core.config import get_config

        monkeypatch.setenv("GSM_CORE_GREEDY_SPLIT", "true")
        get_config.cache_clear()
        try:
            assert split_message(MSG_170, None) == split_message(MSG_170, True)
        finally:
            monkeypatch.delenv("GSM_CORE_GREEDY_SPLIT")
            get_config.cache_clear()


class TestWideSplit:
    """Tests for messages that need UCS-2."""

    @pytest.mark.parametrize("greedy", [False, True])
    def test_spanish_message(self, greedy):
        """Spanish-only characters should force 70 char parts."""
        from gsm_core import split_message

        parts = split_message(MSG_SPANISH, use_greedy_split=greedy)

        assert len(parts) == 3
        assert all(len(part) <= 70 for part in parts)
        assert " ".join(parts) == MSG_SPANISH

    def test_long_spanish_word(self):
        """A word over 70 chars should be cut into 70 char pieces."""
        from gsm_core import split_message

        text = "ç" + "a" * 99
        parts = split_message(text)

        assert [len(part) for part in parts] == [70, 30]
        assert "".join(parts) == text

    def test_short_spanish_message(self):
        """A short Spanish message should stay in one part."""
        from gsm_core import split_message

        assert split_message("Hola, ¿qué tal? Soy García") == ["Hola, ¿qué tal? Soy García"]


class TestSegments:
    """Tests for encoding detection and segment counting."""

    def test_detect_gsm7_encoding(self):
        """Should detect GSM-7 for basic ASCII."""
        from gsm_core import detect_encoding, EncodingType

        assert detect_encoding("Hello World!") == EncodingType.GSM7
        assert detect_encoding("{braces} €") == EncodingType.GSM7

    def test_detect_ucs2_encoding(self):
        """Should detect UCS-2 for unicode and Spanish-only characters."""
        from gsm_core import detect_encoding, EncodingType

        assert detect_encoding("Hello 你好") == EncodingType.UCS2
        assert detect_encoding("Garçon") == EncodingType.UCS2
        assert detect_encoding("Garçon", "spanish") == EncodingType.UCS2

    def test_calculate_segments_short(self):
        """Short message should be 1 segment."""
        from gsm_core import calculate_segments, EncodingType

        assert calculate_segments("Hello") == (1, EncodingType.GSM7, 5)

    def test_calculate_segments_long(self):
        """Long message should be multiple segments."""
        from gsm_core import calculate_segments

        segments, encoding, chars = calculate_segments("A" * 200)

        assert segments == 2
        assert chars == 200

    def test_calculate_segments_escaped(self):
        """Escaped characters should count twice."""
        from gsm_core import calculate_segments

        segments, _, chars = calculate_segments("{" * 100)

        assert chars == 200
        assert segments == 2

    def test_calculate_segments_ucs2(self):
        """UCS-2 messages should use the 70/67 limits."""
        from gsm_core import calculate_segments, EncodingType

        assert calculate_segments("Hello 你好") == (1, EncodingType.UCS2, 8)
        assert calculate_segments("ç" * 71) == (2, EncodingType.UCS2, 71)
