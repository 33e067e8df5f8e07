import pytest

from textstats.domain.reading_time import count_words, estimate_reading_time
from textstats.domain.stats import byte_length, char_length, compute_unit_stats, line_count


class TestUnitStats:
    def test_two_line_text(self):
        stats = compute_unit_stats("hi\nthere")
        assert stats.lines == 2
        assert stats.words == 2
        assert stats.chars == 8
        assert stats.bytes == 8
        assert stats.reading_time == "1 min read"

    def test_astral_characters_count_once(self):
        text = "ok 👍🏽"
        utf16_units = len(text.encode("utf-16-le")) // 2

        assert char_length(text) == 5
        assert char_length(text) < utf16_units
        assert byte_length(text) == 2 + 1 + 4 + 4

    def test_multibyte_bytes_exceed_chars(self):
        stats = compute_unit_stats("héllo")
        assert stats.chars == 5
        assert stats.bytes == 6

    @pytest.mark.parametrize(
        "text,expected",
        [("", 1), ("a", 1), ("a\n", 2), ("a\nb", 2), ("\n\n", 3), ("a\r\nb", 2)],
    )
    def test_line_count_splits_on_newline(self, text, expected):
        assert line_count(text) == expected

    def test_empty_text(self):
        stats = compute_unit_stats("")
        assert (stats.bytes, stats.chars, stats.words, stats.lines) == (0, 0, 0, 1)
        assert stats.reading_time == "0 min read"

    def test_is_deterministic(self):
        assert compute_unit_stats("same input") == compute_unit_stats("same input")


class TestReadingTime:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a b c", 3),
            ("hello,   world!", 2),
            ("  leading and trailing  ", 3),
            ("tabs\tand\nnewlines", 3),
            ("one - two", 2),
            ("... !!! ---", 0),
            ("don't stop", 2),
            ("e-mail 2024", 2),
            ("日本語", 3),
            ("hello 世界", 3),
        ],
    )
    def test_word_fixtures(self, text, expected):
        assert count_words(text) == expected

    def test_minutes_round_up(self):
        assert estimate_reading_time("word " * 200).text == "1 min read"
        assert estimate_reading_time("word " * 202).text == "2 min read"
        assert estimate_reading_time("word " * 450).text == "3 min read"

    def test_words_and_phrase_come_from_one_estimate(self):
        estimate = estimate_reading_time("word " * 300)
        assert estimate.words == 300
        assert estimate.minutes == pytest.approx(1.5)
        assert estimate.text == "2 min read"

    def test_custom_wpm(self):
        assert estimate_reading_time("a b c d", wpm=2).text == "2 min read"
