from __future__ import annotations

import math
import re
from dataclasses import dataclass

WORDS_PER_MINUTE = 200

# Hiragana/katakana, CJK ideographs (ext. A, unified, compatibility) and hangul syllables.
_CJK = r"\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\uac00-\ud7af"
_TOKEN = re.compile(rf"[{_CJK}]|[^\s{_CJK}]+")
_CJK_CHAR = re.compile(rf"[{_CJK}]")


@dataclass(frozen=True)
class ReadingTimeEstimate:
    words: int
    minutes: float
    text: str


def count_words(text: str) -> int:
    """
    Whitespace-separated tokens that contain at least one letter or digit.

    Each CJK character is a word on its own, since those scripts do not space words.
    Tokens made only of punctuation (a lone "-" or "...") are not words.
    """
    words = 0
    for token in _TOKEN.findall(text):
        if _CJK_CHAR.fullmatch(token) or any(ch.isalnum() for ch in token):
            words += 1
    return words


def estimate_reading_time(text: str, wpm: int = WORDS_PER_MINUTE) -> ReadingTimeEstimate:
    words = count_words(text)
    minutes = words / wpm
    displayed = math.ceil(round(minutes, 2))
    return ReadingTimeEstimate(words=words, minutes=minutes, text=f"{displayed} min read")
