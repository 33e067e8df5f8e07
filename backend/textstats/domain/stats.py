from __future__ import annotations

from textstats.domain.reading_time import estimate_reading_time
from textstats.domain.schema import UnitStats


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def char_length(text: str) -> int:
    # str is a sequence of code points, so astral characters count once.
    return len(text)


def line_count(text: str) -> int:
    # Same as splitting on "\n": a trailing newline opens one more (empty) line.
    return text.count("\n") + 1


def compute_unit_stats(text: str) -> UnitStats:
    """Counts for a single unit (the submitted text or one file's content)."""
    estimate = estimate_reading_time(text)
    return UnitStats(
        bytes=byte_length(text),
        chars=char_length(text),
        words=estimate.words,
        lines=line_count(text),
        reading_time=estimate.text,
    )
