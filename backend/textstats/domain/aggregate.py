from __future__ import annotations

import asyncio
from typing import List

from textstats.core.logging import get_logger
from textstats.domain.schema import FileBlob, FileWC, NumericStats, WCRequest, WCResult
from textstats.domain.stats import compute_unit_stats

logger = get_logger(__name__)

_NUMERIC_FIELDS = tuple(NumericStats.model_fields)


async def _file_wc(file: FileBlob) -> FileWC:
    content = await file.read_text()
    return FileWC(name=file.name, wc=compute_unit_stats(content))


def _sum_stats(parts: List[NumericStats]) -> NumericStats:
    total = {field: 0 for field in _NUMERIC_FIELDS}
    for part in parts:
        for field in _NUMERIC_FIELDS:
            total[field] += getattr(part, field)
    return NumericStats(**total)


async def aggregate_wc(req: WCRequest) -> WCResult:
    """
    Count the text unit (if any) and every file, then fold the counts into a total.

    Files are read and counted concurrently; gather() keeps results in input order.
    """
    text_stats = compute_unit_stats(req.text) if req.text else None

    files: List[FileWC] = []
    if req.files:
        files = list(await asyncio.gather(*(_file_wc(f) for f in req.files)))

    parts: List[NumericStats] = [f.wc.numeric() for f in files]
    if text_stats is not None:
        parts.insert(0, text_stats.numeric())

    result = WCResult(text=text_stats, total=_sum_stats(parts), files=files)
    logger.info(
        "wc.aggregated",
        has_text=text_stats is not None,
        file_count=len(files),
        words=result.total.words,
    )
    return result
