from __future__ import annotations

import asyncio
from typing import List, Optional

from textstats.compression.codecs import compressed_size
from textstats.core.logging import get_logger
from textstats.domain.schema import (
    CompressionAlgorithm,
    FileBlob,
    FileSizes,
    SizesRequest,
    SizesResult,
    UnitSizes,
)

logger = get_logger(__name__)

_SIZE_FIELDS = tuple(UnitSizes.model_fields)


async def _measure(data: bytes, req: SizesRequest) -> UnitSizes:
    sizes = {}
    if req.initial_enabled:
        sizes["initial"] = len(data)

    enabled = [a for a in CompressionAlgorithm if req.config_for(a).enabled]
    measured = await asyncio.gather(
        *(
            asyncio.to_thread(compressed_size, data, a, req.config_for(a).level)
            for a in enabled
        )
    )
    for algorithm, size in zip(enabled, measured):
        sizes[algorithm.value] = size

    return UnitSizes(**sizes)


async def _file_sizes(file: FileBlob, req: SizesRequest) -> FileSizes:
    # Raw upload bytes: decoding would inflate undecodable bytes to U+FFFD.
    return FileSizes(name=file.name, sizes=await _measure(file.content, req))


def _sum_sizes(parts: List[UnitSizes]) -> UnitSizes:
    total = {}
    for field in _SIZE_FIELDS:
        values: List[Optional[int]] = [getattr(p, field) for p in parts]
        present = [v for v in values if v is not None]
        if present:
            total[field] = sum(present)
    return UnitSizes(**total)


async def aggregate_sizes(req: SizesRequest) -> SizesResult:
    """Size of every unit, raw and under each enabled compression, plus the total."""
    text_sizes = await _measure(req.text.encode("utf-8"), req) if req.text else None

    files: List[FileSizes] = []
    if req.files:
        files = list(await asyncio.gather(*(_file_sizes(f, req) for f in req.files)))

    parts = [f.sizes for f in files]
    if text_sizes is not None:
        parts.insert(0, text_sizes)

    result = SizesResult(text=text_sizes, total=_sum_sizes(parts), files=files)
    logger.info(
        "sizes.aggregated",
        has_text=text_sizes is not None,
        file_count=len(files),
        algorithms=[a.value for a in CompressionAlgorithm if req.config_for(a).enabled],
    )
    return result
