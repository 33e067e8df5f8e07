from __future__ import annotations

import gzip
import zlib
from typing import Callable, Dict

import brotli

from textstats.domain.schema import CompressionAlgorithm


def _brotli(data: bytes, level: int) -> bytes:
    return brotli.compress(data, quality=level)


def _gzip(data: bytes, level: int) -> bytes:
    # mtime=0 keeps the header, and so the size, independent of the clock.
    return gzip.compress(data, compresslevel=level, mtime=0)


def _deflate(data: bytes, level: int) -> bytes:
    # zlib-wrapped deflate stream (RFC 1950), the format HTTP calls "deflate".
    return zlib.compress(data, level)


_COMPRESSORS: Dict[CompressionAlgorithm, Callable[[bytes, int], bytes]] = {
    CompressionAlgorithm.BROTLI: _brotli,
    CompressionAlgorithm.GZIP: _gzip,
    CompressionAlgorithm.DEFLATE: _deflate,
}


def compressed_size(data: bytes, algorithm: CompressionAlgorithm, level: int) -> int:
    """
    Return the byte length of `data` compressed with `algorithm` at `level`.

    `level` is trusted to be in range: a SizesRequest cannot hold one that is not.
    """
    return len(_COMPRESSORS[algorithm](data, level))
