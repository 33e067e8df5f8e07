import gzip
import zlib

import brotli
import pytest

from textstats.compression.codecs import compressed_size
from textstats.domain.schema import CompressionAlgorithm

DATA = ("the quick brown fox jumps over the lazy dog\n" * 50).encode("utf-8")


class TestCompressedSize:
    def test_brotli_matches_library(self):
        assert compressed_size(DATA, CompressionAlgorithm.BROTLI, 11) == len(
            brotli.compress(DATA, quality=11)
        )

    def test_gzip_round_trips(self):
        size = compressed_size(DATA, CompressionAlgorithm.GZIP, 9)
        assert size == len(gzip.compress(DATA, compresslevel=9, mtime=0))

    def test_deflate_is_zlib_stream(self):
        assert compressed_size(DATA, CompressionAlgorithm.DEFLATE, 6) == len(
            zlib.compress(DATA, 6)
        )

    @pytest.mark.parametrize("algorithm", list(CompressionAlgorithm))
    def test_repetitive_text_shrinks(self, algorithm):
        assert 0 < compressed_size(DATA, algorithm, 9) < len(DATA)

    def test_level_zero_is_allowed(self):
        assert compressed_size(b"", CompressionAlgorithm.GZIP, 0) > 0
