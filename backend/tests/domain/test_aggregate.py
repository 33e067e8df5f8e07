import asyncio

import pytest

from textstats.domain.aggregate import aggregate_wc
from textstats.domain.schema import FileBlob, NumericStats, WCRequest
from tests.request_factory import RequestFactory


class SlowBlob(FileBlob):
    """Finishes reading after `delay` seconds, to force out-of-order completion."""

    delay: float = 0.0

    async def read_text(self) -> str:
        await asyncio.sleep(self.delay)
        return await super().read_text()


class TestAggregateWC:
    @pytest.mark.asyncio
    async def test_text_only(self):
        result = await aggregate_wc(WCRequest(text="hi\nthere"))

        assert result.text is not None
        assert result.text.reading_time == "1 min read"
        assert result.total == NumericStats(bytes=8, chars=8, words=2, lines=2)
        assert result.files == []

    @pytest.mark.asyncio
    async def test_empty_text_with_one_file(self):
        req = WCRequest(text="", files=[RequestFactory.blob("a.txt", "a b c")])
        result = await aggregate_wc(req)

        assert result.text is None
        assert result.total == NumericStats(bytes=5, chars=5, words=3, lines=1)
        assert result.files[0].name == "a.txt"
        assert result.files[0].wc.reading_time == "1 min read"

    @pytest.mark.asyncio
    async def test_total_is_fieldwise_sum(self):
        req = WCRequest(
            text="one two",
            files=[
                RequestFactory.blob("a.txt", "three\nfour five"),
                RequestFactory.blob("b.txt", "é"),
            ],
        )
        result = await aggregate_wc(req)

        parts = [result.text] + [f.wc for f in result.files]
        for field in ("bytes", "chars", "words", "lines"):
            assert getattr(result.total, field) == sum(getattr(p, field) for p in parts)
        assert result.total == NumericStats(bytes=7 + 15 + 2, chars=7 + 15 + 1, words=6, lines=4)

    @pytest.mark.asyncio
    async def test_files_keep_input_order_regardless_of_completion(self):
        req = WCRequest(
            files=[
                SlowBlob(name="A", content=b"a", delay=0.03),
                SlowBlob(name="B", content=b"b b", delay=0.02),
                SlowBlob(name="C", content=b"c c c", delay=0.0),
            ]
        )
        result = await aggregate_wc(req)

        assert [f.name for f in result.files] == ["A", "B", "C"]
        assert result.total.words == 1 + 2 + 3

    @pytest.mark.asyncio
    async def test_no_input_yields_zero_total(self):
        result = await aggregate_wc(WCRequest())

        assert result.text is None
        assert result.files == []
        assert result.total == NumericStats()

    @pytest.mark.asyncio
    async def test_reading_time_is_not_totalled(self):
        result = await aggregate_wc(WCRequest(text="x"))
        assert "reading_time" not in result.total.model_dump()
