from fastapi import APIRouter, Request

from textstats.api.v1.forms import read_raw_request
from textstats.compression.sizes import aggregate_sizes
from textstats.domain.normalize import normalize_sizes_request
from textstats.domain.schema import SizesResult

router = APIRouter(tags=["sizes"])


@router.post("/sizes", response_model=SizesResult)
async def sizes(request: Request) -> SizesResult:
    raw = await read_raw_request(request)
    req = normalize_sizes_request(raw)
    return await aggregate_sizes(req)
