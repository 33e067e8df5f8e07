from fastapi import APIRouter, Request

from textstats.api.v1.forms import read_raw_request
from textstats.domain.aggregate import aggregate_wc
from textstats.domain.normalize import normalize_wc_request
from textstats.domain.schema import WCResult

router = APIRouter(tags=["wc"])


@router.post("/wc", response_model=WCResult)
async def wc(request: Request) -> WCResult:
    raw = await read_raw_request(request)
    req = normalize_wc_request(raw)
    return await aggregate_wc(req)
