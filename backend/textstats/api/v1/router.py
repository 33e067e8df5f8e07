from fastapi import APIRouter

from textstats.api.v1.sizes import router as sizes_router
from textstats.api.v1.wc import router as wc_router

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


router.include_router(wc_router)
router.include_router(sizes_router)
