from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from textstats.api.v1.router import router as v1_router
from textstats.core.config import Settings, load_settings
from textstats.core.errors import DomainError, RequestValidationFailed
from textstats.core.logging import bind_request_context, configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    app = FastAPI(title="Text Stats API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        bind_request_context(method=request.method, path=request.url.path)
        return await call_next(request)

    @app.exception_handler(RequestValidationFailed)
    async def request_validation_failed_handler(_, exc: RequestValidationFailed):
        # method and path come from the bound request context.
        logger.info(
            "request.rejected",
            form_errors=exc.errors.form_errors,
            fields=sorted(exc.errors.field_errors),
        )
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "errors": exc.errors.model_dump()},
        )

    @app.exception_handler(DomainError)
    def domain_error_handler(_, exc: DomainError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(v1_router, prefix="/v1")
    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    uvicorn.run("textstats.main:app", host="0.0.0.0", port=settings.port, reload=settings.reload)


app = create_app()

if __name__ == "__main__":  # pragma: no cover
    run()
