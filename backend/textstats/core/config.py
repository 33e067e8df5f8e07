from __future__ import annotations

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class Settings(BaseModel):
    port: int = Field(8000, ge=1, le=65535)
    reload: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level


def _flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.strip().lower() == "true"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from environment variables, falling back to model defaults."""
    env = os.environ if environ is None else environ

    data = {
        "port": env.get("PORT"),
        "reload": _flag(env.get("RELOAD")),
        "log_level": env.get("TEXTSTATS_LOG_LEVEL"),
        "log_json": _flag(env.get("TEXTSTATS_LOG_JSON")),
    }
    origins = env.get("TEXTSTATS_CORS_ORIGINS")
    if origins:
        data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    try:
        return Settings.model_validate({k: v for k, v in data.items() if v is not None})
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
