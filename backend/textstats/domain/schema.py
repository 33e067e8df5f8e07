from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CompressionAlgorithm(str, Enum):
    BROTLI = "brotli"
    GZIP = "gzip"
    DEFLATE = "deflate"


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LevelRange(StrictBaseModel):
    min: int
    max: int

    def contains(self, level: int) -> bool:
        return self.min <= level <= self.max


BROTLI_LEVEL_RANGE = LevelRange(min=0, max=11)
GZIP_LEVEL_RANGE = LevelRange(min=0, max=9)
DEFLATE_LEVEL_RANGE = LevelRange(min=0, max=9)

LEVEL_RANGES: Dict[CompressionAlgorithm, LevelRange] = {
    CompressionAlgorithm.BROTLI: BROTLI_LEVEL_RANGE,
    CompressionAlgorithm.GZIP: GZIP_LEVEL_RANGE,
    CompressionAlgorithm.DEFLATE: DEFLATE_LEVEL_RANGE,
}


class FileBlob(StrictBaseModel):
    """A named upload. An empty name is the placeholder a form sends when no file is chosen."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    content: bytes = b""

    async def read_text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


# ---- Requests ----


class WCRequest(StrictBaseModel):
    text: Optional[str] = None
    files: List[FileBlob] = Field(default_factory=list)


class AlgoConfig(StrictBaseModel):
    enabled: bool = False
    level: int = Field(ge=0)


class SizesRequest(WCRequest):
    initial_enabled: bool = False
    brotli: AlgoConfig = Field(
        default_factory=lambda: AlgoConfig(level=BROTLI_LEVEL_RANGE.max)
    )
    gzip: AlgoConfig = Field(
        default_factory=lambda: AlgoConfig(level=GZIP_LEVEL_RANGE.max)
    )
    deflate: AlgoConfig = Field(
        default_factory=lambda: AlgoConfig(level=DEFLATE_LEVEL_RANGE.max)
    )

    @model_validator(mode="after")
    def _check_levels_in_range(self) -> "SizesRequest":
        for algorithm, level_range in LEVEL_RANGES.items():
            level = self.config_for(algorithm).level
            if not level_range.contains(level):
                raise ValueError(
                    f"{algorithm.value} level must be between "
                    f"{level_range.min} and {level_range.max}, inclusive."
                )
        return self

    def config_for(self, algorithm: CompressionAlgorithm) -> AlgoConfig:
        return getattr(self, algorithm.value)


# ---- Word count results ----


class NumericStats(StrictBaseModel):
    bytes: int = Field(default=0, ge=0)
    chars: int = Field(default=0, ge=0)
    words: int = Field(default=0, ge=0)
    lines: int = Field(default=0, ge=0)


class UnitStats(NumericStats):
    reading_time: str

    def numeric(self) -> NumericStats:
        return NumericStats(**self.model_dump(exclude={"reading_time"}))


class FileWC(StrictBaseModel):
    name: str
    wc: UnitStats


class WCResult(StrictBaseModel):
    text: Optional[UnitStats] = None
    total: NumericStats = Field(default_factory=NumericStats)
    files: List[FileWC] = Field(default_factory=list)


# ---- Sizes results ----


class UnitSizes(StrictBaseModel):
    """Byte sizes of one unit; a field is None when that transform is disabled."""

    initial: Optional[int] = Field(default=None, ge=0)
    brotli: Optional[int] = Field(default=None, ge=0)
    gzip: Optional[int] = Field(default=None, ge=0)
    deflate: Optional[int] = Field(default=None, ge=0)


class FileSizes(StrictBaseModel):
    name: str
    sizes: UnitSizes


class SizesResult(StrictBaseModel):
    text: Optional[UnitSizes] = None
    total: UnitSizes = Field(default_factory=UnitSizes)
    files: List[FileSizes] = Field(default_factory=list)


# ---- Validation errors ----


class ValidationErrors(StrictBaseModel):
    form_errors: List[str] = Field(default_factory=list)
    field_errors: Dict[str, List[str]] = Field(default_factory=dict)

    def add_field_error(self, field: str, message: str) -> None:
        self.field_errors.setdefault(field, []).append(message)

    def has_errors(self) -> bool:
        return bool(self.form_errors or self.field_errors)

    def first_message(self) -> str:
        if self.form_errors:
            return self.form_errors[0]
        for field, messages in self.field_errors.items():
            if messages:
                return f"{field}: {messages[0]}"
        return "Invalid request."
