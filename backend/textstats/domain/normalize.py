from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Tuple

from textstats.core.errors import RequestValidationFailed
from textstats.domain.schema import (
    LEVEL_RANGES,
    AlgoConfig,
    CompressionAlgorithm,
    FileBlob,
    LevelRange,
    SizesRequest,
    ValidationErrors,
    WCRequest,
)

MISSING_INPUT_MESSAGE = "you must provide at least one of text or files"
CHECKBOX_MESSAGE = "must be true, false or 'on'"
FILES_MESSAGE = "files should only contain Files"
TEXT_MESSAGE = "must be a string"
LEVEL_FORMAT_MESSAGE = "must be a string of digits"

_DIGITS = re.compile(r"[0-9]+")


class FieldError(ValueError):
    """A single field's value is outside its accepted coercion set."""


# ---- Field coercion ----


def coerce_checkbox(value: Any) -> bool:
    """
    HTML checkbox semantics: True or "on" means checked, False or absent means unchecked.
    """
    if value is None or value is False:
        return False
    if value is True or value == "on":
        return True
    raise FieldError(CHECKBOX_MESSAGE)


def coerce_level(value: Any, level_range: LevelRange) -> int:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise FieldError(LEVEL_FORMAT_MESSAGE)

    raw = str(value)
    if not _DIGITS.fullmatch(raw):
        raise FieldError(LEVEL_FORMAT_MESSAGE)

    level = int(raw)
    if not level_range.contains(level):
        raise FieldError(
            f"must be between {level_range.min} and {level_range.max}, inclusive"
        )
    return level


def coerce_files(value: Any) -> List[FileBlob]:
    if value is None:
        return []

    entries = value if isinstance(value, (list, tuple)) else [value]
    if not all(isinstance(entry, FileBlob) for entry in entries):
        raise FieldError(FILES_MESSAGE)

    # Forms submit a nameless placeholder when no file was chosen.
    return [entry for entry in entries if entry.name]


def coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldError(TEXT_MESSAGE)
    return value


# ---- Shared input pass ----


def _coerce_input(
    raw: Mapping[str, Any], errors: ValidationErrors
) -> Tuple[Optional[str], List[FileBlob]]:
    text: Optional[str] = None
    files: List[FileBlob] = []

    try:
        text = coerce_text(raw.get("text"))
    except FieldError as exc:
        errors.add_field_error("text", str(exc))

    try:
        files = coerce_files(raw.get("files"))
    except FieldError as exc:
        errors.add_field_error("files", str(exc))

    # Fatal: with nothing to analyze, no other field is worth reporting.
    if not text and not files:
        errors.form_errors.append(MISSING_INPUT_MESSAGE)
        raise RequestValidationFailed(errors)

    return text, files


# ---- Requests ----


def normalize_wc_request(raw: Mapping[str, Any]) -> WCRequest:
    errors = ValidationErrors()
    text, files = _coerce_input(raw, errors)

    if errors.has_errors():
        raise RequestValidationFailed(errors)

    return WCRequest(text=text, files=files)


def resolve_algo_config(
    raw: Mapping[str, Any],
    algorithm: CompressionAlgorithm,
    errors: ValidationErrors,
) -> Optional[AlgoConfig]:
    """
    Resolve `{algo}Enabled` / `{algo}Level` for one algorithm.

    An omitted level defaults to the algorithm's maximum and an omitted flag to False.
    Errors are recorded in `errors` rather than raised so that every algorithm is
    checked before the request is rejected.
    """
    level_field = f"{algorithm.value}Level"
    enabled_field = f"{algorithm.value}Enabled"
    level_range = LEVEL_RANGES[algorithm]

    level: Optional[int] = None
    enabled: Optional[bool] = None

    raw_level = raw.get(level_field)
    if raw_level is None:
        level = level_range.max
    else:
        try:
            level = coerce_level(raw_level, level_range)
        except FieldError as exc:
            errors.add_field_error(level_field, str(exc))

    try:
        enabled = coerce_checkbox(raw.get(enabled_field))
    except FieldError as exc:
        errors.add_field_error(enabled_field, str(exc))

    if level is None or enabled is None:
        return None
    return AlgoConfig(enabled=enabled, level=level)


def normalize_sizes_request(raw: Mapping[str, Any]) -> SizesRequest:
    errors = ValidationErrors()
    text, files = _coerce_input(raw, errors)

    configs = {
        algorithm: resolve_algo_config(raw, algorithm, errors)
        for algorithm in (
            CompressionAlgorithm.DEFLATE,
            CompressionAlgorithm.GZIP,
            CompressionAlgorithm.BROTLI,
        )
    }

    initial_enabled = False
    try:
        initial_enabled = coerce_checkbox(raw.get("initialEnabled"))
    except FieldError as exc:
        errors.add_field_error("initialEnabled", str(exc))

    if errors.has_errors():
        raise RequestValidationFailed(errors)

    return SizesRequest(
        text=text or None,
        files=files,
        initial_enabled=initial_enabled,
        brotli=configs[CompressionAlgorithm.BROTLI],
        gzip=configs[CompressionAlgorithm.GZIP],
        deflate=configs[CompressionAlgorithm.DEFLATE],
    )
