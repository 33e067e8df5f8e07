from __future__ import annotations

from typing import Any, Dict, List

from fastapi import Request
from starlette.datastructures import FormData, UploadFile

from textstats.core.errors import RequestValidationFailed
from textstats.domain.schema import FileBlob, ValidationErrors

INVALID_JSON_MESSAGE = "request body is not valid JSON"

_FORM_BOOLEANS = {"true": True, "false": False}


async def _upload_to_blob(upload: UploadFile) -> FileBlob:
    content = await upload.read()
    return FileBlob(name=upload.filename or "", content=content)


def _json_file_to_blob(entry: Any) -> Any:
    if isinstance(entry, dict) and set(entry) <= {"name", "content"}:
        name, content = entry.get("name", ""), entry.get("content", "")
        if isinstance(name, str) and isinstance(content, str):
            return FileBlob(name=name, content=content.encode("utf-8"))
    # Left as-is so normalization reports it.
    return entry


async def _from_form(form: FormData) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for key in set(form.keys()):
        if key == "files":
            files: List[Any] = []
            for value in form.getlist("files"):
                if isinstance(value, UploadFile):
                    files.append(await _upload_to_blob(value))
                else:
                    files.append(value)
            raw["files"] = files
            continue

        value = form.get(key)
        if key.endswith("Enabled") and isinstance(value, str):
            value = _FORM_BOOLEANS.get(value, value)
        raw[key] = value
    return raw


def _from_json(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        return {}
    raw = dict(body)
    files = raw.get("files")
    if isinstance(files, list):
        raw["files"] = [_json_file_to_blob(entry) for entry in files]
    elif files is not None:
        raw["files"] = _json_file_to_blob(files)
    return raw


async def read_raw_request(request: Request) -> Dict[str, Any]:
    """
    Flatten a form or JSON body into the loosely typed field mapping normalization expects.

    A form cannot carry a bare boolean, so "true"/"false" on checkbox fields become booleans.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            raise RequestValidationFailed(
                ValidationErrors(form_errors=[INVALID_JSON_MESSAGE])
            ) from exc
        return _from_json(body)
    return await _from_form(await request.form())
