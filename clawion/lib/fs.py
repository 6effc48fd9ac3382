"""Filesystem primitives: atomic JSON/Markdown writes and append-only JSONL logs.

Absent optional documents normalize to empty values here so callers never
special-case a missing file. Required documents raise NotFoundError.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from clawion.errors import NotFoundError, ValidationFailure

M = TypeVar("M", bound=BaseModel)


def _issues(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in issue['loc'])}: {issue['msg']}"
        for issue in error.errors()
    ]


def _validate(data, model: type[M], where: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure(where, _issues(e)) from e


def _encode(data) -> object:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True, mode="json")
    return data


def _write_atomic(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(path: Path, model: type[M]) -> M:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise NotFoundError(f"Document not found: {path}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationFailure(path, [f"invalid JSON: {e}"]) from e
    return _validate(data, model, str(path))


def write_json_atomic(path: Path, data) -> None:
    """Replace path with pretty JSON via temp file + rename. Last writer wins."""
    _write_atomic(path, json.dumps(_encode(data), indent=2, ensure_ascii=False) + "\n")


def read_jsonl(path: Path, model: type[M]) -> list[M]:
    """All records of an append-only log in append order; [] when absent."""
    if not path.exists():
        return []

    entries = []
    lines = path.read_text(encoding="utf-8").split("\n")
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        where = f"{path}:{number}"
        try:
            parsed = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValidationFailure(where, [f"invalid JSONL: {e}"]) from e
        entries.append(_validate(parsed, model, where))
    return entries


def append_jsonl(path: Path, record) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(_encode(record), ensure_ascii=False)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")


def read_markdown(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def write_markdown_atomic(path: Path, content: str) -> None:
    _write_atomic(path, content if content.endswith("\n") else content + "\n")
