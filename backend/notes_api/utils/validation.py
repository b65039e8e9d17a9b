"""Turn pydantic validation errors into per-field violations.

The rules themselves live on ``notes_api.models.notes.NoteIn``; this module
only translates what pydantic reports into the messages clients see, e.g.
``{"title": "Title must not exceed 100 characters"}``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

# FastAPI reports the path parameter as "note_id"; clients know it as "id"
_FIELD_NAMES = {"note_id": "id"}


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def _message(err: dict[str, Any], field: str) -> str:
    if err.get("type") == "string_too_long":
        max_length = (err.get("ctx") or {}).get("max_length")
        return f"{field.capitalize()} must not exceed {max_length} characters"
    return err.get("msg", "Invalid value")


def field_violations(errors: Iterable[dict[str, Any]]) -> list[FieldViolation]:
    """Map ``ValidationError.errors()`` entries to violations.

    Leading ``body``/``path``/``query`` segments of ``loc`` are dropped.
    Errors that do not point at a named field (invalid JSON, a non-object
    body) are skipped.
    """
    out: list[FieldViolation] = []
    for err in errors:
        if err.get("type") == "json_invalid":
            continue
        loc = [p for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        if not loc or not isinstance(loc[0], str):
            continue
        field = _FIELD_NAMES.get(loc[0], loc[0])
        out.append(FieldViolation(field, _message(err, field)))
    return out


def field_errors(violations: Iterable[FieldViolation]) -> dict[str, str]:
    # first message per field wins
    out: dict[str, str] = {}
    for v in violations:
        out.setdefault(v.field, v.message)
    return out
