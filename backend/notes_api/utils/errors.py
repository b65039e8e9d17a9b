"""Error types raised by the routes and the handlers that render them.

Every error body has the same shape (see ``notes_api.models.notes.ErrorOut``):
status, reason phrase, message, request path and a UTC timestamp, plus
``fieldErrors`` when specific fields were rejected.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api.utils import validation

logger = logging.getLogger(__name__)


class NoteNotFoundError(Exception):
    def __init__(self, note_id: int):
        self.note_id = note_id
        super().__init__(f"Note not found with id: {note_id}")


def error_body(
    status_code: int,
    message: str,
    path: str,
    field_errors: Optional[dict[str, str]] = None,
) -> dict:
    body = {
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if field_errors:
        body["fieldErrors"] = field_errors
    return body


def _is_body_field_error(err: dict) -> bool:
    loc = err.get("loc", ())
    return len(loc) == 2 and loc[0] == "body" and isinstance(loc[1], str)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        fields = validation.field_errors(validation.field_violations(errors))
        if errors and all(_is_body_field_error(e) for e in errors):
            message = "Validation failed"
        else:
            message = "Malformed request"
        logger.warning("%s on %s %s: %s", message.lower(), request.method, request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content=error_body(400, message, request.url.path, fields),
        )

    @app.exception_handler(NoteNotFoundError)
    async def not_found_handler(request: Request, exc: NoteNotFoundError) -> JSONResponse:
        logger.warning("%s (%s %s)", exc, request.method, request.url.path)
        return JSONResponse(
            status_code=404,
            content=error_body(404, str(exc), request.url.path),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail), request.url.path),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_body(500, "Internal server error", request.url.path),
        )
