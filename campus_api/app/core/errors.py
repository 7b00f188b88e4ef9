"""
Error types and the JSON error envelope.

Every failure other than an authorization denial is returned as
``{"type": "<ErrorKindName>", "message": "<detail>"}``.  The
``register_exception_handlers`` function wires the conversions into a
FastAPI application:

* ``EntityNotFoundError`` becomes 404.
* Request validation failures (missing or unparsable fields) become 400.
* Anything else, typically a storage failure, becomes 500.

Authorization denials are raised as ``HTTPException`` by
``core.security`` and keep FastAPI's default ``{"detail": ...}`` body.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EntityNotFoundError(Exception):
    """Raised when an id-addressed operation finds no record."""

    def __init__(self, kind: str, key: Any) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} with id {key} not found")


def error_body(exc: Exception, message: str) -> dict:
    return {"type": type(exc).__name__, "message": message}


_SOURCES = ("query", "body", "path")


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _SOURCES:
            source = loc.pop(0)
            # Body locations may carry the decoder's character offset.
            while source == "body" and loc and isinstance(loc[0], int):
                loc.pop(0)
        where = ".".join(str(p) for p in loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts) or "Malformed request"



def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing exception handlers to ``app``."""

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_body(exc, str(exc)))

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_input(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("Malformed input on %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(exc, message))

    @app.exception_handler(Exception)
    async def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(exc, str(exc)))
