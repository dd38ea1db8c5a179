"""
Global exception handlers for consistent API errors.

Los routers pueden lanzar `HTTPException` con `detail` string (se envuelve en
`{"message": ...}`) o con `detail` dict (se devuelve tal cual, p. ej. `{"error": ...}`).
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _with_req_id(request: Request, body: Dict[str, Any]) -> Dict[str, Any]:
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("smartnotes.errors")

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict):
            body: Dict[str, Any] = dict(exc.detail)
        else:
            body = {"message": exc.detail or "HTTP error"}
        return JSONResponse(status_code=exc.status_code, content=_with_req_id(request, body))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        body: Dict[str, Any] = {"message": "Validation error", "errors": jsonable_encoder(exc.errors())}
        return JSONResponse(status_code=422, content=_with_req_id(request, body))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error request_id=%s", _req_id(request))
        body: Dict[str, Any] = {"message": "Internal server error"}
        return JSONResponse(status_code=500, content=_with_req_id(request, body))
