"""Problem Details (RFC 9457) error responses.

Every error leaves the API as ``application/problem+json``::

    {"type": "about:blank", "title": "Not Found", "status": 404,
     "detail": "City with id 99 was not found",
     "instance": "/api/cities/99", "resource": "city"}
"""
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cityinfo.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def problem_response(
    request: Request,
    status_code: int,
    detail: str = "",
    extensions: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build a problem details response for the given status code."""
    try:
        title = HTTPStatus(status_code).phrase
    except ValueError:
        title = "Error"

    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
    }
    if extensions:
        body.update(extensions)

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        media_type=PROBLEM_JSON,
        headers=headers,
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return problem_response(
        request,
        404,
        detail=str(exc),
        extensions={"resource": exc.resource},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else ""
    return problem_response(request, exc.status_code, detail=detail, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return problem_response(
        request,
        422,
        detail="One or more request parameters are invalid",
        extensions={"errors": exc.errors()},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the problem details handlers to an application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
