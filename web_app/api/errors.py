"""Envelope rendering for errors raised under /api."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette import status

from .schemas import Envelope

API_PREFIX = "/api"

STATUS_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def envelope_response(status_code: int, message: str) -> JSONResponse:
    """Failure envelope with the given HTTP status."""
    return JSONResponse(
        status_code=status_code,
        content=Envelope(success=False, message=message).model_dump(),
    )


def _is_api_request(request: Request) -> bool:
    path = request.url.path
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


async def api_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as envelopes on API paths; default rendering elsewhere."""
    if not _is_api_request(request):
        return await http_exception_handler(request, exc)

    message = STATUS_MESSAGES.get(exc.status_code, str(exc.detail))
    response = envelope_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def api_validation_exception_handler(request: Request, exc: RequestValidationError):
    """An undecodable or mistyped body is reported as invalid JSON."""
    if not _is_api_request(request):
        return await request_validation_exception_handler(request, exc)
    return envelope_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON")
