"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from linkfwd.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Record X-Forwarded-* values on request.state.forwarded.

    Routes read the forwarded prefix from here when building the management
    page and the not-found redirect behind a reverse proxy.
    """
    
    async def dispatch(self, request: Request, call_next: Callable):
        request.state.forwarded = extract_forwarded_headers(request.headers)
        return await call_next(request)
