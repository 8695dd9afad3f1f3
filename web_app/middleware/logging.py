"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""
    
    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("linkfwd.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response with duration."""
        start_time = time.perf_counter()
        
        forwarded = getattr(request.state, "forwarded", None)
        client_ip = (
            (forwarded.client if forwarded else None)
            or (request.client.host if request.client else "unknown")
        )
        self.logger.debug(f"Request: {request.method} {request.url.path} from {client_ip}")
        
        try:
            response = await call_next(request)
        except Exception:
            self.logger.exception(f"Unhandled error: {request.method} {request.url.path}")
            raise
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"{request.method} {request.url.path} from {client_ip} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        
        return response
