"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .api.errors import api_http_exception_handler, api_validation_exception_handler
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    repository,
    config,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        repository: LinkRepository instance, or None when the lifespan builds it
        config: Configuration instance
        lifespan: Optional lifespan context manager owning the repository

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Forwarder",
        description="Forward short codes to destination URLs",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Handlers reach shared objects through app.state
    app.state.repository = repository
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last so it runs first: logging sees request.state.forwarded
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)

    app.add_exception_handler(StarletteHTTPException, api_http_exception_handler)
    app.add_exception_handler(RequestValidationError, api_validation_exception_handler)

    app.include_router(api_router, prefix="/api", tags=["API"])
    # Catch-all /{shortcode} must come after the API routes
    app.include_router(web_router, tags=["Web"])

    return app
