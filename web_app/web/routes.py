"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from linkfwd.common.headers import build_base_url, get_forwarded_path_prefix
from linkfwd.common.url_builder import NOT_FOUND_ERROR
from .forwarding import forward

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def _path_prefix(request: Request) -> str:
    """Path prefix from X-Forwarded-Prefix, as recorded by ForwardedHeadersMiddleware."""
    forwarded = getattr(request.state, "forwarded", None)
    if forwarded is not None:
        return forwarded.prefix
    return get_forwarded_path_prefix(request.headers)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request, shortcode: str = "", error: str = ""):
    """Serve the management page.

    Reached with ?shortcode=<code>&error=not_found after forwarding an unknown
    shortcode; the page then offers to create it.
    """
    config = request.app.state.config
    prefix = _path_prefix(request)

    error_message = ""
    if error == NOT_FOUND_ERROR:
        error_message = f"Link '/{shortcode}' doesn't exist yet. You can create it below!"

    base_url = build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "shortcode": shortcode,
            "error_message": error_message,
            "path_prefix": prefix,
            "link_base": f"{base_url}{prefix}",
        },
    )


@router.get("/{shortcode}", include_in_schema=False)
async def redirect_to_url(request: Request, shortcode: str):
    """Forward a shortcode to its stored URL."""
    config = request.app.state.config

    return await forward(
        request.app.state.repository,
        shortcode,
        not_found_policy=config.not_found_policy,
        path_prefix=_path_prefix(request),
    )
