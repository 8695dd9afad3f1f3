"""Web interface: management page and shortcode forwarding."""

from .routes import router as web_router

__all__ = ["web_router"]
