"""FastAPI web application for the link forwarder."""

from .app_factory import create_app

__all__ = ["create_app"]
