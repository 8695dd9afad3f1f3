"""Core logic for the link forwarder."""

from .repository import LinkRepository
from .errors import LinkForwarderError, ValidationError, NotFoundError, StoreError

__all__ = [
    "LinkRepository",
    "LinkForwarderError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
