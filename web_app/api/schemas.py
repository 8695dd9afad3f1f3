"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from linkfwd.database.models import Link


class LinkRequest(BaseModel):
    """Body of POST /api/links.

    Missing fields default to empty strings so the route can answer the
    envelope's "required" message instead of a schema error.
    """

    shortcode: str = Field("", description="Shortcode used as the URL path segment")
    url: str = Field("", description="Destination URL; https:// is added when no scheme is given")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"shortcode": "gh", "url": "github.com"},
                {"shortcode": "docs", "url": "https://docs.python.org/3/"},
            ]
        }
    }


class LinkOut(BaseModel):
    """A stored link."""

    shortcode: str
    url: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_link(cls, link: Link) -> "LinkOut":
        return cls.model_validate(link)


class Envelope(BaseModel):
    """Uniform response wrapper with no payload."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")


class LinkEnvelope(Envelope):
    """Envelope carrying one link."""

    data: LinkOut


class LinkListEnvelope(Envelope):
    """Envelope carrying every stored link, newest first."""

    data: List[LinkOut]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")
