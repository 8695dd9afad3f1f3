"""Data models for the link forwarder."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Link:
    """A shortcode and the URL it forwards to."""
    
    shortcode: str
    url: str
    created_at: Optional[datetime] = None
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "shortcode": self.shortcode,
            "url": self.url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
    
    @classmethod
    def from_row(cls, row) -> "Link":
        """Create from a database row (sqlite3.Row, asyncpg.Record or dict)."""
        created_at = row["created_at"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            shortcode=row["shortcode"],
            url=row["url"],
            created_at=created_at,
        )
