"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List
from datetime import datetime

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for the persistent shortcode -> URL table.

    Implementations must perform every mutation as a single atomic
    statement and raise StoreError for any driver failure.
    """

    TABLE_NAME = "links"

    def __init__(self, db_config: str, create_tables: bool = True):
        """Initialize store.

        Args:
            db_config: Database location (file path or connection URL)
            create_tables: Whether initialize() creates the links table
        """
        self.db_config = db_config
        self.create_tables = create_tables

    @abstractmethod
    async def initialize(self) -> None:
        """Open resources and create the table when enabled."""
        pass

    @abstractmethod
    async def upsert_link(
        self,
        shortcode: str,
        url: str,
        created_at: Optional[datetime] = None,
    ) -> Link:
        """Insert a link, or replace the URL of an existing one.

        The creation timestamp of an existing row is preserved.

        Args:
            shortcode: The shortcode key
            url: The already-normalized destination URL
            created_at: Optional creation timestamp (defaults to now UTC)

        Returns:
            The stored link
        """
        pass

    @abstractmethod
    async def get_url(self, shortcode: str) -> Optional[str]:
        """Get the URL for a shortcode.

        Args:
            shortcode: The shortcode to look up

        Returns:
            The stored URL if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_links(self) -> List[Link]:
        """List every stored link, newest created first."""
        pass

    @abstractmethod
    async def delete_link(self, shortcode: str) -> bool:
        """Delete a link.

        Args:
            shortcode: The shortcode to delete

        Returns:
            True if a row was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close database connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the database is reachable."""
        pass
