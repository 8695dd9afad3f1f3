"""Link repository: the only reader and writer of the link store."""

import logging
from typing import Optional, List, Dict, Tuple

from .database.base import LinkStoreBase
from .database.models import Link
from .common.validators import normalize_url, require_link_fields, require_shortcode
from .errors import NotFoundError


DEFAULT_LINKS: Tuple[Tuple[str, str], ...] = (
    ("google", "https://www.google.com"),
    ("github", "https://github.com"),
)


class LinkRepository:
    """Typed operations over the persistent shortcode -> URL table.

    URLs are normalized once on write, so every reader sees an absolute
    http:// or https:// URL.
    """

    def __init__(
        self,
        store: LinkStoreBase,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link repository.

        Args:
            store: Store backend instance
            logger: Optional logger
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    async def initialize(self) -> None:
        await self.store.initialize()

    async def upsert(self, shortcode: str, url: str) -> Link:
        """Create a link or replace the URL of an existing one.

        Args:
            shortcode: The shortcode key
            url: Destination URL; https:// is prepended when no scheme is present

        Returns:
            The stored link

        Raises:
            ValidationError: If either field is empty
            StoreError: If the write fails
        """
        require_link_fields(shortcode, url)
        link = await self.store.upsert_link(shortcode, normalize_url(url))
        self.logger.info(f"Saved link: {link.shortcode} -> {link.url}")
        return link

    async def lookup(self, shortcode: str) -> str:
        """Get the stored URL for a shortcode.

        Raises:
            NotFoundError: If the shortcode has no link
            StoreError: If the read fails
        """
        url = await self.store.get_url(shortcode)
        if url is None:
            self.logger.debug(f"Shortcode not found: {shortcode}")
            raise NotFoundError(shortcode)
        return url

    async def list_all(self) -> List[Link]:
        """Every stored link, newest created first. Empty store gives []."""
        return await self.store.list_links()

    async def delete(self, shortcode: str) -> None:
        """Delete a link.

        Raises:
            ValidationError: If the shortcode is empty
            NotFoundError: If no row was deleted
            StoreError: If the delete fails
        """
        require_shortcode(shortcode)
        if not await self.store.delete_link(shortcode):
            raise NotFoundError(shortcode)
        self.logger.info(f"Deleted link: {shortcode}")

    async def seed_defaults(self, links: Tuple[Tuple[str, str], ...] = DEFAULT_LINKS) -> List[Link]:
        """Upsert the bootstrap links (google, github)."""
        seeded = [await self.upsert(shortcode, url) for shortcode, url in links]
        self.logger.info(f"Seeded {len(seeded)} default links")
        return seeded

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()
        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
