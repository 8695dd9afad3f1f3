"""SQLite implementation of the link store."""

import os
import asyncio
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional, List

from .base import LinkStoreBase
from .models import Link
from ..errors import StoreError


DB_FILENAME = "links.db"


class SQLiteLinkStore(LinkStoreBase):
    """SQLite file store. Blocking calls run in worker threads."""

    CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS links (
        shortcode TEXT PRIMARY KEY,
        url TEXT NOT NULL,
        created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
    );
    """

    UPSERT_SQL = """
    INSERT INTO links (shortcode, url, created_at)
    VALUES (?, ?, ?)
    ON CONFLICT(shortcode) DO UPDATE SET url = excluded.url
    """

    def __init__(
        self,
        db_path: str,
        create_tables: bool = True,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize SQLite store.

        Args:
            db_path: Path of the database file; its directory is created on initialize
            create_tables: Whether initialize() creates the links table
            timeout_seconds: How long to wait on a locked database
            logger: Optional logger instance
        """
        super().__init__(db_path, create_tables=create_tables)
        self.db_path = db_path
        self.timeout_seconds = timeout_seconds
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def in_directory(cls, data_dir: str, **kwargs) -> "SQLiteLinkStore":
        """Create a store backed by <data_dir>/links.db."""
        return cls(os.path.join(data_dir, DB_FILENAME), **kwargs)

    @contextmanager
    def _get_connection(self):
        conn = sqlite3.connect(self.db_path, timeout=self.timeout_seconds)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    async def _run(self, operation: str, func, *args):
        """Run a blocking database call in a thread, mapping driver errors to StoreError."""
        try:
            return await asyncio.to_thread(func, *args)
        except (sqlite3.Error, OSError) as e:
            self.logger.error(f"Error {operation}: {e}")
            raise StoreError(f"Failed {operation}: {e}") from e

    def _ensure_tables(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.db_path))
        os.makedirs(directory, exist_ok=True)
        if not self.create_tables:
            self.logger.debug("Table creation disabled")
            return
        with self._get_connection() as conn:
            conn.executescript(self.CREATE_TABLE_SQL)
            conn.commit()

    async def initialize(self) -> None:
        """Create the data directory and links table."""
        self.logger.info(f"Opening SQLite store at {self.db_path}")
        await self._run("creating tables", self._ensure_tables)

    def _upsert(self, shortcode: str, url: str, created_at: datetime) -> Link:
        with self._get_connection() as conn:
            conn.execute(self.UPSERT_SQL, (shortcode, url, created_at.isoformat(timespec="microseconds")))
            conn.commit()
            row = conn.execute(
                "SELECT shortcode, url, created_at FROM links WHERE shortcode = ?",
                (shortcode,),
            ).fetchone()
        return Link.from_row(row)

    async def upsert_link(
        self,
        shortcode: str,
        url: str,
        created_at: Optional[datetime] = None,
    ) -> Link:
        if created_at is None:
            created_at = datetime.now(timezone.utc)
        elif created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        link = await self._run("saving link", self._upsert, shortcode, url, created_at)
        self.logger.debug(f"Saved link: {shortcode} -> {url}")
        return link

    def _get_url(self, shortcode: str) -> Optional[str]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT url FROM links WHERE shortcode = ?",
                (shortcode,),
            ).fetchone()
        return row["url"] if row else None

    async def get_url(self, shortcode: str) -> Optional[str]:
        return await self._run("getting URL", self._get_url, shortcode)

    def _list_links(self) -> List[Link]:
        with self._get_connection() as conn:
            rows = conn.execute(
                """
                SELECT shortcode, url, created_at
                FROM links
                ORDER BY created_at DESC, rowid DESC
                """
            ).fetchall()
        return [Link.from_row(row) for row in rows]

    async def list_links(self) -> List[Link]:
        return await self._run("listing links", self._list_links)

    def _delete_link(self, shortcode: str) -> int:
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM links WHERE shortcode = ?", (shortcode,))
            conn.commit()
            return cursor.rowcount

    async def delete_link(self, shortcode: str) -> bool:
        affected = await self._run("deleting link", self._delete_link, shortcode)
        return affected > 0

    def _ping(self) -> None:
        with self._get_connection() as conn:
            conn.execute("SELECT 1").fetchone()

    async def health_check(self) -> bool:
        try:
            await self._run("checking health", self._ping)
            return True
        except StoreError:
            return False

    async def close(self) -> None:
        # Connections are per operation; nothing is held open.
        self.logger.debug(f"Closed SQLite store at {self.db_path}")
