"""Database layer for the link forwarder."""

import logging
from typing import Optional

from .base import LinkStoreBase
from .sqlite import SQLiteLinkStore
from .postgres import PostgresLinkStore
from .models import Link

POSTGRES_SCHEMES = ("postgres://", "postgresql://")


def create_store(
    data_dir: str,
    database_url: Optional[str] = None,
    create_tables: bool = True,
    logger: Optional[logging.Logger] = None,
) -> LinkStoreBase:
    """Pick the store backend: PostgreSQL for a postgres URL, else SQLite in data_dir."""
    if database_url and database_url.startswith(POSTGRES_SCHEMES):
        return PostgresLinkStore(database_url, create_tables=create_tables, logger=logger)
    return SQLiteLinkStore.in_directory(data_dir, create_tables=create_tables, logger=logger)


__all__ = [
    "LinkStoreBase",
    "SQLiteLinkStore",
    "PostgresLinkStore",
    "Link",
    "create_store",
]
