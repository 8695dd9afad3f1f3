#!/usr/bin/env python3
"""
Seed sample links into the link forwarder database.

Usage:
    python seed_data.py --data-dir .crush
    python seed_data.py --defaults-only
"""

import argparse
import asyncio
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from linkfwd.database import create_store
from linkfwd.repository import LinkRepository
from linkfwd.errors import LinkForwarderError
from linkfwd.common.logging_config import setup_logging


# Scheme-less entries exercise https:// normalization
SAMPLE_LINKS = [
    ("py", "https://www.python.org"),
    ("pydocs", "docs.python.org/3/"),
    ("fastapi", "fastapi.tiangolo.com"),
    ("pypi", "https://pypi.org"),
    ("so", "stackoverflow.com/questions/tagged/python"),
    ("hn", "news.ycombinator.com"),
    ("example", "http://example.org"),
]


async def main():
    parser = argparse.ArgumentParser(description="Seed sample links")
    parser.add_argument(
        "--data-dir",
        default=os.getenv("DATA_DIR", ".crush"),
        help="Directory for the SQLite links.db file"
    )
    parser.add_argument(
        "--database-url",
        default=os.getenv("DATABASE_URL"),
        help="PostgreSQL connection URL (overrides --data-dir)"
    )
    parser.add_argument(
        "--defaults-only",
        action="store_true",
        help="Only upsert the default google/github links"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    
    args = parser.parse_args()
    
    logger = setup_logging(level="DEBUG" if args.verbose else "INFO")
    
    store = create_store(
        data_dir=args.data_dir,
        database_url=args.database_url,
        logger=logger,
    )
    repository = LinkRepository(store=store, logger=logger)
    
    try:
        await repository.initialize()
        await repository.seed_defaults()
        
        if not args.defaults_only:
            for shortcode, url in SAMPLE_LINKS:
                link = await repository.upsert(shortcode, url)
                logger.info(f"Created: {link.shortcode} -> {link.url}")
        
        links = await repository.list_all()
        logger.info(f"Total links in database: {len(links)}")
        return 0
        
    except LinkForwarderError as e:
        logger.error(f"Error seeding data: {e}")
        return 1
    finally:
        await repository.close()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
