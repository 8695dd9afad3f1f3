#!/usr/bin/env python3
"""
Main entry point for the link forwarder service.

Usage:
    python app.py

Environment variables:
    DATA_DIR - Directory holding the SQLite links.db file (default .crush)
    DATABASE_URL - PostgreSQL URL; when set, used instead of SQLite
    CREATE_TABLES - Create the links table on startup (default true)
    SEED_DEFAULTS - Upsert the default google/github links on startup (default true)
    NOT_FOUND_POLICY - 'redirect' (default) or 'not_found'
    PORT - Port to listen on (default 8080)
    WORKERS - Number of uvicorn worker processes
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from linkfwd.database import create_store
from linkfwd.repository import LinkRepository
from linkfwd.common.logging_config import setup_logging, get_logger
from web_app import create_app


def build_repository(config: Config, logger=None) -> LinkRepository:
    """Construct the repository over the configured store backend."""
    store = create_store(
        data_dir=config.data_dir,
        database_url=config.database_url,
        create_tables=config.create_tables,
        logger=logger,
    )
    return LinkRepository(store=store, logger=logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup and release it at shutdown."""
    config = app.state.config
    logger = get_logger()

    logger.info("Starting link forwarder service...")

    repository = build_repository(config, logger=logger)
    await repository.initialize()

    if config.seed_defaults:
        await repository.seed_defaults()

    app.state.repository = repository
    logger.info(f"Not-found policy: {config.not_found_policy}")
    logger.info("Service started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down link forwarder service...")
        await repository.close()
        app.state.repository = None
        logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Link Forwarder Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url'})}")

    app = create_app(repository=None, config=config, lifespan=lifespan)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=False,  # LoggingMiddleware logs every request
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        logger.info(f"Visit http://localhost:{config.port} to manage links")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
