"""Pytest configuration and fixtures."""

import os

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from linkfwd.database.sqlite import SQLiteLinkStore
from linkfwd.repository import LinkRepository
from linkfwd.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def data_dir(tmp_path):
    """Directory for the test links.db (not created yet)."""
    return str(tmp_path / "data")


@pytest.fixture
async def store(data_dir, logger):
    """Initialized SQLite store in a temporary directory."""
    store = SQLiteLinkStore.in_directory(data_dir, logger=logger)
    await store.initialize()
    
    yield store
    
    await store.close()


@pytest.fixture
async def repository(store, logger) -> LinkRepository:
    """Create repository over the test store."""
    return LinkRepository(store=store, logger=logger)


@pytest.fixture
def config(data_dir):
    """Test configuration; ignores any .env in the working directory."""
    return Config(
        _env_file=None,
        data_dir=data_dir,
        database_url=None,
        not_found_policy="redirect",
        base_url="http://testserver",
        seed_defaults=False,
    )


@pytest.fixture
def app(repository, config):
    """Create test FastAPI app with the default redirect not-found policy."""
    return create_app(repository=repository, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_links():
    """Sample (shortcode, url) pairs for testing."""
    return [
        ("example", "https://example.com/test"),
        ("gh", "github.com/user/repo"),
        ("so", "http://stackoverflow.com/questions/123456"),
    ]


@pytest.fixture
def postgres_url():
    """PostgreSQL URL for store tests; skips when not configured."""
    url = os.getenv("LINKFWD_TEST_POSTGRES_URL")
    if not url:
        pytest.skip("LINKFWD_TEST_POSTGRES_URL not set")
    return url
