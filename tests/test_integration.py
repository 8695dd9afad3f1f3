"""Integration tests for the link forwarder."""

import os

from httpx import AsyncClient, ASGITransport

from app import build_repository, lifespan
from config import Config
from linkfwd.database import SQLiteLinkStore
from linkfwd.database.sqlite import DB_FILENAME
from web_app import create_app


class TestIntegration:
    """End-to-end integration tests."""
    
    async def test_full_link_lifecycle(self, data_dir):
        """Startup seeding, save, forward, list, delete and shutdown."""
        config = Config(_env_file=None, data_dir=data_dir, database_url=None, base_url="http://testserver")
        app = create_app(repository=None, config=config, lifespan=lifespan)
        
        async with lifespan(app):
            assert os.path.exists(os.path.join(data_dir, DB_FILENAME))
            
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                # 1. Default links are seeded at startup
                listing = await client.get("/api/links")
                assert {link["shortcode"] for link in listing.json()["data"]} == {"google", "github"}
                
                redirect = await client.get("/google")
                assert redirect.status_code == 302
                assert redirect.headers["location"] == "https://www.google.com"
                
                # 2. Save a link without a scheme
                save = await client.post("/api/links", json={"shortcode": "docs", "url": "docs.python.org/3/"})
                assert save.status_code == 200
                
                # 3. Forward it
                redirect = await client.get("/docs")
                assert redirect.status_code == 302
                assert redirect.headers["location"] == "https://docs.python.org/3/"
                
                # 4. Newest link is listed first
                listing = await client.get("/api/links")
                assert listing.json()["data"][0]["shortcode"] == "docs"
                
                # 5. Delete it
                delete = await client.delete("/api/links/docs")
                assert delete.status_code == 200
                
                # 6. Forwarding now lands on the management page
                redirect = await client.get("/docs")
                assert redirect.status_code == 302
                assert redirect.headers["location"] == "/?shortcode=docs&error=not_found"
                
                page = await client.get(redirect.headers["location"])
                assert page.status_code == 200
                assert 'id="error"' in page.text
        
        assert app.state.repository is None
    
    async def test_links_survive_restart(self, data_dir):
        """Links are persistent across process restarts sharing a data directory."""
        config = Config(_env_file=None, data_dir=data_dir, database_url=None, seed_defaults=False)
        
        first = build_repository(config)
        await first.initialize()
        await first.upsert("keep", "example.com/keep")
        await first.close()
        
        second = build_repository(config)
        await second.initialize()
        try:
            assert isinstance(second.store, SQLiteLinkStore)
            assert await second.lookup("keep") == "https://example.com/keep"
            assert [link.shortcode for link in await second.list_all()] == ["keep"]
        finally:
            await second.close()
    
    async def test_startup_without_seeding(self, data_dir):
        config = Config(_env_file=None, data_dir=data_dir, database_url=None, seed_defaults=False)
        app = create_app(repository=None, config=config, lifespan=lifespan)
        
        async with lifespan(app):
            assert await app.state.repository.list_all() == []
