"""Integration tests for URL shortener."""

import json

from httpx import ASGITransport, AsyncClient

from app import lifespan
from config import Config
from shortener.common.logging_config import setup_logging
from web_app import create_app


def build_server_app(config: Config):
    """Assemble the app the way main() does."""
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = setup_logging(level="DEBUG")
    return app


class TestIntegration:
    """End-to-end integration tests through the server lifespan."""
    
    async def test_full_url_lifecycle(self, tmp_path):
        """Add, redirect, delete and persist through the file backend."""
        store_path = tmp_path / "store.json"
        config = Config(
            base_url="http://localhost:8080",
            store_backend="file",
            store_path=str(store_path),
        )
        app = build_server_app(config)
        
        async with lifespan(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                # 1. Create short URL
                create_response = await client.post("/add", json={"url": "https://example.com/test"})
                assert create_response.status_code == 201
                shortened_url = create_response.json()["shortened_url"]
                assert shortened_url.startswith("http://localhost:8080/")
                code = shortened_url.rsplit("/", 1)[1]
                
                # 2. Redirect
                redirect_response = await client.get(f"/{code}", follow_redirects=False)
                assert redirect_response.status_code == 307
                assert redirect_response.headers["location"] == "https://example.com/test"
                
                # 3. Document on disk
                with open(store_path, "r", encoding="utf-8") as f:
                    document = json.load(f)
                assert document == {"version": "1.0", "items": {code: "https://example.com/test"}}
                
                # 4. Delete, then lookup fails
                assert (await client.delete(f"/{code}")).status_code == 200
                assert (await client.get(f"/{code}")).status_code == 404
    
    async def test_file_backend_survives_restart(self, tmp_path):
        config = Config(store_backend="file", store_path=str(tmp_path / "store.json"))
        
        app = build_server_app(config)
        async with lifespan(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                create_response = await client.post("/add", json={"url": "https://example.com/keep"})
                code = create_response.json()["shortened_url"].rsplit("/", 1)[1]
        
        app = build_server_app(config)
        async with lifespan(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                response = await client.get(f"/{code}", follow_redirects=False)
                assert response.status_code == 307
    
    async def test_memory_backend_forgets_on_restart(self):
        config = Config(store_backend="memory")
        
        app = build_server_app(config)
        async with lifespan(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                create_response = await client.post("/add", json={"url": "https://example.com/gone"})
                code = create_response.json()["shortened_url"].rsplit("/", 1)[1]
            assert app.state.store.backend_name == "memory"
        
        app = build_server_app(config)
        async with lifespan(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                response = await client.get(f"/{code}", follow_redirects=False)
                assert response.status_code == 404
