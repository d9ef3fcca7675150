"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.common.logging_config import setup_logging
from shortener.service import ShortenerService
from shortener.store.file import FileStore
from shortener.store.memory import MemoryStore
from web_app import create_app

TEST_BASE_URL = "http://testserver"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store_path(tmp_path):
    """Path to a store document that does not exist yet."""
    return tmp_path / "store.json"


@pytest.fixture
def memory_store(logger):
    return MemoryStore(logger=logger)


@pytest.fixture
def file_store(store_path, logger):
    return FileStore(store_path, logger=logger)


@pytest.fixture(params=["memory", "file"])
def store(request):
    """Each store backend in turn."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def service(store, logger):
    """Create service instance."""
    return ShortenerService(store=store, logger=logger)


@pytest.fixture
def config(store_path):
    return Config(
        base_url=TEST_BASE_URL,
        store_backend="file",
        store_path=str(store_path),
    )


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "http://example.com",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
