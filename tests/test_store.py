"""Tests for store implementations.

The ``store`` fixture runs every test against both backends.
"""

import asyncio

import pytest

from shortener.errors import AlreadyExistsError, NotFoundError
from shortener.store import FileStore, MemoryStore, create_store


class TestStoreContract:
    """Behaviour shared by every store backend."""
    
    async def test_add_then_get(self, store, sample_urls):
        await store.add("abc123", sample_urls[0])
        
        assert await store.get("abc123") == sample_urls[0]
    
    async def test_add_existing_code(self, store, sample_urls):
        await store.add("abc123", sample_urls[0])
        
        with pytest.raises(AlreadyExistsError, match="already exists"):
            await store.add("abc123", sample_urls[1])
        
        # Original mapping untouched
        assert await store.get("abc123") == sample_urls[0]
    
    async def test_get_missing(self, store):
        with pytest.raises(NotFoundError, match="does not exist"):
            await store.get("missing")
    
    async def test_remove_missing(self, store):
        with pytest.raises(NotFoundError):
            await store.remove("missing")
    
    async def test_remove_then_get(self, store, sample_urls):
        await store.add("abc123", sample_urls[0])
        await store.remove("abc123")
        
        with pytest.raises(NotFoundError):
            await store.get("abc123")
    
    async def test_remove_then_add_again(self, store, sample_urls):
        await store.add("abc123", sample_urls[0])
        await store.remove("abc123")
        await store.add("abc123", sample_urls[1])
        
        assert await store.get("abc123") == sample_urls[1]
    
    async def test_empty_url_is_a_value(self, store):
        """An empty URL is stored like any other value."""
        await store.add("empty", "")
        
        assert await store.get("empty") == ""
        with pytest.raises(AlreadyExistsError):
            await store.add("empty", "https://example.com")
        await store.remove("empty")
    
    async def test_list_items_is_a_copy(self, store, sample_urls):
        await store.add("a", sample_urls[0])
        await store.add("b", sample_urls[1])
        
        items = await store.list_items()
        assert items == {"a": sample_urls[0], "b": sample_urls[1]}
        
        items["c"] = sample_urls[2]
        assert "c" not in await store.list_items()
    
    async def test_health_check(self, store):
        assert await store.health_check() is True
    
    async def test_concurrent_adds_same_code(self, store, sample_urls):
        """Exactly one of many racing adds for one code wins."""
        results = await asyncio.gather(
            *(store.add("race", f"https://example.com/{i}") for i in range(20)),
            return_exceptions=True,
        )
        
        successes = [r for r in results if r is None]
        failures = [r for r in results if isinstance(r, AlreadyExistsError)]
        assert len(successes) == 1
        assert len(failures) == 19
    
    async def test_concurrent_adds_distinct_codes(self, store):
        """No update is lost when many distinct adds interleave."""
        await asyncio.gather(
            *(store.add(f"code{i}", f"https://example.com/{i}") for i in range(25))
        )
        
        items = await store.list_items()
        assert len(items) == 25
        assert items["code7"] == "https://example.com/7"


class TestCreateStore:
    """Test the store factory."""
    
    def test_memory(self):
        assert isinstance(create_store("memory"), MemoryStore)
    
    def test_file(self, store_path):
        store = create_store("file", path=str(store_path))
        assert isinstance(store, FileStore)
        assert store_path.exists()
    
    def test_file_requires_path(self):
        with pytest.raises(ValueError, match="requires a path"):
            create_store("file")
    
    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown store backend"):
            create_store("redis")
