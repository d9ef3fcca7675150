"""In-memory store for URL shortener."""

import asyncio
import logging
from typing import Dict, Optional

from .base import Store
from ..errors import AlreadyExistsError, NotFoundError


class MemoryStore(Store):
    """Store backed by a process-local dict. Nothing survives a restart."""
    
    backend_name = "memory"
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._items: Dict[str, str] = {}
        self._lock = asyncio.Lock()
    
    async def add(self, short_code: str, long_url: str) -> None:
        async with self._lock:
            if short_code in self._items:
                raise AlreadyExistsError(short_code)
            self._items[short_code] = long_url
            self.logger.debug(f"Memory store now holds {len(self._items)} items")
    
    async def remove(self, short_code: str) -> None:
        async with self._lock:
            if short_code not in self._items:
                raise NotFoundError(short_code)
            del self._items[short_code]
            self.logger.debug(f"Memory store now holds {len(self._items)} items")
    
    async def get(self, short_code: str) -> str:
        async with self._lock:
            try:
                return self._items[short_code]
            except KeyError:
                raise NotFoundError(short_code) from None
    
    async def list_items(self) -> Dict[str, str]:
        async with self._lock:
            return dict(self._items)
    
    async def health_check(self) -> bool:
        return True
