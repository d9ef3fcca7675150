"""Business logic service for URL shortener."""

import logging
from typing import Any, Dict, Optional

from .errors import AlreadyExistsError, NotFoundError
from .shortcode import DEFAULT_CODE_LENGTH, make_short_code
from .store.base import Store


class ShortenerService:
    """Service layer between the HTTP handlers and a Store."""
    
    def __init__(
        self,
        store: Store,
        code_length: int = DEFAULT_CODE_LENGTH,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.
        
        Args:
            store: Store instance
            code_length: Number of hex characters in generated codes
            logger: Optional logger
        """
        self.store = store
        self.code_length = code_length
        self.logger = logger or logging.getLogger(__name__)
    
    async def shorten(self, long_url: str) -> Dict[str, Any]:
        """Create a short code for a URL.
        
        The code is derived from the URL alone, so shortening the same URL
        twice fails the second time, as does a different URL whose code
        collides with an existing one.
        
        Args:
            long_url: The original long URL
            
        Returns:
            Dictionary with short_code and long_url
            
        Raises:
            AlreadyExistsError: If the derived code is already mapped
            StoreIOError: If the store cannot be read or written
        """
        short_code = make_short_code(long_url, self.code_length)
        
        try:
            await self.store.add(short_code, long_url)
        except AlreadyExistsError:
            self.logger.warning(f"Short code already exists: {short_code} (url={long_url})")
            raise
        
        self.logger.info(f"Created short URL: {short_code} -> {long_url}")
        
        return {
            "short_code": short_code,
            "long_url": long_url,
        }
    
    async def resolve(self, short_code: str) -> str:
        """Get the original URL for a short code.
        
        Raises:
            NotFoundError: If the code is not mapped
        """
        try:
            long_url = await self.store.get(short_code)
        except NotFoundError:
            self.logger.warning(f"Short code not found: {short_code}")
            raise
        
        self.logger.debug(f"Resolved URL: {short_code} -> {long_url}")
        return long_url
    
    async def delete(self, short_code: str) -> None:
        """Delete a short URL.
        
        Raises:
            NotFoundError: If the code is not mapped
        """
        await self.store.remove(short_code)
        self.logger.info(f"Deleted short URL: {short_code}")
    
    async def list_urls(self) -> Dict[str, str]:
        """Return every mapping currently stored."""
        return await self.store.list_items()
    
    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.
        
        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }
    
    async def close(self) -> None:
        """Close store resources."""
        await self.store.close()
