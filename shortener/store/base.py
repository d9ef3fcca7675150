"""Abstract base class for URL shortener store implementations."""

from abc import ABC, abstractmethod
from typing import Dict


class Store(ABC):
    """Abstract base class for short code to URL mappings.
    
    Implementations raise AlreadyExistsError, NotFoundError or StoreIOError
    from shortener.errors instead of returning status flags.
    """
    
    backend_name = "abstract"
    
    @abstractmethod
    async def add(self, short_code: str, long_url: str) -> None:
        """Add a new mapping.
        
        Args:
            short_code: The short code to use
            long_url: The original long URL
            
        Raises:
            AlreadyExistsError: If short_code is already mapped
        """
        pass
    
    @abstractmethod
    async def remove(self, short_code: str) -> None:
        """Remove a mapping.
        
        Args:
            short_code: The short code to delete
            
        Raises:
            NotFoundError: If short_code is not mapped
        """
        pass
    
    @abstractmethod
    async def get(self, short_code: str) -> str:
        """Get the long URL for a short code.
        
        Args:
            short_code: The short code to lookup
            
        Returns:
            The original URL
            
        Raises:
            NotFoundError: If short_code is not mapped
        """
        pass
    
    @abstractmethod
    async def list_items(self) -> Dict[str, str]:
        """Return a copy of all mappings."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the backing storage is usable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
    
    async def close(self) -> None:
        """Release resources held by the store."""
        pass
