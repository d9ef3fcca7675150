"""Storage layer for URL shortener."""

import logging
from typing import Optional

from .base import Store
from .file import FileStore
from .memory import MemoryStore

BACKENDS = ("file", "memory")


def create_store(
    backend: str,
    path: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Store:
    """Build a store for the named backend.
    
    Args:
        backend: Either 'file' or 'memory'
        path: Document path, required for the file backend
        logger: Optional logger passed to the store
        
    Returns:
        Store instance
    """
    if backend == "memory":
        return MemoryStore(logger=logger)
    if backend == "file":
        if not path:
            raise ValueError("File store requires a path")
        return FileStore(path, logger=logger)
    raise ValueError(f"Unknown store backend '{backend}' (expected one of {', '.join(BACKENDS)})")


__all__ = ["Store", "FileStore", "MemoryStore", "create_store", "BACKENDS"]
