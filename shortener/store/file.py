"""JSON file store for URL shortener."""

import asyncio
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import Store
from ..errors import AlreadyExistsError, NotFoundError, StoreIOError


class FileStore(Store):
    """Store backed by a single JSON document on disk.
    
    Document layout::
    
        {"version": "1.0", "items": {"<short_code>": "<long_url>", ...}}
    
    Every operation reads the whole document and every mutation rewrites it.
    Blocking file work runs in worker threads and is serialized by one
    threading.Lock per instance. The lock is held by the thread itself, so a
    cancelled request cannot release it while its read-modify-write is still
    running. A single process must own the file. Writes go to a sibling temp
    file which is then renamed over the document.
    """
    
    backend_name = "file"
    VERSION = "1.0"
    
    def __init__(
        self,
        path: Union[str, Path],
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize file store.
        
        Creates an empty document if the file does not exist. An existing
        file is left untouched and only validated on first use.
        
        Args:
            path: Path to the JSON document
            logger: Optional logger instance
            
        Raises:
            StoreIOError: If the initial document cannot be written
        """
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        
        if not self.path.exists():
            self.logger.info(f"Creating store file at {self.path}")
            self._write_document({"version": self.VERSION, "items": {}})
    
    async def add(self, short_code: str, long_url: str) -> None:
        await asyncio.to_thread(self._add, short_code, long_url)
    
    async def remove(self, short_code: str) -> None:
        await asyncio.to_thread(self._remove, short_code)
    
    async def get(self, short_code: str) -> str:
        document = await asyncio.to_thread(self._load)
        
        try:
            return document["items"][short_code]
        except KeyError:
            raise NotFoundError(short_code) from None
    
    async def list_items(self) -> Dict[str, str]:
        document = await asyncio.to_thread(self._load)
        return dict(document["items"])
    
    async def health_check(self) -> bool:
        try:
            await asyncio.to_thread(self._load)
        except StoreIOError as e:
            self.logger.warning(f"Store file unhealthy: {e}")
            return False
        return True
    
    def _load(self) -> Dict[str, Any]:
        with self._lock:
            return self._read_document()
    
    def _add(self, short_code: str, long_url: str) -> None:
        with self._lock:
            document = self._read_document()
            items = document["items"]
            if short_code in items:
                raise AlreadyExistsError(short_code)
            items[short_code] = long_url
            self._write_document(document)
        self.logger.debug(f"Store file {self.path} now holds {len(items)} items")
    
    def _remove(self, short_code: str) -> None:
        with self._lock:
            document = self._read_document()
            items = document["items"]
            if short_code not in items:
                raise NotFoundError(short_code)
            del items[short_code]
            self._write_document(document)
        self.logger.debug(f"Store file {self.path} now holds {len(items)} items")
    
    def _read_document(self) -> Dict[str, Any]:
        """Load and check the whole document."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise StoreIOError(f"unable to read store file: {e}") from e
        
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreIOError(f"unable to parse incoming JSON store data. Error: {e}") from e
        
        if not isinstance(document, dict):
            raise StoreIOError(
                "unable to parse incoming JSON store data. Error: document is not an object"
            )
        
        items = document.setdefault("items", {})
        if not isinstance(items, dict):
            raise StoreIOError(
                "unable to parse incoming JSON store data. Error: items is not an object"
            )
        document.setdefault("version", self.VERSION)
        
        return document
    
    def _write_document(self, document: Dict[str, Any]) -> None:
        """Serialize the document and atomically replace the file."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StoreIOError(f"unable to write to file: {e}") from e
