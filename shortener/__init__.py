"""Core business logic for URL shortener."""

from .errors import (
    ShortenerError,
    StoreError,
    AlreadyExistsError,
    NotFoundError,
    StoreIOError,
    DecodeError,
)
from .shortcode import make_short_code
from .service import ShortenerService

__version__ = "1.0.0"

__all__ = [
    "ShortenerError",
    "StoreError",
    "AlreadyExistsError",
    "NotFoundError",
    "StoreIOError",
    "DecodeError",
    "make_short_code",
    "ShortenerService",
]
