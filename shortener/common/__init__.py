"""Common utilities for URL shortener."""

from .url_builder import build_short_url, normalize_path_prefix
from .logging_config import setup_logging, get_logger

__all__ = [
    "build_short_url",
    "normalize_path_prefix",
    "setup_logging",
    "get_logger",
]
