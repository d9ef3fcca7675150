"""Configuration management for URL shortener."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""
    
    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )
    
    port: int = Field(
        default=8080,
        description="Port to listen on"
    )
    
    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. The file store must be owned by a single process."
    )
    
    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Domain prepended to short codes in shortened_url"
    )
    
    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123). Shortener routes are served under it as well as at the root."
    )
    
    short_code_length: int = Field(
        default=10,
        ge=1,
        le=40,
        description="Number of SHA-1 hex characters kept in a short code"
    )
    
    # Store settings
    store_backend: Literal["file", "memory"] = Field(
        default="file",
        description="Store implementation ('file' or 'memory')"
    )
    
    store_path: str = Field(
        default="store.json",
        description="JSON document used by the file store"
    )
    
    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )
    
    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
