"""URL building utilities for URL shortener."""


def normalize_path_prefix(path_prefix: str) -> str:
    """Normalize a path prefix to '/segment' form, or '' when blank.
    
    Args:
        path_prefix: Raw prefix from configuration (e.g., 's/', '/s')
        
    Returns:
        Prefix with a leading slash and no trailing slash
    """
    prefix = (path_prefix or "").strip().strip("/")
    return f"/{prefix}" if prefix else ""


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.
    
    Args:
        short_code: The short code
        base_url: Base URL (e.g., http://localhost:8080)
        path_prefix: Optional path prefix (e.g., /s)
        
    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}{normalize_path_prefix(path_prefix)}/{short_code}"
