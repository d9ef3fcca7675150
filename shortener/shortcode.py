"""Short code derivation."""

import hashlib

DEFAULT_CODE_LENGTH = 10


def make_short_code(url: str, length: int = DEFAULT_CODE_LENGTH) -> str:
    """Derive a short code from a URL.
    
    The code is the leading hex characters of the SHA-1 digest of the URL.
    Distinct URLs may map to the same code; callers treat that as an
    ordinary "already exists" failure.
    
    Args:
        url: The URL to hash
        length: Number of hex characters to keep
        
    Returns:
        Short code
    """
    if not 1 <= length <= 40:
        raise ValueError(f"Short code length must be between 1 and 40, got {length}")
    
    return hashlib.sha1(url.encode("utf-8")).hexdigest()[:length]

