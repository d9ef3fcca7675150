"""Exception types for URL shortener."""


class ShortenerError(Exception):
    """Base class for URL shortener errors."""


class StoreError(ShortenerError):
    """Raised by store implementations."""


class AlreadyExistsError(StoreError):
    """Raised when adding a short code that is already mapped."""

    def __init__(self, short_code: str):
        super().__init__("shortened URL already exists")
        self.short_code = short_code


class NotFoundError(StoreError):
    """Raised when a short code has no mapping."""

    def __init__(self, short_code: str):
        super().__init__("shortened URL does not exist")
        self.short_code = short_code


class StoreIOError(StoreError):
    """Raised when the backing file cannot be read, parsed or written."""


class DecodeError(ShortenerError):
    """Raised when a request body cannot be decoded."""
