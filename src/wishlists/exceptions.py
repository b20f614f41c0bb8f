"""Custom exceptions for the wishlists package."""

from __future__ import annotations


class WishlistError(Exception):
    """Base exception for all wishlist-related errors."""


class ValidationError(WishlistError):
    """Raised when input is rejected before any store access."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")


class StorageError(WishlistError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class CorruptRecordError(StorageError):
    """Raised when a stored blob cannot be decoded as a wishlist."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"record '{key}' is not a valid wishlist"
        if detail:
            msg += f" ({detail})"
        super().__init__("get", msg)


class RemoteError(WishlistError):
    """Raised by the client when the server answers a call with a failure."""

    def __init__(self, status_code: int, message: str, error_type: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        super().__init__(f"Remote call failed ({status_code}): {message}")
