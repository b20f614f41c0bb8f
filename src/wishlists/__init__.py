"""wishlists — named item lists kept in a key-value store.

A wishlist is saved whole under its name and read back by enumerating the
store.  The service tolerates entries vanishing between enumeration and
fetch; they are simply left out of the listing.
"""

from wishlists.exceptions import (
    CorruptRecordError,
    RemoteError,
    StorageError,
    ValidationError,
    WishlistError,
)
from wishlists.models import Wishlist
from wishlists.repository import WishlistRepository
from wishlists.service import WishlistService

__all__ = [
    "CorruptRecordError",
    "RemoteError",
    "StorageError",
    "ValidationError",
    "Wishlist",
    "WishlistError",
    "WishlistRepository",
    "WishlistService",
]
