"""Async client for the wishlist API and the view flow built on it."""

from wishlists.client.flow import (
    LOADING_PLACEHOLDER,
    InputField,
    ListResource,
    WishlistForm,
    WishlistView,
)
from wishlists.client.rpc import WishlistClient

__all__ = [
    "LOADING_PLACEHOLDER",
    "InputField",
    "ListResource",
    "WishlistClient",
    "WishlistForm",
    "WishlistView",
]
