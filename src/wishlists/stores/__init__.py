"""Storage backends for wishlist persistence."""

from wishlists.stores.base import KeyValueStore
from wishlists.stores.memory import InMemoryStore

__all__ = ["InMemoryStore", "KeyValueStore"]
