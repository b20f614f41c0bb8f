"""WishlistRepository — maps Wishlist entities onto key-value store entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from wishlists.exceptions import CorruptRecordError
from wishlists.models import Wishlist

if TYPE_CHECKING:
    from wishlists.stores.base import KeyValueStore


class WishlistRepository:
    """Serializes wishlists to JSON and stores each one under its own key.

    The key of a wishlist is ``key_prefix + name``.  With the default empty
    prefix the key is exactly the name.  A non-empty prefix lets wishlists
    share a store with unrelated entries: only keys carrying the prefix are
    enumerated.

    Parameters:
        store:      Backend holding the serialized entries.
        key_prefix: Prepended to every wishlist name to form its key.
    """

    def __init__(self, store: KeyValueStore, key_prefix: str = "") -> None:
        self._store = store
        self._key_prefix = key_prefix

    def key_for(self, name: str) -> str:
        return f"{self._key_prefix}{name}"

    async def put(self, wishlist: Wishlist) -> None:
        """Write *wishlist*, replacing any previous value under the same name."""
        await self._store.set(self.key_for(wishlist.name), wishlist.model_dump_json())

    async def get_by_name(self, name: str) -> Wishlist | None:
        """Return the stored wishlist, or ``None`` if the key is absent.

        Raises:
            CorruptRecordError: If the stored blob is not a wishlist.
        """
        key = self.key_for(name)
        raw = await self._store.get(key)
        if raw is None:
            return None
        try:
            return Wishlist.model_validate_json(raw)
        except PydanticValidationError as e:
            raise CorruptRecordError(key, f"{e.error_count()} validation error(s)") from e

    async def list_names(self) -> list[str]:
        """Return the names of all stored wishlists, in store order."""
        keys = await self._store.list_keys()
        if not self._key_prefix:
            return keys
        cut = len(self._key_prefix)
        return [key[cut:] for key in keys if key.startswith(self._key_prefix)]

    async def delete(self, name: str) -> None:
        await self._store.delete(self.key_for(name))

    @property
    def store(self) -> KeyValueStore:
        return self._store
