"""KeyValueStore protocol — flat, string-keyed blob persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base for all storage backends.

    The store is completely agnostic to what is being stored — it just
    persists ``str`` blobs keyed by ``str``.  A single ``get`` / ``set`` /
    ``delete`` is atomic; nothing spans more than one key, so a
    ``list_keys`` followed by ``get`` may observe keys that have since
    disappeared.

    Backends raise :class:`~wishlists.exceptions.StorageError` when the
    underlying medium fails.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def list_keys(self) -> list[str]:
        """Return all keys currently present."""
        ...

    async def close(self) -> None:
        """Release any resources held by the backend."""
        return None
