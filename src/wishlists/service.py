"""WishlistService — the operations exposed to remote callers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from wishlists.exceptions import ValidationError

if TYPE_CHECKING:
    from wishlists.models import Wishlist
    from wishlists.repository import WishlistRepository

logger = logging.getLogger(__name__)

LEGACY_KEYS: tuple[str, ...] = ("leptos_site_count",)


class WishlistService:
    """Validates requests and drives the repository.

    Every call is an independent unit of work; the service holds no state
    besides the repository reference, so one instance may serve any number
    of concurrent requests.

    Parameters:
        repository: Repository shared by all calls.
    """

    def __init__(self, repository: WishlistRepository) -> None:
        self._repository = repository

    # ── writes ───────────────────────────────────────────────

    async def save(self, wishlist: Wishlist) -> None:
        """Persist *wishlist*, replacing any previous value with that name.

        Raises:
            ValidationError: If ``wishlist.name`` is empty.  Nothing is written.
            StorageError:    If the backend write fails.
        """
        _require_name(wishlist.name)
        logger.info("Saving wishlist '%s' (%d items)", wishlist.name, len(wishlist.items))
        await self._repository.put(wishlist)

    async def delete(self, name: str) -> None:
        """Remove the wishlist called *name*.  No-op if it does not exist."""
        _require_name(name)
        logger.info("Deleting wishlist '%s'", name)
        await self._repository.delete(name)

    # ── reads ────────────────────────────────────────────────

    async def list_all(self) -> list[Wishlist]:
        """Return every stored wishlist in enumeration order.

        Names are enumerated first and then fetched.  The two steps are not
        atomic: a wishlist deleted in between comes back as ``None`` from the
        fetch and is left out of the result instead of failing the call.

        Raises:
            StorageError: On any other backend or decoding failure.
        """
        names = await self._repository.list_names()
        logger.debug("Listing %d wishlist(s)", len(names))

        fetched = await asyncio.gather(*(self._repository.get_by_name(n) for n in names))

        wishlists: list[Wishlist] = []
        for name, wishlist in zip(names, fetched, strict=True):
            if wishlist is None:
                logger.debug("Wishlist '%s' vanished before it could be read; skipping", name)
                continue
            wishlists.append(wishlist)
        return wishlists

    # ── maintenance ──────────────────────────────────────────

    async def remove_legacy_keys(self, keys: Iterable[str] = LEGACY_KEYS) -> list[str]:
        """Delete leftover keys that predate wishlist storage.

        Run once, explicitly; nothing else calls this.  Keys are addressed
        verbatim, without the repository's key prefix.

        Returns:
            The keys that were present and have been removed.
        """
        store = self._repository.store
        removed: list[str] = []
        for key in keys:
            if await store.get(key) is None:
                continue
            await store.delete(key)
            removed.append(key)
            logger.info("Removed legacy key '%s'", key)
        return removed


def _require_name(name: str) -> None:
    if not name:
        raise ValidationError("name", "must not be empty")
