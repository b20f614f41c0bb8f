"""Client-side coordination: submitting wishlists and showing the stored ones.

Two independent asynchronous interactions live here:

* the **submission path** (:class:`WishlistForm`) reads the input fields at
  the moment of submission and fires a background save whose outcome is
  only logged;
* the **load path** (:class:`ListResource`) fetches the list once when the
  view mounts and keeps the result until it is invalidated.

A successful save invalidates the list so the view never stays frozen at
its first load.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

import httpx

from wishlists.exceptions import WishlistError
from wishlists.models import Wishlist

if TYPE_CHECKING:
    from wishlists.client.rpc import WishlistClient

logger = logging.getLogger(__name__)

LOADING_PLACEHOLDER = "Loading..."

# Failures the client paths absorb: remote errors and transport errors.
_CALL_ERRORS = (WishlistError, httpx.HTTPError)


class SaveCall(Protocol):
    def __call__(self, wishlist: Wishlist) -> Awaitable[None]: ...


class InputField:
    """A text input whose current value is owned by the UI, not by the form."""

    def __init__(self, value: str = "") -> None:
        self.value = value


class ListResource:
    """Load-once, invalidatable holder for the wishlist listing.

    ``get()`` returns ``None`` until the first load finishes.  A failed load
    resolves to an empty list.  After :meth:`invalidate` the previous value
    stays visible until the re-fetch lands; a fetch superseded by a newer
    one never overwrites it.
    """

    def __init__(self, fetch: Callable[[], Awaitable[list[Wishlist]]]) -> None:
        self._fetch = fetch
        self._task: asyncio.Task[list[Wishlist]] | None = None
        self._value: list[Wishlist] | None = None
        self._generation = 0
        self._superseded: set[asyncio.Task[list[Wishlist]]] = set()

    def load(self) -> asyncio.Task[list[Wishlist]]:
        """Start the fetch if none has been started; return the current one."""
        if self._task is None:
            self._task = asyncio.create_task(self._run(self._generation))
        return self._task

    def invalidate(self) -> asyncio.Task[list[Wishlist]]:
        """Discard the memoized fetch and start a new one."""
        self._generation += 1
        previous, self._task = self._task, None
        if previous is not None and not previous.done():
            self._superseded.add(previous)
            previous.add_done_callback(self._superseded.discard)
        return self.load()

    def get(self) -> list[Wishlist] | None:
        return self._value

    @property
    def loading(self) -> bool:
        return self._value is None

    @property
    def in_flight(self) -> int:
        current = 0 if self._task is None or self._task.done() else 1
        return current + len(self._superseded)

    async def _run(self, generation: int) -> list[Wishlist]:
        try:
            value = await self._fetch()
        except _CALL_ERRORS as e:
            logger.warning("Could not load wishlists, showing none: %s", e)
            value = []
        if generation == self._generation:
            self._value = value
        return value


class WishlistForm:
    """The name + comma-separated items form.

    ``name`` and ``items_text`` mirror what was last submitted; the values
    sent are always read from the input fields themselves.

    Parameters:
        save:     Coroutine function performing the remote save.
        on_saved: Called with the wishlist after a successful save.
    """

    def __init__(
        self,
        save: SaveCall,
        on_saved: Callable[[Wishlist], object] | None = None,
    ) -> None:
        self.name_input = InputField("Name")
        self.items_input = InputField("")
        self.name = self.name_input.value
        self.items_text = self.items_input.value
        self._save = save
        self._on_saved = on_saved
        self._in_flight: set[asyncio.Task[None]] = set()

    def on_submit(self) -> asyncio.Task[None]:
        """Dispatch the save in the background and return without waiting.

        The returned task is never cancelled by the form, not even when the
        view unmounts.
        """
        name = self.name_input.value
        items_text = self.items_input.value
        self.name = name
        self.items_text = items_text

        wishlist = Wishlist(name=name, items=items_text.split(","))
        task = asyncio.create_task(self._submit(wishlist))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    async def _submit(self, wishlist: Wishlist) -> None:
        try:
            await self._save(wishlist)
        except _CALL_ERRORS as e:
            logger.error("Got error while saving wishlist '%s': %s", wishlist.name, e)
            return
        if self._on_saved is not None:
            self._on_saved(wishlist)


class WishlistView:
    """Home view: the submission form above the list of stored wishlists.

    Example:
        view = WishlistView(client)
        view.mount()
        view.render()            # ["Loading..."]
        await view.resource.load()
        view.render()            # one line per wishlist name
    """

    def __init__(self, client: WishlistClient) -> None:
        self.resource = ListResource(client.get_wishlists)
        self.form = WishlistForm(client.save_wishlist, on_saved=self._refresh)
        self.mounted = False

    def mount(self) -> None:
        self.mounted = True
        self.resource.load()

    def unmount(self) -> None:
        self.mounted = False

    def rows(self) -> dict[str, Wishlist] | None:
        """Wishlists keyed by name, or ``None`` while the first load is pending."""
        wishlists = self.resource.get()
        if wishlists is None:
            return None
        return {wishlist.name: wishlist for wishlist in wishlists}

    def render(self) -> list[str]:
        rows = self.rows()
        if rows is None:
            return [LOADING_PLACEHOLDER]
        return list(rows)

    def _refresh(self, wishlist: Wishlist) -> None:
        self.resource.invalidate()
