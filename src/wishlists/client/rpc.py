"""HTTP client stubs for the remote wishlist operations."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from wishlists.exceptions import RemoteError
from wishlists.models import Wishlist, WishlistList

_ENDPOINT = "/api/wishlists"


class WishlistClient:
    """Calls the wishlist HTTP API.

    No timeout is applied unless one is passed in; callers that need
    bounded latency must set it.

    Parameters:
        base_url:  Root URL of the server.
        timeout:   Request timeout in seconds, ``None`` for none.
        transport: Custom httpx transport (e.g. ``httpx.ASGITransport`` in
                   tests).

    Example:
        async with WishlistClient("http://127.0.0.1:8000") as client:
            await client.save_wishlist(Wishlist(name="Birthday", items=["Book"]))
            wishlists = await client.get_wishlists()
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> WishlistClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def save_wishlist(self, wishlist: Wishlist) -> None:
        response = await self._http.post(_ENDPOINT, json=wishlist.model_dump())
        _raise_for_error(response)

    async def get_wishlists(self) -> list[Wishlist]:
        response = await self._http.get(_ENDPOINT)
        _raise_for_error(response)
        try:
            return WishlistList.validate_json(response.content)
        except PydanticValidationError as e:
            raise RemoteError(response.status_code, f"malformed wishlist payload: {e}") from e

    async def delete_wishlist(self, name: str) -> None:
        response = await self._http.delete(f"{_ENDPOINT}/{quote(name, safe='')}")
        _raise_for_error(response)


def _raise_for_error(response: httpx.Response) -> None:
    """Translate a failed response into :class:`RemoteError`."""
    if response.is_success:
        return
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and "error" in body:
        raise RemoteError(response.status_code, str(body["error"]), str(body.get("error_type", "")))
    raise RemoteError(response.status_code, response.text or response.reason_phrase)
