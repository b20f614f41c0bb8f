"""Tests for WishlistClient against the in-process app."""

import httpx
import pytest

from wishlists import RemoteError, Wishlist
from wishlists.api import create_app
from wishlists.client import WishlistClient


@pytest.fixture
async def client(service):
    transport = httpx.ASGITransport(app=create_app(service=service))
    async with WishlistClient("http://test", transport=transport) as c:
        yield c


async def test_save_and_get(client, birthday):
    await client.save_wishlist(birthday)
    assert await client.get_wishlists() == [birthday]


async def test_get_empty(client):
    assert await client.get_wishlists() == []


async def test_save_empty_name_raises_remote_error(client):
    with pytest.raises(RemoteError) as exc_info:
        await client.save_wishlist(Wishlist(name="", items=["x"]))
    assert exc_info.value.status_code == 400
    assert exc_info.value.error_type == "ValidationError"


async def test_delete(client, birthday):
    await client.save_wishlist(birthday)
    await client.delete_wishlist("Birthday")
    assert await client.get_wishlists() == []


async def test_non_json_error_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    async with WishlistClient("http://test", transport=httpx.MockTransport(handler)) as c:
        with pytest.raises(RemoteError) as exc_info:
            await c.get_wishlists()
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "bad gateway"


async def test_malformed_listing():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"items": []}])

    async with WishlistClient("http://test", transport=httpx.MockTransport(handler)) as c:
        with pytest.raises(RemoteError, match="malformed"):
            await c.get_wishlists()


@pytest.mark.parametrize("name", ["a?b", "a#b", "%41", "a/b", "with space", "a&b=c"])
async def test_delete_name_with_url_characters(client, name):
    await client.save_wishlist(Wishlist(name="a", items=["keep"]))
    await client.save_wishlist(Wishlist(name=name, items=["drop"]))

    await client.delete_wishlist(name)

    assert await client.get_wishlists() == [Wishlist(name="a", items=["keep"])]


async def test_roundtrip_name_with_url_characters(client):
    odd = Wishlist(name="?#%41/&", items=["x", ""])
    await client.save_wishlist(odd)
    assert await client.get_wishlists() == [odd]
