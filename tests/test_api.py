"""Tests for the HTTP surface."""

import httpx
import pytest

from wishlists import StorageError, Wishlist, WishlistRepository, WishlistService
from wishlists.api import create_app
from wishlists.config import WishlistSettings
from wishlists.stores import InMemoryStore


@pytest.fixture
def app(service):
    return create_app(service=service)


@pytest.fixture
async def http(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def test_post_then_get(http):
    response = await http.post(
        "/api/wishlists", json={"name": "Birthday", "items": ["Book", "Headphones"]}
    )
    assert response.status_code == 204
    assert response.content == b""

    response = await http.get("/api/wishlists")
    assert response.status_code == 200
    assert response.json() == [{"name": "Birthday", "items": ["Book", "Headphones"]}]


async def test_get_empty(http):
    response = await http.get("/api/wishlists")
    assert response.status_code == 200
    assert response.json() == []


async def test_post_empty_name_is_validation_error(http, store):
    response = await http.post("/api/wishlists", json={"name": "", "items": ["x"]})
    assert response.status_code == 400
    body = response.json()
    assert body["error_type"] == "ValidationError"
    assert "name" in body["error"]
    assert await store.list_keys() == []


async def test_post_malformed_body(http):
    response = await http.post("/api/wishlists", json={"items": "not-a-list"})
    assert response.status_code == 400
    body = response.json()
    assert body["error_type"] == "ValidationError"
    assert "name" in body["error"]


async def test_storage_failure_is_reported():
    class BrokenStore(InMemoryStore):
        async def list_keys(self) -> list[str]:
            raise StorageError("list_keys", "backend unavailable")

    broken = create_app(service=WishlistService(WishlistRepository(BrokenStore())))
    transport = httpx.ASGITransport(app=broken)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/wishlists")
    assert response.status_code == 503
    assert response.json() == {
        "error": "Store error during 'list_keys': backend unavailable",
        "error_type": "StorageError",
    }


async def test_corrupt_record_is_reported(http, store):
    await store.set("broken", "{")
    response = await http.get("/api/wishlists")
    assert response.status_code == 503
    assert response.json()["error_type"] == "CorruptRecordError"


async def test_delete(http, service):
    await service.save(Wishlist(name="Trip", items=["tent"]))
    response = await http.delete("/api/wishlists/Trip")
    assert response.status_code == 204
    assert await service.list_all() == []


async def test_delete_name_with_slash(http, service):
    await service.save(Wishlist(name="a/b"))
    response = await http.delete("/api/wishlists/a/b")
    assert response.status_code == 204
    assert await service.list_all() == []


async def test_app_builds_service_from_settings():
    app = create_app(settings=WishlistSettings(store="memory", key_prefix="wl:"))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            await client.post("/api/wishlists", json={"name": "A", "items": ["x"]})
            response = await client.get("/api/wishlists")
    assert response.json() == [{"name": "A", "items": ["x"]}]
