"""Shared test fixtures."""

import pytest

from wishlists import Wishlist, WishlistRepository, WishlistService
from wishlists.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def repository(store):
    return WishlistRepository(store)


@pytest.fixture
def service(repository):
    return WishlistService(repository)


@pytest.fixture
def birthday():
    return Wishlist(name="Birthday", items=["Book", "Headphones"])
