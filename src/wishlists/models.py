"""Wishlist — the single persisted entity."""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter


class Wishlist(BaseModel):
    """A named, ordered collection of item strings.

    Attributes:
        name:  Identifier of the wishlist.  Also used as its store key, so
               saving twice under the same name replaces the first value.
        items: Items in submission order.  Duplicates and empty strings
               are kept as-is.
    """

    name: str
    items: list[str] = Field(default_factory=list)


WishlistList = TypeAdapter(list[Wishlist])
