# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runtime configuration, read from ``WISHLISTS_*`` environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from wishlists.stores.base import KeyValueStore
from wishlists.stores.memory import InMemoryStore


class WishlistSettings(BaseSettings):
    """Settings for the server and the CLI.

    Attributes:
        store:       Store type (``"memory"`` or ``"sqlite"``).
        sqlite_path: Path to the SQLite database file (for ``sqlite``).
        key_prefix:  Prefix prepended to wishlist names to form store keys.
        host:        Interface the HTTP server binds to.
        port:        Port the HTTP server listens on.
        log_level:   Root logging level.
    """

    model_config = SettingsConfigDict(env_prefix="WISHLISTS_", env_file=".env", extra="ignore")

    store: Literal["memory", "sqlite"] = "memory"
    sqlite_path: str = "wishlists.db"
    key_prefix: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def create_store(settings: WishlistSettings) -> KeyValueStore:
    """Build the store backend named by *settings*."""
    if settings.store == "sqlite":
        from wishlists.stores.sqlite import SQLiteStore

        return SQLiteStore(settings.sqlite_path)
    return InMemoryStore()
