"""SQLiteStore — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import asyncio

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteStore requires the 'aiosqlite' package. "
        "Install it with: pip install wishlists[sqlite]"
    ) from exc

from wishlists.exceptions import StorageError
from wishlists.stores.base import KeyValueStore

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS kv_store (
    key   TEXT NOT NULL PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteStore(KeyValueStore):
    """Persistent store backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "wishlists.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None
        self._connect_lock = asyncio.Lock()

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is not None:
            return self._db
        async with self._connect_lock:
            # Another caller may have connected while this one waited.
            if self._db is None:
                self._db = await self._open()
        return self._db

    async def _open(self) -> aiosqlite.Connection:
        try:
            db = await aiosqlite.connect(self._db_path)
        except aiosqlite.Error as e:
            raise StorageError("connect", str(e)) from e
        try:
            await db.execute(_CREATE_TABLE)
            await db.commit()
        except aiosqlite.Error as e:
            await db.close()
            raise StorageError("connect", str(e)) from e
        return db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── KeyValueStore protocol ───────────────────────────────

    async def get(self, key: str) -> str | None:
        db = await self._connect()
        try:
            cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError("get", str(e)) from e
        if row is None:
            return None
        value: str = row[0]
        return value

    async def set(self, key: str, value: str) -> None:
        db = await self._connect()
        try:
            await db.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (key, value),
            )
            await db.commit()
        except aiosqlite.Error as e:
            raise StorageError("set", str(e)) from e

    async def delete(self, key: str) -> None:
        db = await self._connect()
        try:
            await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            await db.commit()
        except aiosqlite.Error as e:
            raise StorageError("delete", str(e)) from e

    async def list_keys(self) -> list[str]:
        db = await self._connect()
        try:
            cursor = await db.execute("SELECT key FROM kv_store")
            rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StorageError("list_keys", str(e)) from e
        return [row[0] for row in rows]
