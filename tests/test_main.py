"""Tests for the command-line entry point."""

import asyncio

import pytest

pytest.importorskip("aiosqlite")

from wishlists.__main__ import main  # noqa: E402
from wishlists.stores.sqlite import SQLiteStore  # noqa: E402


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = str(tmp_path / "wishlists.db")
    monkeypatch.setenv("WISHLISTS_STORE", "sqlite")
    monkeypatch.setenv("WISHLISTS_SQLITE_PATH", path)
    monkeypatch.delenv("WISHLISTS_KEY_PREFIX", raising=False)
    return path


async def _seed(path: str, entries: dict[str, str]) -> None:
    store = SQLiteStore(path)
    for key, value in entries.items():
        await store.set(key, value)
    await store.close()


async def _keys(path: str) -> list[str]:
    store = SQLiteStore(path)
    try:
        return sorted(await store.list_keys())
    finally:
        await store.close()


def test_remove_legacy_keys_default(db_path, capsys):
    asyncio.run(
        _seed(db_path, {"leptos_site_count": "3", "Birthday": '{"name":"Birthday","items":[]}'})
    )

    assert main(["remove-legacy-keys"]) == 0

    assert "leptos_site_count" in capsys.readouterr().out
    assert asyncio.run(_keys(db_path)) == ["Birthday"]


def test_remove_legacy_keys_explicit(db_path, capsys):
    asyncio.run(_seed(db_path, {"old": "1", "older": "2"}))

    assert main(["remove-legacy-keys", "old"]) == 0

    assert asyncio.run(_keys(db_path)) == ["older"]


def test_remove_legacy_keys_nothing_to_do(db_path, capsys):
    assert main(["remove-legacy-keys"]) == 0
    assert "Removed 0 key(s)" in capsys.readouterr().out
