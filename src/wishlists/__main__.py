# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the wishlists server and maintenance commands.

Usage:
    python -m wishlists serve [--host HOST] [--port PORT]
    python -m wishlists remove-legacy-keys [KEY ...]

Configuration comes from ``WISHLISTS_*`` environment variables (see
:class:`wishlists.config.WishlistSettings`).

Exit codes:
    0: Success
    1: Failure
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import uvicorn

from wishlists.api import create_app
from wishlists.config import WishlistSettings, create_store
from wishlists.exceptions import WishlistError
from wishlists.repository import WishlistRepository
from wishlists.service import LEGACY_KEYS, WishlistService

logger = logging.getLogger("wishlists")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wishlists")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    legacy = commands.add_parser(
        "remove-legacy-keys", help="delete leftover non-wishlist keys from the store"
    )
    legacy.add_argument("keys", nargs="*", default=list(LEGACY_KEYS))
    return parser


async def _remove_legacy_keys(settings: WishlistSettings, keys: list[str]) -> list[str]:
    store = create_store(settings)
    try:
        service = WishlistService(WishlistRepository(store, settings.key_prefix))
        return await service.remove_legacy_keys(keys)
    finally:
        await store.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = _build_parser().parse_args(argv)
    settings = WishlistSettings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "serve":
        uvicorn.run(
            create_app(settings=settings),
            host=args.host or settings.host,
            port=args.port or settings.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    try:
        removed = asyncio.run(_remove_legacy_keys(settings, args.keys))
    except WishlistError as e:
        logger.error("Legacy key cleanup failed: %s", e)
        return 1
    print(f"Removed {len(removed)} key(s): {', '.join(removed) or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
