"""
wishlists — Hello World

A wishlist is saved whole under its name and listed back by enumerating
the store.  This script runs the HTTP app in-process and drives it through
the client view, the same way a browser page would.
"""

import asyncio

import httpx

from wishlists import WishlistRepository, WishlistService
from wishlists.api import create_app
from wishlists.client import WishlistClient, WishlistView
from wishlists.stores import InMemoryStore


async def main():
    # ──────────────────────────────────────
    #  1. Server side: store → repository → service → app
    # ──────────────────────────────────────
    service = WishlistService(WishlistRepository(InMemoryStore()))
    app = create_app(service=service)

    # ──────────────────────────────────────
    #  2. Client side: the view talks HTTP to the app
    # ──────────────────────────────────────
    transport = httpx.ASGITransport(app=app)
    async with WishlistClient("http://wishlists.local", transport=transport) as client:
        view = WishlistView(client)
        view.mount()
        print("mounted:        ", view.render())

        await view.resource.load()
        print("loaded:         ", view.render())

        # ── submit the form (fire-and-forget) ──
        view.form.name_input.value = "Birthday"
        view.form.items_input.value = "Book,Headphones"
        task = view.form.on_submit()
        print("submitted, done?", task.done())

        await task
        await view.resource.load()
        print("after save:     ", view.render())

        for wishlist in view.rows().values():
            print(f"  {wishlist.name}: {', '.join(wishlist.items)}")


if __name__ == "__main__":
    asyncio.run(main())
