# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""FastAPI application exposing the wishlist service over HTTP."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wishlists.config import WishlistSettings, create_store
from wishlists.exceptions import StorageError, ValidationError
from wishlists.models import Wishlist
from wishlists.repository import WishlistRepository
from wishlists.service import WishlistService

logger = logging.getLogger(__name__)

router = APIRouter()


class ErrorResponse(BaseModel):
    """Body returned for every failed call."""

    error: str
    error_type: str


def get_service(request: Request) -> WishlistService:
    service: WishlistService = request.app.state.service
    return service


@router.post("/wishlists", status_code=status.HTTP_204_NO_CONTENT)
async def save_wishlist(
    wishlist: Wishlist,
    service: WishlistService = Depends(get_service),
) -> Response:
    """Create or replace a wishlist."""
    await service.save(wishlist)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/wishlists", response_model=list[Wishlist])
async def get_wishlists(
    service: WishlistService = Depends(get_service),
) -> list[Wishlist]:
    """Return all wishlists in store enumeration order."""
    return await service.list_all()


@router.delete("/wishlists/{name:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wishlist(
    name: str,
    service: WishlistService = Depends(get_service),
) -> Response:
    await service.delete(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    body = ErrorResponse(error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc)


async def _request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=detail, error_type="ValidationError").model_dump(),
    )


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


def create_app(
    service: WishlistService | None = None,
    settings: WishlistSettings | None = None,
) -> FastAPI:
    """Build the application.

    Parameters:
        service:  Service to serve requests with.  When omitted, one is built
                  at startup from *settings* and its store is closed at
                  shutdown.
        settings: Configuration used when *service* is omitted.  Defaults to
                  the environment.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if service is not None:
            app.state.service = service
            yield
            return

        resolved = settings or WishlistSettings()
        store = create_store(resolved)
        app.state.service = WishlistService(WishlistRepository(store, resolved.key_prefix))
        logger.info("Serving wishlists from %s store", resolved.store)
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(title="Wishlists", lifespan=lifespan)
    if service is not None:
        app.state.service = service
    app.include_router(router, prefix="/api")
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    return app
