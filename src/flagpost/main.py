# src/flagpost/main.py
"""ASGI application for the flagpost API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from flagpost.api.exception_handlers import setup_exception_handlers
from flagpost.api.v1 import (
    admin_router,
    files_router,
    posts_router,
    users_router,
    votes_router,
    webhooks_router,
)
from flagpost.core.settings import settings
from flagpost.services.storage import get_storage_client

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    yield
    await get_storage_client().close()


app = FastAPI(
    title="flagpost API",
    description="Verified dating-feedback community API",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(GZipMiddleware)

setup_exception_handlers(app)

for router in (
    users_router,
    files_router,
    posts_router,
    votes_router,
    admin_router,
    webhooks_router,
):
    app.include_router(router, prefix=API_PREFIX)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Service name, version and where the docs live."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("flagpost.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
