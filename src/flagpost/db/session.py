"""Engine, session factory and the request-scoped session dependency."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from flagpost.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Model modules must be imported before create_all so their tables are registered.
import flagpost.models  # noqa: E402,F401


def _engine_kwargs(url: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"echo": settings.sql_debug}
    if url.startswith("sqlite"):
        # Requests are served from a threadpool.
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
    return kwargs


engine = create_engine(
    settings.effective_database_url,
    **_engine_kwargs(settings.effective_database_url),
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and always close it."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
