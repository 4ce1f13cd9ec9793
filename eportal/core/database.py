# eportal/core/database.py

import ssl
from typing import Any, AsyncGenerator

from loguru import logger
from sqlmodel import SQLModel
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)
from sqlalchemy.pool import NullPool, StaticPool

from eportal.core.config import settings

DATABASE_URL = settings.DATABASE_URL

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL is not set")


# ----------------------------------------------------
# SSL for managed Postgres (Supabase pooler etc.)
# ----------------------------------------------------
def make_ssl():
    ctx = ssl.create_default_context()
    if not settings.DB_SSL_VERIFY:
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
    return ctx


def _is_sqlite_memory(url) -> bool:
    database = (url.database or "").strip()
    return database in {"", ":memory:"} or database.startswith("file::memory:")


def build_engine_kwargs(database_url: str) -> dict[str, Any]:
    url = make_url(database_url)
    kwargs: dict[str, Any] = {"echo": False, "future": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(url):
            # one shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs["pool_pre_ping"] = True
    if settings.DB_POOLER_MODE:
        kwargs["poolclass"] = NullPool
        kwargs["connect_args"] = {
            "ssl": make_ssl(),
            "statement_cache_size": 0,            # disable prepared statements
            "prepared_statement_name_func": None  # prevent SQLAlchemy from naming statements
        }
    return kwargs


# ----------------------------------------------------
# Engine
# ----------------------------------------------------
engine = create_async_engine(DATABASE_URL, **build_engine_kwargs(DATABASE_URL))


# ----------------------------------------------------
# Sessions
# ----------------------------------------------------
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


# ----------------------------------------------------
# Create / drop tables
# ----------------------------------------------------
async def init_db():
    # every table module must be imported before create_all
    import eportal.models.registry  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def drop_db():
    import eportal.models.registry  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


# ----------------------------------------------------
# Test Connection
# ----------------------------------------------------
async def test_connection():
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.debug("DB connection OK")
