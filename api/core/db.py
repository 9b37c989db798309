"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure leaves this module as `DataSourceError`, so feature code
only has one exception type to care about.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from core import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


class DataSourceError(RuntimeError):
    pass


_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = config.env_str("DATABASE_URL", "")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=config.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=config.env_int("DB_COMMAND_TIMEOUT_S", 30),
    )
    logger.info("db_pool_ready")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise DataSourceError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        # pool.fetchrow acquires a connection and releases it on exit
        row = await pool().fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DataSourceError(f"Query failed: {exc}") from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DataSourceError(f"Query failed: {exc}") from exc
    return [_record_to_dict(r) for r in rows]
