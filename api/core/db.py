"""
SQLite persistence for a single service, on top of aiosqlite.

There is no pool. `init_db` records the file path and applies the schema;
after that every helper below opens a short-lived connection, runs its
statement(s) and closes it again. SQLite serialises writers on the file
lock, so a writer that finds the file busy waits up to CONNECT_TIMEOUT_S.

Statements take qmark parameters, passed positionally after the SQL.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aiosqlite

_database_path: str | None = None

CONNECT_TIMEOUT_S = 30.0


async def init_db(path: str, schema_sql: str) -> None:
    global _database_path
    _database_path = path
    async with _connect() as conn:
        await conn.executescript(schema_sql)
        await conn.commit()


async def close_db() -> None:
    global _database_path
    _database_path = None


def database_path() -> str:
    if _database_path is None:
        raise RuntimeError("Database is not initialized. Call init_db() on startup.")
    return _database_path


@asynccontextmanager
async def _connect() -> AsyncIterator[aiosqlite.Connection]:
    async with aiosqlite.connect(database_path(), timeout=CONNECT_TIMEOUT_S) as conn:
        conn.row_factory = aiosqlite.Row
        await conn.execute("PRAGMA foreign_keys = ON")
        yield conn


def _row_to_dict(row: aiosqlite.Row) -> dict[str, Any]:
    return dict(row)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """First matching row as a plain dict, or None when nothing matched."""
    async with _connect() as conn:
        async with conn.execute(sql, args) as cursor:
            row = await cursor.fetchone()
    return _row_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """Every matching row, materialised before the connection closes."""
    async with _connect() as conn:
        async with conn.execute(sql, args) as cursor:
            rows = await cursor.fetchall()
    return [_row_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> int:
    """Apply one write on its own connection; the rowcount tells callers whether anything matched."""
    async with _connect() as conn:
        cursor = await conn.execute(sql, args)
        await conn.commit()
        return cursor.rowcount


async def insert(sql: str, *args: Any) -> int:
    """
    Run an INSERT and commit. Returns the new rowid.
    """
    async with _connect() as conn:
        cursor = await conn.execute(sql, args)
        await conn.commit()
        return int(cursor.lastrowid)


@asynccontextmanager
async def transaction() -> AsyncIterator[aiosqlite.Connection]:
    """
    One connection for several statements; commit on success, rollback on error.
    """
    async with _connect() as conn:
        try:
            yield conn
        except BaseException:
            await conn.rollback()
            raise
        await conn.commit()
