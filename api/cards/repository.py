"""
Cards persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

AUDIT_USER = "CARDS_MS"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS cards (
    card_id INTEGER PRIMARY KEY AUTOINCREMENT,
    mobile_number TEXT NOT NULL UNIQUE,
    card_number TEXT NOT NULL UNIQUE,
    card_type TEXT NOT NULL,
    total_limit INTEGER NOT NULL,
    amount_used INTEGER NOT NULL,
    available_amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    created_by TEXT NOT NULL,
    updated_at TEXT,
    updated_by TEXT
);
"""

_COLUMNS = "card_id, mobile_number, card_number, card_type, total_limit, amount_used, available_amount"


async def get_card_by_mobile_number(mobile_number: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM cards
        WHERE mobile_number = ?
        ORDER BY card_id
        LIMIT 1
        """,
        mobile_number,
    )


async def get_card_by_number(card_number: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM cards
        WHERE card_number = ?
        """,
        card_number,
    )


async def insert_card(
    *,
    mobile_number: str,
    card_number: str,
    card_type: str,
    total_limit: int,
    amount_used: int,
    available_amount: int,
) -> int:
    return await db.insert(
        """
        INSERT INTO cards (
            mobile_number, card_number, card_type,
            total_limit, amount_used, available_amount, created_by
        )
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        mobile_number,
        card_number,
        card_type,
        total_limit,
        amount_used,
        available_amount,
        AUDIT_USER,
    )


async def update_card(
    card_id: int,
    *,
    mobile_number: str,
    card_number: str,
    card_type: str,
    total_limit: int,
    amount_used: int,
    available_amount: int,
) -> int:
    return await db.execute(
        """
        UPDATE cards
        SET mobile_number = ?,
            card_number = ?,
            card_type = ?,
            total_limit = ?,
            amount_used = ?,
            available_amount = ?,
            updated_at = CURRENT_TIMESTAMP,
            updated_by = ?
        WHERE card_id = ?
        """,
        mobile_number,
        card_number,
        card_type,
        total_limit,
        amount_used,
        available_amount,
        AUDIT_USER,
        card_id,
    )


async def delete_card(card_id: int) -> int:
    return await db.execute("DELETE FROM cards WHERE card_id = ?", card_id)
