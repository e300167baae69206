"""
Accounts persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

AUDIT_USER = "ACCOUNTS_MS"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS customer (
    customer_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    mobile_number TEXT NOT NULL UNIQUE,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    created_by TEXT NOT NULL,
    updated_at TEXT,
    updated_by TEXT
);

CREATE TABLE IF NOT EXISTS accounts (
    account_number INTEGER PRIMARY KEY,
    customer_id INTEGER NOT NULL REFERENCES customer (customer_id),
    account_type TEXT NOT NULL,
    branch_address TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    created_by TEXT NOT NULL,
    updated_at TEXT,
    updated_by TEXT
);

CREATE INDEX IF NOT EXISTS idx_accounts_customer_id ON accounts (customer_id);
"""


async def get_customer_by_mobile_number(mobile_number: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT customer_id, name, email, mobile_number, created_at, updated_at
        FROM customer
        WHERE mobile_number = ?
        """,
        mobile_number,
    )


async def get_customer_by_id(customer_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT customer_id, name, email, mobile_number, created_at, updated_at
        FROM customer
        WHERE customer_id = ?
        """,
        customer_id,
    )


async def get_account_by_customer_id(customer_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT account_number, customer_id, account_type, branch_address
        FROM accounts
        WHERE customer_id = ?
        ORDER BY account_number
        LIMIT 1
        """,
        customer_id,
    )


async def get_account_by_number(account_number: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT account_number, customer_id, account_type, branch_address
        FROM accounts
        WHERE account_number = ?
        """,
        account_number,
    )


async def create_customer_with_account(
    *,
    name: str,
    email: str,
    mobile_number: str,
    account_number: int,
    account_type: str,
    branch_address: str,
) -> int:
    """
    Insert a customer and its first account atomically. Returns the customer id.
    """
    async with db.transaction() as conn:
        cursor = await conn.execute(
            """
            INSERT INTO customer (name, email, mobile_number, created_by)
            VALUES (?, ?, ?, ?)
            """,
            (name, email, mobile_number, AUDIT_USER),
        )
        customer_id = int(cursor.lastrowid)
        await conn.execute(
            """
            INSERT INTO accounts (account_number, customer_id, account_type, branch_address, created_by)
            VALUES (?, ?, ?, ?, ?)
            """,
            (account_number, customer_id, account_type, branch_address, AUDIT_USER),
        )
    return customer_id


async def update_account_and_customer(
    *,
    account_number: int,
    account_type: str,
    branch_address: str,
    customer_id: int,
    name: str,
    email: str,
    mobile_number: str,
) -> None:
    async with db.transaction() as conn:
        await conn.execute(
            """
            UPDATE accounts
            SET account_type = ?,
                branch_address = ?,
                updated_at = CURRENT_TIMESTAMP,
                updated_by = ?
            WHERE account_number = ?
            """,
            (account_type, branch_address, AUDIT_USER, account_number),
        )
        await conn.execute(
            """
            UPDATE customer
            SET name = ?,
                email = ?,
                mobile_number = ?,
                updated_at = CURRENT_TIMESTAMP,
                updated_by = ?
            WHERE customer_id = ?
            """,
            (name, email, mobile_number, AUDIT_USER, customer_id),
        )


async def delete_customer_and_accounts(customer_id: int) -> None:
    async with db.transaction() as conn:
        await conn.execute("DELETE FROM accounts WHERE customer_id = ?", (customer_id,))
        await conn.execute("DELETE FROM customer WHERE customer_id = ?", (customer_id,))
