"""
Loans persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

AUDIT_USER = "LOANS_MS"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS loans (
    loan_id INTEGER PRIMARY KEY AUTOINCREMENT,
    mobile_number TEXT NOT NULL UNIQUE,
    loan_number TEXT NOT NULL UNIQUE,
    loan_type TEXT NOT NULL,
    total_loan INTEGER NOT NULL,
    amount_paid INTEGER NOT NULL,
    outstanding_amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    created_by TEXT NOT NULL,
    updated_at TEXT,
    updated_by TEXT
);
"""

_COLUMNS = "loan_id, mobile_number, loan_number, loan_type, total_loan, amount_paid, outstanding_amount"


async def get_loan_by_mobile_number(mobile_number: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM loans
        WHERE mobile_number = ?
        ORDER BY loan_id
        LIMIT 1
        """,
        mobile_number,
    )


async def get_loan_by_number(loan_number: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM loans
        WHERE loan_number = ?
        """,
        loan_number,
    )


async def insert_loan(
    *,
    mobile_number: str,
    loan_number: str,
    loan_type: str,
    total_loan: int,
    amount_paid: int,
    outstanding_amount: int,
) -> int:
    return await db.insert(
        """
        INSERT INTO loans (
            mobile_number, loan_number, loan_type,
            total_loan, amount_paid, outstanding_amount, created_by
        )
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        mobile_number,
        loan_number,
        loan_type,
        total_loan,
        amount_paid,
        outstanding_amount,
        AUDIT_USER,
    )


async def update_loan(
    loan_id: int,
    *,
    mobile_number: str,
    loan_number: str,
    loan_type: str,
    total_loan: int,
    amount_paid: int,
    outstanding_amount: int,
) -> int:
    return await db.execute(
        """
        UPDATE loans
        SET mobile_number = ?,
            loan_number = ?,
            loan_type = ?,
            total_loan = ?,
            amount_paid = ?,
            outstanding_amount = ?,
            updated_at = CURRENT_TIMESTAMP,
            updated_by = ?
        WHERE loan_id = ?
        """,
        mobile_number,
        loan_number,
        loan_type,
        total_loan,
        amount_paid,
        outstanding_amount,
        AUDIT_USER,
        loan_id,
    )


async def delete_loan(loan_id: int) -> int:
    return await db.execute("DELETE FROM loans WHERE loan_id = ?", loan_id)
