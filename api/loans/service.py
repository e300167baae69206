"""
Loans business logic.
"""

from __future__ import annotations

import logging
import random
import sqlite3

from core.errors import AlreadyExistsError, ResourceNotFoundError

from . import repository
from .schemas import LoansDto

HOME_LOAN = "Home Loan"
NEW_LOAN_AMOUNT = 100_000

logger = logging.getLogger(__name__)


def _new_loan_number() -> str:
    return str(100_000_000_000 + random.randint(0, 899_999_999))


def _to_loans_dto(row: dict) -> LoansDto:
    return LoansDto(
        mobile_number=str(row["mobile_number"]),
        loan_number=str(row["loan_number"]),
        loan_type=str(row["loan_type"]),
        total_loan=int(row["total_loan"]),
        amount_paid=int(row["amount_paid"]),
        outstanding_amount=int(row["outstanding_amount"]),
    )


def _already_registered(mobile_number: str) -> AlreadyExistsError:
    return AlreadyExistsError(f"Loan already registered with given mobileNumber {mobile_number}")


async def create_loan(mobile_number: str) -> None:
    if await repository.get_loan_by_mobile_number(mobile_number) is not None:
        raise _already_registered(mobile_number)

    loan_number = _new_loan_number()
    try:
        await repository.insert_loan(
            mobile_number=mobile_number,
            loan_number=loan_number,
            loan_type=HOME_LOAN,
            total_loan=NEW_LOAN_AMOUNT,
            amount_paid=0,
            outstanding_amount=NEW_LOAN_AMOUNT,
        )
    except sqlite3.IntegrityError as exc:
        # Lost a race with a concurrent create for the same mobile number.
        raise _already_registered(mobile_number) from exc
    logger.info("loan_created loan_number=%s", loan_number)


async def fetch_loan(mobile_number: str) -> LoansDto:
    row = await repository.get_loan_by_mobile_number(mobile_number)
    if row is None:
        raise ResourceNotFoundError("Loan", "mobileNumber", mobile_number)
    return _to_loans_dto(row)


async def update_loan(loans: LoansDto) -> bool:
    row = await repository.get_loan_by_number(loans.loan_number)
    if row is None:
        raise ResourceNotFoundError("Loan", "LoanNumber", loans.loan_number)

    try:
        updated = await repository.update_loan(
            int(row["loan_id"]),
            mobile_number=loans.mobile_number,
            loan_number=loans.loan_number,
            loan_type=loans.loan_type,
            total_loan=loans.total_loan,
            amount_paid=loans.amount_paid,
            outstanding_amount=loans.outstanding_amount,
        )
    except sqlite3.IntegrityError as exc:
        raise _already_registered(loans.mobile_number) from exc
    return updated > 0


async def delete_loan(mobile_number: str) -> bool:
    row = await repository.get_loan_by_mobile_number(mobile_number)
    if row is None:
        raise ResourceNotFoundError("Loan", "mobileNumber", mobile_number)
    return await repository.delete_loan(int(row["loan_id"])) > 0
