"""
Accounts business logic.

Scope:
- customer + account CRUD against the local SQLite store
- composed customer view (account + card + loan) for
  `/api/fetchCustomerDetails`
"""

from __future__ import annotations

import asyncio
import logging
import random
import sqlite3

from core.downstream import DownstreamClient
from core.errors import AlreadyExistsError, ResourceNotFoundError

from . import repository
from .schemas import AccountsDto, CardsDto, CustomerDetailsDto, CustomerDto, LoansDto

SAVINGS = "Savings"
ADDRESS = "123 Main Street, New York"

logger = logging.getLogger(__name__)


def _new_account_number() -> int:
    return 1_000_000_000 + random.randint(0, 899_999_999)


def _already_registered(mobile_number: str) -> AlreadyExistsError:
    return AlreadyExistsError(f"Customer already registered with given mobileNumber {mobile_number}")


def _to_accounts_dto(row: dict) -> AccountsDto:
    return AccountsDto(
        account_number=int(row["account_number"]),
        account_type=str(row["account_type"]),
        branch_address=str(row["branch_address"]),
    )


async def _load_customer_and_account(mobile_number: str) -> tuple[dict, dict]:
    customer = await repository.get_customer_by_mobile_number(mobile_number)
    if customer is None:
        raise ResourceNotFoundError("Customer", "mobileNumber", mobile_number)

    account = await repository.get_account_by_customer_id(int(customer["customer_id"]))
    if account is None:
        raise ResourceNotFoundError("Account", "customerId", str(customer["customer_id"]))
    return customer, account


async def create_account(customer: CustomerDto) -> None:
    existing = await repository.get_customer_by_mobile_number(customer.mobile_number)
    if existing is not None:
        raise _already_registered(customer.mobile_number)

    account_number = _new_account_number()
    try:
        customer_id = await repository.create_customer_with_account(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            account_number=account_number,
            account_type=SAVINGS,
            branch_address=ADDRESS,
        )
    except sqlite3.IntegrityError as exc:
        # The UNIQUE mobile_number constraint caught a concurrent create.
        raise _already_registered(customer.mobile_number) from exc
    logger.info("account_created customer_id=%s account_number=%s", customer_id, account_number)


async def fetch_account(mobile_number: str) -> CustomerDto:
    customer, account = await _load_customer_and_account(mobile_number)
    return CustomerDto(
        name=str(customer["name"]),
        email=str(customer["email"]),
        mobile_number=str(customer["mobile_number"]),
        accounts_dto=_to_accounts_dto(account),
    )


async def update_account(customer: CustomerDto) -> bool:
    """
    Update the account named by `accountsDto.accountNumber` and its owner.

    Returns False when the payload carries no account; the caller maps that to 417.
    """
    accounts_dto = customer.accounts_dto
    if accounts_dto is None:
        return False

    account = await repository.get_account_by_number(accounts_dto.account_number)
    if account is None:
        raise ResourceNotFoundError("Account", "AccountNumber", str(accounts_dto.account_number))

    customer_id = int(account["customer_id"])
    if await repository.get_customer_by_id(customer_id) is None:
        raise ResourceNotFoundError("Customer", "CustomerID", str(customer_id))

    other = await repository.get_customer_by_mobile_number(customer.mobile_number)
    if other is not None and int(other["customer_id"]) != customer_id:
        raise _already_registered(customer.mobile_number)

    try:
        await repository.update_account_and_customer(
            account_number=accounts_dto.account_number,
            account_type=accounts_dto.account_type,
            branch_address=accounts_dto.branch_address,
            customer_id=customer_id,
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
        )
    except sqlite3.IntegrityError as exc:
        raise _already_registered(customer.mobile_number) from exc
    return True


async def delete_account(mobile_number: str) -> bool:
    customer = await repository.get_customer_by_mobile_number(mobile_number)
    if customer is None:
        raise ResourceNotFoundError("Customer", "mobileNumber", mobile_number)

    await repository.delete_customer_and_accounts(int(customer["customer_id"]))
    return True


async def fetch_customer_details(
    mobile_number: str,
    *,
    correlation_id: str,
    cards_client: DownstreamClient[CardsDto],
    loans_client: DownstreamClient[LoansDto],
) -> CustomerDetailsDto:
    customer, account = await _load_customer_and_account(mobile_number)

    # Both lookups are independent; a failed one only blanks its own section.
    cards, loans = await asyncio.gather(
        cards_client.fetch(correlation_id, mobile_number),
        loans_client.fetch(correlation_id, mobile_number),
    )

    return CustomerDetailsDto(
        name=str(customer["name"]),
        email=str(customer["email"]),
        mobile_number=str(customer["mobile_number"]),
        accounts_dto=_to_accounts_dto(account),
        cards_dto=cards.value,
        loans_dto=loans.value,
    )
