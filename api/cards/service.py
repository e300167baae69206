"""
Cards business logic.
"""

from __future__ import annotations

import logging
import random
import sqlite3

from core.errors import AlreadyExistsError, ResourceNotFoundError

from . import repository
from .schemas import CardsDto

CREDIT_CARD = "Credit Card"
NEW_CARD_LIMIT = 100_000

logger = logging.getLogger(__name__)


def _new_card_number() -> str:
    return str(100_000_000_000 + random.randint(0, 899_999_999))


def _to_cards_dto(row: dict) -> CardsDto:
    return CardsDto(
        mobile_number=str(row["mobile_number"]),
        card_number=str(row["card_number"]),
        card_type=str(row["card_type"]),
        total_limit=int(row["total_limit"]),
        amount_used=int(row["amount_used"]),
        available_amount=int(row["available_amount"]),
    )


def _already_registered(mobile_number: str) -> AlreadyExistsError:
    return AlreadyExistsError(f"Card already registered with given mobileNumber {mobile_number}")


async def create_card(mobile_number: str) -> None:
    if await repository.get_card_by_mobile_number(mobile_number) is not None:
        raise _already_registered(mobile_number)

    card_number = _new_card_number()
    try:
        await repository.insert_card(
            mobile_number=mobile_number,
            card_number=card_number,
            card_type=CREDIT_CARD,
            total_limit=NEW_CARD_LIMIT,
            amount_used=0,
            available_amount=NEW_CARD_LIMIT,
        )
    except sqlite3.IntegrityError as exc:
        # Lost a race with a concurrent create for the same mobile number.
        raise _already_registered(mobile_number) from exc
    logger.info("card_created card_number=%s", card_number)


async def fetch_card(mobile_number: str) -> CardsDto:
    row = await repository.get_card_by_mobile_number(mobile_number)
    if row is None:
        raise ResourceNotFoundError("Card", "mobileNumber", mobile_number)
    return _to_cards_dto(row)


async def update_card(cards: CardsDto) -> bool:
    row = await repository.get_card_by_number(cards.card_number)
    if row is None:
        raise ResourceNotFoundError("Card", "CardNumber", cards.card_number)

    try:
        updated = await repository.update_card(
            int(row["card_id"]),
            mobile_number=cards.mobile_number,
            card_number=cards.card_number,
            card_type=cards.card_type,
            total_limit=cards.total_limit,
            amount_used=cards.amount_used,
            available_amount=cards.available_amount,
        )
    except sqlite3.IntegrityError as exc:
        raise _already_registered(cards.mobile_number) from exc
    return updated > 0


async def delete_card(mobile_number: str) -> bool:
    row = await repository.get_card_by_mobile_number(mobile_number)
    if row is None:
        raise ResourceNotFoundError("Card", "mobileNumber", mobile_number)
    return await repository.delete_card(int(row["card_id"])) > 0
