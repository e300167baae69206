"""
Accounts API schemas (request/response models).

`CardsDto` and `LoansDto` here are the accounts service's own view of what
the cards and loans services return. They are decode-only: every field is
optional and nothing is validated, so a downstream adding or omitting a
field does not turn a found record into a failed lookup.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from core.schemas import MOBILE_NUMBER_MESSAGE, MOBILE_NUMBER_PATTERN, CamelModel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AccountsDto(CamelModel):
    account_number: int = Field(..., ge=0)
    account_type: str = Field(..., min_length=1)
    branch_address: str = Field(..., min_length=1)


class CustomerDto(CamelModel):
    name: str
    email: str
    mobile_number: str
    accounts_dto: AccountsDto | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not 5 <= len(value) <= 30:
            raise ValueError("The length of the customer name should be between 5 and 30")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Email address should be a valid value")
        return value

    @field_validator("mobile_number")
    @classmethod
    def _check_mobile_number(cls, value: str) -> str:
        if not re.match(MOBILE_NUMBER_PATTERN, value):
            raise ValueError(MOBILE_NUMBER_MESSAGE)
        return value


class CardsDto(CamelModel):
    mobile_number: str | None = None
    card_number: str | None = None
    card_type: str | None = None
    total_limit: int | None = None
    amount_used: int | None = None
    available_amount: int | None = None


class LoansDto(CamelModel):
    mobile_number: str | None = None
    loan_number: str | None = None
    loan_type: str | None = None
    total_loan: int | None = None
    amount_paid: int | None = None
    outstanding_amount: int | None = None


class CustomerDetailsDto(CamelModel):
    name: str
    email: str
    mobile_number: str
    accounts_dto: AccountsDto | None = None
    cards_dto: CardsDto | None = None
    loans_dto: LoansDto | None = None
