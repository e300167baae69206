"""
Cards API schemas.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from core.schemas import MOBILE_NUMBER_MESSAGE, MOBILE_NUMBER_PATTERN, CamelModel

CARD_NUMBER_PATTERN = r"^$|^[0-9]{12}$"


class CardsDto(CamelModel):
    mobile_number: str
    card_number: str
    card_type: str = Field(..., min_length=1)
    total_limit: int = Field(..., gt=0)
    amount_used: int = Field(..., ge=0)
    available_amount: int = Field(..., ge=0)

    @field_validator("mobile_number")
    @classmethod
    def _check_mobile_number(cls, value: str) -> str:
        if not re.match(MOBILE_NUMBER_PATTERN, value):
            raise ValueError(MOBILE_NUMBER_MESSAGE)
        return value

    @field_validator("card_number")
    @classmethod
    def _check_card_number(cls, value: str) -> str:
        if not re.match(CARD_NUMBER_PATTERN, value):
            raise ValueError("CardNumber must be 12 digits")
        return value
