"""
Loans API schemas.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from core.schemas import MOBILE_NUMBER_MESSAGE, MOBILE_NUMBER_PATTERN, CamelModel

LOAN_NUMBER_PATTERN = r"^$|^[0-9]{12}$"


class LoansDto(CamelModel):
    mobile_number: str
    loan_number: str
    loan_type: str = Field(..., min_length=1)
    total_loan: int = Field(..., gt=0)
    amount_paid: int = Field(..., ge=0)
    outstanding_amount: int = Field(..., ge=0)

    @field_validator("mobile_number")
    @classmethod
    def _check_mobile_number(cls, value: str) -> str:
        if not re.match(MOBILE_NUMBER_PATTERN, value):
            raise ValueError(MOBILE_NUMBER_MESSAGE)
        return value

    @field_validator("loan_number")
    @classmethod
    def _check_loan_number(cls, value: str) -> str:
        if not re.match(LOAN_NUMBER_PATTERN, value):
            raise ValueError("LoanNumber must be 12 digits")
        return value
