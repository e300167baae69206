"""
Shared request parameters for FastAPI routes.
"""

from __future__ import annotations

import re

from fastapi import Query

from .errors import invalid_field
from .schemas import MOBILE_NUMBER_MESSAGE, MOBILE_NUMBER_PATTERN


def mobile_number_query(mobile_number: str = Query(..., alias="mobileNumber")) -> str:
    if not re.match(MOBILE_NUMBER_PATTERN, mobile_number):
        raise invalid_field("query", "mobileNumber", mobile_number, MOBILE_NUMBER_MESSAGE)
    return mobile_number
