"""
Wire models shared by all services.

Fields are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STATUS_200 = "200"
MESSAGE_200 = "Request processed successfully"
STATUS_201 = "201"
STATUS_417 = "417"
MESSAGE_417_UPDATE = "Update operation failed. Please contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please contact Dev team"

MOBILE_NUMBER_PATTERN = r"^$|^[0-9]{10}$"
MOBILE_NUMBER_MESSAGE = "Mobile number must be 10 digits"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseDto(CamelModel):
    status_code: str
    status_msg: str


class ErrorResponseDto(CamelModel):
    api_path: str
    error_code: int
    error_message: str
    error_time: datetime


class ContactDetails(CamelModel):
    name: str
    email: str


class ContactInfoDto(CamelModel):
    message: str
    contact_details: ContactDetails
    on_call_support: list[str] = Field(default_factory=list)


def status_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ResponseDto(status_code=code, status_msg=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))
