"""
Loans API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from core.correlation import get_correlation_id
from core.params import mobile_number_query
from core.schemas import (
    MESSAGE_200,
    MESSAGE_417_DELETE,
    MESSAGE_417_UPDATE,
    STATUS_200,
    STATUS_201,
    STATUS_417,
    ResponseDto,
    status_response,
)

from . import service
from .schemas import LoansDto

MESSAGE_201 = "Loan created successfully"

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=ResponseDto)
async def create_loan(mobile_number: str = Depends(mobile_number_query)) -> JSONResponse:
    await service.create_loan(mobile_number)
    return status_response(status.HTTP_201_CREATED, STATUS_201, MESSAGE_201)


@router.get("/fetch", response_model=LoansDto)
async def fetch_loan(
    mobile_number: str = Depends(mobile_number_query),
    correlation_id: str = Depends(get_correlation_id),
) -> LoansDto:
    logger.debug("fetch_loan correlation_id=%s", correlation_id)
    return await service.fetch_loan(mobile_number)


@router.put("/update", response_model=ResponseDto)
async def update_loan(loans: LoansDto) -> JSONResponse:
    if await service.update_loan(loans):
        return status_response(status.HTTP_200_OK, STATUS_200, MESSAGE_200)
    return status_response(status.HTTP_417_EXPECTATION_FAILED, STATUS_417, MESSAGE_417_UPDATE)


@router.delete("/delete", response_model=ResponseDto)
async def delete_loan(mobile_number: str = Depends(mobile_number_query)) -> JSONResponse:
    if await service.delete_loan(mobile_number):
        return status_response(status.HTTP_200_OK, STATUS_200, MESSAGE_200)
    return status_response(status.HTTP_417_EXPECTATION_FAILED, STATUS_417, MESSAGE_417_DELETE)
