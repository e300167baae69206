"""
Accounts API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from core.correlation import get_correlation_id
from core.downstream import DownstreamClient
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

from . import clients, service
from .schemas import CardsDto, CustomerDetailsDto, CustomerDto, LoansDto

MESSAGE_201 = "Account created successfully"

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=ResponseDto)
async def create_account(customer: CustomerDto) -> JSONResponse:
    await service.create_account(customer)
    return status_response(status.HTTP_201_CREATED, STATUS_201, MESSAGE_201)


@router.get("/fetch", response_model=CustomerDto)
async def fetch_account(mobile_number: str = Depends(mobile_number_query)) -> CustomerDto:
    return await service.fetch_account(mobile_number)


@router.put("/update", response_model=ResponseDto)
async def update_account(customer: CustomerDto) -> JSONResponse:
    if await service.update_account(customer):
        return status_response(status.HTTP_200_OK, STATUS_200, MESSAGE_200)
    return status_response(status.HTTP_417_EXPECTATION_FAILED, STATUS_417, MESSAGE_417_UPDATE)


@router.delete("/delete", response_model=ResponseDto)
async def delete_account(mobile_number: str = Depends(mobile_number_query)) -> JSONResponse:
    if await service.delete_account(mobile_number):
        return status_response(status.HTTP_200_OK, STATUS_200, MESSAGE_200)
    return status_response(status.HTTP_417_EXPECTATION_FAILED, STATUS_417, MESSAGE_417_DELETE)


@router.get("/fetchCustomerDetails", response_model=CustomerDetailsDto)
async def fetch_customer_details(
    mobile_number: str = Depends(mobile_number_query),
    correlation_id: str = Depends(get_correlation_id),
    cards_client: DownstreamClient[CardsDto] = Depends(clients.get_cards_client),
    loans_client: DownstreamClient[LoansDto] = Depends(clients.get_loans_client),
) -> CustomerDetailsDto:
    logger.debug("fetch_customer_details correlation_id=%s", correlation_id)
    return await service.fetch_customer_details(
        mobile_number,
        correlation_id=correlation_id,
        cards_client=cards_client,
        loans_client=loans_client,
    )
