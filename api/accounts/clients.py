"""
Downstream clients used by the accounts service to compose customer details.
"""

from __future__ import annotations

from fastapi import FastAPI, Request

from core import config
from core.downstream import DownstreamClient

from .schemas import CardsDto, LoansDto


async def attach_clients(app: FastAPI) -> None:
    """
    Startup hook: build one client per downstream on top of the shared pool.
    """
    app.state.cards_client = DownstreamClient(config.cards_reference(), CardsDto, app.state.http)
    app.state.loans_client = DownstreamClient(config.loans_reference(), LoansDto, app.state.http)


def get_cards_client(request: Request) -> DownstreamClient[CardsDto]:
    return request.app.state.cards_client


def get_loans_client(request: Request) -> DownstreamClient[LoansDto]:
    return request.app.state.loans_client
