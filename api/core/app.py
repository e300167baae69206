"""
FastAPI application factory shared by the accounts, cards and loans services.

Each service's `main.py` only names itself, its schema and its routers; the
wiring below (DB lifecycle, shared HTTP client, correlation ids, error
handlers, health/info endpoints) is identical across services.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from contextlib import asynccontextmanager

import httpx
from fastapi import APIRouter, FastAPI
from fastapi.responses import PlainTextResponse

from . import config, db
from .correlation import CorrelationIdMiddleware
from .errors import register_exception_handlers
from .logging_setup import configure_logging
from .schemas import ContactDetails, ContactInfoDto

logger = logging.getLogger(__name__)

StartupHook = Callable[[FastAPI], Awaitable[None]]


def info_router(service_name: str) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["info"])

    @router.get("/build-info", response_class=PlainTextResponse)
    async def build_info() -> str:
        return config.build_version()

    @router.get("/contact-info", response_model=ContactInfoDto)
    async def contact_info() -> ContactInfoDto:
        settings = config.contact_settings(service_name)
        return ContactInfoDto(
            message=settings.message,
            contact_details=ContactDetails(name=settings.name, email=settings.email),
            on_call_support=settings.on_call_support,
        )

    return router


def create_service_app(
    service_name: str,
    *,
    schema_sql: str,
    routers: Sequence[APIRouter],
    default_db: str,
    on_startup: StartupHook | None = None,
) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        path = config.database_path(default_db)
        await db.init_db(path, schema_sql)
        # One pooled client per process; downstream clients borrow it.
        app.state.http = httpx.AsyncClient(timeout=config.downstream_timeout_s())
        if on_startup is not None:
            await on_startup(app)
        logger.info("service_started service=%s database=%s", service_name, path)
        try:
            yield
        finally:
            await app.state.http.aclose()
            await db.close_db()

    app = FastAPI(title=f"EazyBank {service_name}", lifespan=lifespan)
    app.add_middleware(CorrelationIdMiddleware)
    register_exception_handlers(app)

    for router in routers:
        app.include_router(router, tags=[service_name])
    app.include_router(info_router(service_name))

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "service": service_name}

    return app
