"""
Correlation id propagation.

The id arrives on `eazybank-correlation-id`. If the caller did not send one
(e.g. a request that bypassed the gateway) a fresh UUID is minted so every
downstream call still carries a value. A received id is never rewritten.
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

CORRELATION_ID_HEADER = "eazybank-correlation-id"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_ID_HEADER)
        if correlation_id is None:
            correlation_id = str(uuid4())

        request.state.correlation_id = correlation_id
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


def get_correlation_id(request: Request) -> str:
    return str(getattr(request.state, "correlation_id", ""))
