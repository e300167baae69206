"""
Service errors and their HTTP mapping.

Business code raises `ServiceError` subclasses; the handlers registered here
turn them into `ErrorResponseDto` bodies. Validation failures come back as a
flat `{field: message}` map with status 400.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .schemas import ErrorResponseDto

logger = logging.getLogger(__name__)


class ServiceError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class ResourceNotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, field: str, value: str) -> None:
        super().__init__(f"{resource} not found with the given input data {field} : '{value}'")
        self.resource = resource
        self.field = field
        self.value = value


class AlreadyExistsError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


def _error_body(request: Request, status_code: int, message: str) -> dict[str, Any]:
    body = ErrorResponseDto(
        api_path=f"uri={request.url.path}",
        error_code=status_code,
        error_message=message,
        error_time=datetime.now(timezone.utc),
    )
    return body.model_dump(mode="json", by_alias=True)


def _validation_message(error: dict[str, Any]) -> str:
    if error.get("type") == "value_error":
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return str(error.get("msg") or "Invalid value")


def validation_errors_to_map(errors: list[dict[str, Any]]) -> dict[str, str]:
    messages: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "header")]
        field = ".".join(loc) or "request"
        messages.setdefault(field, _validation_message(error))
    return messages


def invalid_field(location: str, field: str, value: Any, message: str) -> RequestValidationError:
    """
    Build a validation error for checks done outside pydantic models
    (e.g. query parameters with custom messages).
    """
    return RequestValidationError(
        [
            {
                "type": "value_error",
                "loc": (location, field),
                "msg": message,
                "input": value,
                "ctx": {"error": message},
            }
        ]
    )


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, str(exc)),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=validation_errors_to_map(list(exc.errors())),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=_error_body(request, code, str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
