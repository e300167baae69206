"""
Correlated fetch client for service-to-service lookups.

One GET per call:
    GET {base_url}{path}?{query_param}={lookup_key}
    eazybank-correlation-id: <token, forwarded verbatim>

Failures never reach the caller as exceptions. They come back as a
`LookupResult` whose `value` is None, with `status` telling a confirmed
absence (404) apart from "could not determine" (5xx, transport, decode).
Retries, circuit breaking and mTLS belong to the mesh, not here.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import DownstreamReference
from .correlation import CORRELATION_ID_HEADER

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class LookupStatus(str, enum.Enum):
    FOUND = "found"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    status: LookupStatus
    value: T | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def of(cls, value: T) -> LookupResult[T]:
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def absent(cls, reason: str) -> LookupResult[T]:
        return cls(status=LookupStatus.ABSENT, reason=reason)

    @classmethod
    def indeterminate(cls, reason: str) -> LookupResult[T]:
        return cls(status=LookupStatus.INDETERMINATE, reason=reason)


class DownstreamClient(Generic[T]):
    """
    Fetch-and-degrade client for one downstream dependency.

    Instantiate once per dependency (cards, loans, ...) with the response
    model it decodes into. The shared `httpx.AsyncClient` owns pooling and the
    timeout; this class holds no mutable state.
    """

    def __init__(
        self,
        reference: DownstreamReference,
        response_model: type[T],
        http_client: httpx.AsyncClient,
    ) -> None:
        self._reference = reference
        self._response_model = response_model
        self._client = http_client

    @property
    def reference(self) -> DownstreamReference:
        return self._reference

    def url_for(self, lookup_key: str) -> str:
        base = self._reference.base_url.rstrip("/")
        url = httpx.URL(f"{base}{self._reference.path}")
        return str(url.copy_merge_params({self._reference.query_param: lookup_key}))

    async def fetch(self, correlation_id: str, lookup_key: str) -> LookupResult[T]:
        headers = {CORRELATION_ID_HEADER: correlation_id}

        try:
            resp = await self._client.get(self.url_for(lookup_key), headers=headers)
        except httpx.InvalidURL as exc:
            return self._indeterminate(f"invalid_url {exc}")
        except httpx.TransportError as exc:
            return self._indeterminate(f"transport_error {type(exc).__name__}")
        except Exception as exc:
            logger.exception(
                "downstream_unexpected_error base_url=%s path=%s",
                self._reference.base_url,
                self._reference.path,
            )
            return LookupResult.indeterminate(f"unexpected_error {type(exc).__name__}")

        if resp.status_code == 404:
            logger.info(
                "downstream_absent base_url=%s path=%s",
                self._reference.base_url,
                self._reference.path,
            )
            return LookupResult.absent("status 404")

        if not resp.is_success:
            return self._indeterminate(f"status {resp.status_code}")

        try:
            value = self._response_model.model_validate_json(resp.content)
        except ValidationError as exc:
            # Covers both malformed JSON and a body of the wrong shape.
            return self._indeterminate(f"decode_error {exc.error_count()} errors")

        return LookupResult.of(value)

    def _indeterminate(self, reason: str) -> LookupResult[T]:
        logger.warning(
            "downstream_indeterminate base_url=%s path=%s reason=%s",
            self._reference.base_url,
            self._reference.path,
            reason,
        )
        return LookupResult.indeterminate(reason)
