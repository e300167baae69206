"""
Environment-backed settings.

Every value has a literal fallback so a service starts with no environment at
all (local dev). In Kubernetes the same names are set by the deployment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class DownstreamReference:
    """
    Where a downstream dependency lives.

    `base_url` is resolved by platform DNS (e.g. `http://cards:9000`); this
    code never does discovery itself.
    """

    base_url: str
    path: str
    query_param: str


def cards_reference() -> DownstreamReference:
    return DownstreamReference(
        base_url=_env_str("CARDS_SERVICE_URL", "http://cards:9000"),
        path="/api/fetch",
        query_param="mobileNumber",
    )


def loans_reference() -> DownstreamReference:
    return DownstreamReference(
        base_url=_env_str("LOANS_SERVICE_URL", "http://loans:8090"),
        path="/api/fetch",
        query_param="mobileNumber",
    )


def downstream_timeout_s() -> float:
    return _env_float("DOWNSTREAM_TIMEOUT_S", 5.0)


def database_path(default: str) -> str:
    return _env_str("DATABASE_PATH", default)


def build_version() -> str:
    return _env_str("BUILD_VERSION", "3.0")


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class ContactSettings:
    message: str
    name: str
    email: str
    on_call_support: list[str]


def contact_settings(service_name: str) -> ContactSettings:
    return ContactSettings(
        message=_env_str(
            "CONTACT_MESSAGE",
            f"Welcome to EazyBank {service_name} related local APIs",
        ),
        name=_env_str("CONTACT_NAME", "John Doe - Developer"),
        email=_env_str("CONTACT_EMAIL", "john@eazybank.com"),
        on_call_support=[
            number.strip()
            for number in _env_str("CONTACT_ON_CALL_SUPPORT", "(555) 555-1234,(555) 523-1345").split(",")
            if number.strip()
        ],
    )
