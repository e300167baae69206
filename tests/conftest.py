"""Shared fixtures: one TestClient per service, each on its own SQLite file."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def service_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CARDS_SERVICE_URL", raising=False)
    monkeypatch.delenv("LOANS_SERVICE_URL", raising=False)
    monkeypatch.delenv("BUILD_VERSION", raising=False)

    def _use_db(name: str) -> None:
        monkeypatch.setenv("DATABASE_PATH", str(tmp_path / name))

    return _use_db


@pytest.fixture
def accounts_client(service_env) -> Iterator[TestClient]:
    from accounts.main import app

    service_env("accounts.db")
    with TestClient(app) as client:
        yield client


@pytest.fixture
def cards_client(service_env) -> Iterator[TestClient]:
    from cards.main import app

    service_env("cards.db")
    with TestClient(app) as client:
        yield client


@pytest.fixture
def loans_client(service_env) -> Iterator[TestClient]:
    from loans.main import app

    service_env("loans.db")
    with TestClient(app) as client:
        yield client
