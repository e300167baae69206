"""API tests for the accounts service, including the composed customer view."""

from __future__ import annotations

from uuid import UUID

import httpx
from fastapi.testclient import TestClient
from respx import MockRouter

from core.correlation import CORRELATION_ID_HEADER

MOBILE_NUMBER = "9876543210"
CARDS_URL = "http://cards:9000/api/fetch"
LOANS_URL = "http://loans:8090/api/fetch"

CUSTOMER = {"name": "Madan Reddy", "email": "tutor@eazybytes.com", "mobileNumber": MOBILE_NUMBER}

CARD = {
    "mobileNumber": MOBILE_NUMBER,
    "cardNumber": "100646930341",
    "cardType": "Credit Card",
    "totalLimit": 100000,
    "amountUsed": 0,
    "availableAmount": 100000,
}

LOAN = {
    "mobileNumber": MOBILE_NUMBER,
    "loanNumber": "100217463529",
    "loanType": "Home Loan",
    "totalLoan": 100000,
    "amountPaid": 0,
    "outstandingAmount": 100000,
}


def _create(client: TestClient) -> None:
    response = client.post("/api/create", json=CUSTOMER)
    assert response.status_code == 201


def test_create_account(accounts_client: TestClient) -> None:
    response = accounts_client.post("/api/create", json=CUSTOMER)

    assert response.status_code == 201
    assert response.json() == {"statusCode": "201", "statusMsg": "Account created successfully"}


def test_create_duplicate_customer(accounts_client: TestClient) -> None:
    _create(accounts_client)
    response = accounts_client.post("/api/create", json=CUSTOMER)

    assert response.status_code == 400
    assert response.json()["errorMessage"] == (
        f"Customer already registered with given mobileNumber {MOBILE_NUMBER}"
    )


def test_create_validation_messages(accounts_client: TestClient) -> None:
    response = accounts_client.post(
        "/api/create",
        json={"name": "Bob", "email": "not-an-email", "mobileNumber": "12"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "name": "The length of the customer name should be between 5 and 30",
        "email": "Email address should be a valid value",
        "mobileNumber": "Mobile number must be 10 digits",
    }


def test_fetch_account(accounts_client: TestClient) -> None:
    _create(accounts_client)

    body = accounts_client.get("/api/fetch", params={"mobileNumber": MOBILE_NUMBER}).json()

    assert body["name"] == CUSTOMER["name"]
    assert body["email"] == CUSTOMER["email"]
    assert body["accountsDto"]["accountType"] == "Savings"
    assert body["accountsDto"]["branchAddress"] == "123 Main Street, New York"
    assert 1_000_000_000 <= body["accountsDto"]["accountNumber"] < 2_000_000_000


def test_fetch_unknown_customer(accounts_client: TestClient) -> None:
    response = accounts_client.get("/api/fetch", params={"mobileNumber": "1111111111"})

    assert response.status_code == 404
    assert response.json()["errorMessage"] == (
        "Customer not found with the given input data mobileNumber : '1111111111'"
    )


def test_update_account_and_customer(accounts_client: TestClient) -> None:
    _create(accounts_client)
    current = accounts_client.get("/api/fetch", params={"mobileNumber": MOBILE_NUMBER}).json()
    current["name"] = "Madan Reddy Jr"
    current["accountsDto"]["branchAddress"] = "1 Infinite Loop"

    response = accounts_client.put("/api/update", json=current)

    assert response.status_code == 200
    updated = accounts_client.get("/api/fetch", params={"mobileNumber": MOBILE_NUMBER}).json()
    assert updated["name"] == "Madan Reddy Jr"
    assert updated["accountsDto"]["branchAddress"] == "1 Infinite Loop"


def test_update_without_account_is_417(accounts_client: TestClient) -> None:
    _create(accounts_client)

    response = accounts_client.put("/api/update", json=CUSTOMER)

    assert response.status_code == 417
    assert response.json() == {
        "statusCode": "417",
        "statusMsg": "Update operation failed. Please contact Dev team",
    }


def test_update_unknown_account_is_404(accounts_client: TestClient) -> None:
    payload = dict(CUSTOMER)
    payload["accountsDto"] = {
        "accountNumber": 1,
        "accountType": "Savings",
        "branchAddress": "123 Main Street, New York",
    }

    response = accounts_client.put("/api/update", json=payload)

    assert response.status_code == 404


def test_delete_account(accounts_client: TestClient) -> None:
    _create(accounts_client)

    response = accounts_client.delete("/api/delete", params={"mobileNumber": MOBILE_NUMBER})

    assert response.status_code == 200
    assert accounts_client.get("/api/fetch", params={"mobileNumber": MOBILE_NUMBER}).status_code == 404
    # Mobile number is free again.
    _create(accounts_client)


def test_customer_details_composes_cards_and_loans(
    accounts_client: TestClient, respx_mock: MockRouter
) -> None:
    _create(accounts_client)
    cards_route = respx_mock.get(CARDS_URL).mock(return_value=httpx.Response(200, json=CARD))
    loans_route = respx_mock.get(LOANS_URL).mock(return_value=httpx.Response(200, json=LOAN))

    response = accounts_client.get(
        "/api/fetchCustomerDetails",
        params={"mobileNumber": MOBILE_NUMBER},
        headers={CORRELATION_ID_HEADER: "eazy-trace-001"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == CUSTOMER["name"]
    assert body["accountsDto"]["accountType"] == "Savings"
    assert body["cardsDto"] == CARD
    assert body["loansDto"] == LOAN
    assert response.headers[CORRELATION_ID_HEADER] == "eazy-trace-001"

    for route in (cards_route, loans_route):
        request = route.calls[0].request
        assert request.headers[CORRELATION_ID_HEADER] == "eazy-trace-001"
        assert request.url.params["mobileNumber"] == MOBILE_NUMBER


def test_customer_details_degrade_when_downstreams_fail(
    accounts_client: TestClient, respx_mock: MockRouter
) -> None:
    _create(accounts_client)
    respx_mock.get(CARDS_URL).mock(return_value=httpx.Response(404))
    respx_mock.get(LOANS_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

    response = accounts_client.get(
        "/api/fetchCustomerDetails",
        params={"mobileNumber": MOBILE_NUMBER},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["cardsDto"] is None
    assert body["loansDto"] is None
    assert body["accountsDto"] is not None


def test_customer_details_generates_correlation_id_when_missing(
    accounts_client: TestClient, respx_mock: MockRouter
) -> None:
    _create(accounts_client)
    cards_route = respx_mock.get(CARDS_URL).mock(return_value=httpx.Response(200, json=CARD))
    respx_mock.get(LOANS_URL).mock(return_value=httpx.Response(200, json=LOAN))

    response = accounts_client.get(
        "/api/fetchCustomerDetails",
        params={"mobileNumber": MOBILE_NUMBER},
    )

    generated = response.headers[CORRELATION_ID_HEADER]
    UUID(generated)
    assert cards_route.calls[0].request.headers[CORRELATION_ID_HEADER] == generated


def test_customer_details_for_unknown_customer_skips_downstreams(
    accounts_client: TestClient, respx_mock: MockRouter
) -> None:
    response = accounts_client.get(
        "/api/fetchCustomerDetails",
        params={"mobileNumber": MOBILE_NUMBER},
    )

    assert response.status_code == 404
    assert len(respx_mock.calls) == 0


def test_downstream_urls_come_from_environment(
    service_env, monkeypatch, respx_mock: MockRouter
) -> None:
    from accounts.main import app

    monkeypatch.setenv("CARDS_SERVICE_URL", "http://cards.eazybank.svc:9000")
    monkeypatch.setenv("LOANS_SERVICE_URL", "http://loans.eazybank.svc:8090")
    service_env("accounts-env.db")
    cards_route = respx_mock.get("http://cards.eazybank.svc:9000/api/fetch").mock(
        return_value=httpx.Response(200, json=CARD)
    )
    loans_route = respx_mock.get("http://loans.eazybank.svc:8090/api/fetch").mock(
        return_value=httpx.Response(200, json=LOAN)
    )

    with TestClient(app) as client:
        _create(client)
        client.get("/api/fetchCustomerDetails", params={"mobileNumber": MOBILE_NUMBER})

    assert cards_route.called
    assert loans_route.called


def test_update_onto_another_customers_mobile_number_is_400(accounts_client: TestClient) -> None:
    _create(accounts_client)
    other_mobile = "1234567890"
    assert accounts_client.post("/api/create", json={**CUSTOMER, "mobileNumber": other_mobile}).status_code == 201
    other = accounts_client.get("/api/fetch", params={"mobileNumber": other_mobile}).json()
    other["mobileNumber"] = MOBILE_NUMBER

    response = accounts_client.put("/api/update", json=other)

    assert response.status_code == 400
    assert response.json()["errorMessage"] == (
        f"Customer already registered with given mobileNumber {MOBILE_NUMBER}"
    )
    # Neither customer moved.
    unchanged = accounts_client.get("/api/fetch", params={"mobileNumber": other_mobile}).json()
    assert unchanged["accountsDto"] == other["accountsDto"]


def test_malformed_cards_url_only_blanks_cards_section(
    service_env, monkeypatch, respx_mock: MockRouter
) -> None:
    from accounts.main import app

    monkeypatch.setenv("CARDS_SERVICE_URL", "http://cards:90x0")
    service_env("accounts-bad-url.db")
    loans_route = respx_mock.get(LOANS_URL).mock(return_value=httpx.Response(200, json=LOAN))

    with TestClient(app) as client:
        _create(client)
        response = client.get("/api/fetchCustomerDetails", params={"mobileNumber": MOBILE_NUMBER})

    assert response.status_code == 200
    body = response.json()
    assert body["cardsDto"] is None
    assert body["loansDto"] == LOAN
    assert loans_route.called
