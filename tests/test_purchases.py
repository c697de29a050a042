"""
Tests for the purchase endpoint and service endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_purchase_tickets(client: AsyncClient, payment_service, seat_reservation_service):
    """Successful purchase returns the summary and settles once."""
    response = await client.post(
        "/api/v1/purchases/",
        json={
            "account_id": 1,
            "tickets": [
                {"type": "ADULT", "count": 10},
                {"type": "CHILD", "count": 5},
                {"type": "INFANT", "count": 5},
            ],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["account_id"] == 1
    assert data["total_tickets"] == 20
    assert data["total_amount"] == 250
    assert data["total_seats"] == 15
    assert data["total_infant_tickets"] == 5

    payment_service.make_payment.assert_called_once_with(1, 250)
    seat_reservation_service.reserve_seat.assert_called_once_with(1, 15)


@pytest.mark.asyncio
async def test_purchase_sums_repeated_lines(client: AsyncClient):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 2, "tickets": [
            {"type": "ADULT", "count": 1},
            {"type": "ADULT", "count": 2},
        ]},
    )
    assert response.status_code == 201
    assert response.json()["total_adult_tickets"] == 3


@pytest.mark.asyncio
async def test_purchase_invalid_account(client: AsyncClient, payment_service):
    """Account id 0 returns 422 with the rule code."""
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 0, "tickets": [{"type": "ADULT", "count": 1}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_ACCOUNT"
    payment_service.make_payment.assert_not_called()


@pytest.mark.asyncio
async def test_purchase_unaccompanied_minor(client: AsyncClient, payment_service, seat_reservation_service):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "CHILD", "count": 1}]},
    )
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "UNACCOMPANIED_MINOR"
    assert "accompanied by an adult" in body["detail"]
    payment_service.make_payment.assert_not_called()
    seat_reservation_service.reserve_seat.assert_not_called()


@pytest.mark.asyncio
async def test_purchase_too_many_tickets(client: AsyncClient):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [
            {"type": "ADULT", "count": 10},
            {"type": "CHILD", "count": 10},
            {"type": "INFANT", "count": 10},
        ]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "TOO_MANY_TICKETS"


@pytest.mark.asyncio
async def test_purchase_unknown_ticket_type(client: AsyncClient, payment_service):
    """Unknown types are rejected with the domain code before anything is charged."""
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "SENIOR", "count": 1}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_REQUEST"
    payment_service.make_payment.assert_not_called()


@pytest.mark.asyncio
async def test_purchase_non_positive_count(client: AsyncClient):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "ADULT", "count": 0}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_REQUEST"


@pytest.mark.asyncio
async def test_purchase_upstream_failure(client: AsyncClient, payment_service, seat_reservation_service):
    """A payment provider error maps to 502 and no seats are reserved."""
    payment_service.make_payment.side_effect = RuntimeError("gateway timeout")

    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "ADULT", "count": 1}]},
    )
    assert response.status_code == 502
    assert response.json()["code"] == "UPSTREAM_FAILURE"
    seat_reservation_service.reserve_seat.assert_not_called()


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "ADULT", "count": 1}]},
    )
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "ticket_purchase_attempts_total" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize("account_id", [True, "1", 1.0, None])
async def test_purchase_non_integer_account(client: AsyncClient, payment_service, seat_reservation_service, account_id):
    """Account ids are not coerced: true, "1" and 1.0 are all invalid accounts."""
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": account_id, "tickets": [{"type": "ADULT", "count": 1}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_ACCOUNT"
    payment_service.make_payment.assert_not_called()
    seat_reservation_service.reserve_seat.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [True, "2", 2.0, -1])
async def test_purchase_non_integer_count(client: AsyncClient, payment_service, count):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "ADULT", "count": count}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_REQUEST"
    payment_service.make_payment.assert_not_called()


@pytest.mark.asyncio
async def test_purchase_invalid_account_reported_before_bad_lines(client: AsyncClient):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 0, "tickets": [{"type": "SENIOR", "count": 1}]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_ACCOUNT"


@pytest.mark.asyncio
async def test_purchase_type_names_are_case_insensitive(client: AsyncClient, payment_service):
    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [
            {"type": "adult", "count": 1},
            {"type": "Child", "count": 1},
        ]},
    )
    assert response.status_code == 201
    assert response.json()["total_amount"] == 30
    payment_service.make_payment.assert_called_once_with(1, 30)


@pytest.mark.asyncio
async def test_purchase_reservation_failure(client: AsyncClient, payment_service, seat_reservation_service):
    """A seat provider error maps to 502; the payment already made stands."""
    seat_reservation_service.reserve_seat.side_effect = ConnectionError("seat service down")

    response = await client.post(
        "/api/v1/purchases/",
        json={"account_id": 1, "tickets": [{"type": "ADULT", "count": 2}]},
    )
    assert response.status_code == 502
    assert response.json()["code"] == "UPSTREAM_FAILURE"
    payment_service.make_payment.assert_called_once_with(1, 40)
    seat_reservation_service.reserve_seat.assert_called_once_with(1, 2)
