"""
Pytest fixtures for collaborator doubles, the ticket service and the HTTP client.

Payment and seat providers are autospec mocks of their interfaces, so tests
can assert exactly how (and whether) each was called.
"""

from typing import AsyncGenerator
from unittest.mock import create_autospec

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from ticket_service.main import app
from ticket_service.domain.rules import PurchaseRules
from ticket_service.domain.ticket_request import TicketType, TicketTypeRequest
from ticket_service.services.interfaces import SeatReservationService, TicketPaymentService
from ticket_service.services.service_factory import get_ticket_service
from ticket_service.services.ticket_service import TicketService


@pytest.fixture
def payment_service() -> TicketPaymentService:
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def seat_reservation_service() -> SeatReservationService:
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def rules() -> PurchaseRules:
    return PurchaseRules()


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service, rules) -> TicketService:
    return TicketService(payment_service, seat_reservation_service, rules)


@pytest.fixture
def adult():
    """Factory for ADULT requests: adult(3)."""
    return lambda count: TicketTypeRequest(TicketType.ADULT, count)


@pytest.fixture
def child():
    return lambda count: TicketTypeRequest(TicketType.CHILD, count)


@pytest.fixture
def infant():
    return lambda count: TicketTypeRequest(TicketType.INFANT, count)


@pytest_asyncio.fixture(scope="function")
async def client(ticket_service: TicketService) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the service dependency with the mocked one."""
    app.dependency_overrides[get_ticket_service] = lambda: ticket_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
