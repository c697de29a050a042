"""
Ticket service factory.
Wires the configured payment and seat providers into a TicketService.
"""

from typing import Optional

from ticket_service.domain.rules import PurchaseRules
from ticket_service.infrastructure.payment_gateway import PaymentGateway
from ticket_service.infrastructure.seat_booking import SeatBookingGateway
from ticket_service.services.ticket_service import TicketService


def build_ticket_service(rules: Optional[PurchaseRules] = None) -> TicketService:
    """Build a TicketService with the default gateways."""
    return TicketService(
        ticket_payment_service=PaymentGateway(),
        seat_reservation_service=SeatBookingGateway(),
        rules=rules,
    )


# Singleton instance
_service: Optional[TicketService] = None

def get_ticket_service() -> TicketService:
    """Get ticket service singleton. Used as a FastAPI dependency."""
    global _service
    if _service is None:
        _service = build_ticket_service()
    return _service
