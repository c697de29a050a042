"""
Default seat reservation adapter.
"""

from ticket_service.core.logging import get_logger
from ticket_service.infrastructure.payment_gateway import _require_int
from ticket_service.services.interfaces.seat_reservation import SeatReservationService

logger = get_logger(__name__)


class SeatBookingGateway(SeatReservationService):

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_int("accountId", account_id)
        _require_int("totalSeatsToAllocate", total_seats_to_allocate)
        logger.info(
            "seats_reserved",
            account_id=account_id,
            seats=total_seats_to_allocate,
        )
