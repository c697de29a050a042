"""
Collaborator interfaces for dependency inversion.
Allows swapping payment and seat providers without changing business logic.
"""

from .payment import TicketPaymentService
from .seat_reservation import SeatReservationService

__all__ = ['TicketPaymentService', 'SeatReservationService']
