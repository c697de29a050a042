"""
Infrastructure layer - external system integrations.
Keeps business logic clean from implementation details.
"""

from .payment_gateway import PaymentGateway
from .seat_booking import SeatBookingGateway

__all__ = ['PaymentGateway', 'SeatBookingGateway']
