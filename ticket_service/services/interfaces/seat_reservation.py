"""
Seat reservation collaborator interface.
"""

from abc import ABC, abstractmethod


class SeatReservationService(ABC):
    """
    Reserves physical seats for an account.

    Implementations:
    - SeatBookingGateway: default adapter, validates arguments and logs the reservation
    """

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserve seats.

        Args:
            account_id: Positive account identifier
            total_seats_to_allocate: Non-negative seat count (infants excluded)
        """
        pass
