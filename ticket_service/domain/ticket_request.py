"""
Ticket request value object.
Validated at construction time: an instance is always well-formed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ticket_service.domain.errors import InvalidTicketRequestError


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


def is_positive_int(value) -> bool:
    """True for real ints above zero. bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class TicketTypeRequest:
    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self):
        if not isinstance(self.ticket_type, TicketType):
            raise InvalidTicketRequestError(
                "Sorry, the ticket type provided is not supported"
            )
        if not is_positive_int(self.no_of_tickets):
            raise InvalidTicketRequestError(
                "Sorry, number of tickets must be a positive integer"
            )

    @classmethod
    def create(cls, ticket_type: Union[TicketType, str], no_of_tickets: int) -> "TicketTypeRequest":
        """
        Build a request from loose input (e.g. a ticket type name from JSON).

        Raises:
            InvalidTicketRequestError: unknown type or non-positive count
        """
        if isinstance(ticket_type, str) and not isinstance(ticket_type, TicketType):
            try:
                ticket_type = TicketType[ticket_type.strip().upper()]
            except KeyError:
                raise InvalidTicketRequestError(
                    "Sorry, the ticket type provided is not supported"
                ) from None
        return cls(ticket_type=ticket_type, no_of_tickets=no_of_tickets)
