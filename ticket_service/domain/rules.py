"""
Business-rule constants for ticket purchases.
Injected into TicketService so the validator carries no hard-coded literals.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ticket_service.domain.ticket_request import TicketType, is_positive_int

DEFAULT_TICKET_PRICES = MappingProxyType({
    TicketType.INFANT: 0,
    TicketType.CHILD: 10,
    TicketType.ADULT: 20,
})

MAX_TICKETS_PER_PURCHASE = 20


def _is_non_negative_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class PurchaseRules:
    ticket_prices: Mapping[TicketType, int] = field(default_factory=lambda: DEFAULT_TICKET_PRICES)
    max_tickets_per_purchase: int = MAX_TICKETS_PER_PURCHASE
    # Infants sit on an adult's lap
    seated_ticket_types: frozenset[TicketType] = frozenset({TicketType.ADULT, TicketType.CHILD})

    def __post_init__(self):
        missing = set(TicketType) - set(self.ticket_prices)
        if missing:
            raise ValueError(f"No price configured for: {sorted(t.value for t in missing)}")
        if not all(_is_non_negative_int(price) for price in self.ticket_prices.values()):
            raise ValueError("Ticket prices must be non-negative integers")
        if not is_positive_int(self.max_tickets_per_purchase):
            raise ValueError("max_tickets_per_purchase must be a positive integer")

    def price_for(self, ticket_type: TicketType) -> int:
        return self.ticket_prices[ticket_type]

    def holds_seat(self, ticket_type: TicketType) -> bool:
        return ticket_type in self.seated_ticket_types
