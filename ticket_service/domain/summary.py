"""
Purchase summary: the aggregated, priced result of a batch of ticket requests.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PurchaseSummary:
    total_tickets: int = 0
    total_amount: int = 0
    total_seats: int = 0
    total_adult_tickets: int = 0
    total_child_tickets: int = 0
    total_infant_tickets: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
