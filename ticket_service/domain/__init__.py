from ticket_service.domain.errors import (
    InvalidPurchaseError, PurchaseErrorKind, InvalidAccountError,
    InvalidTicketRequestError, TooManyTicketsError, UnaccompaniedMinorError,
)
from ticket_service.domain.ticket_request import TicketType, TicketTypeRequest
from ticket_service.domain.summary import PurchaseSummary
from ticket_service.domain.rules import PurchaseRules

__all__ = [
    "InvalidPurchaseError", "PurchaseErrorKind", "InvalidAccountError",
    "InvalidTicketRequestError", "TooManyTicketsError", "UnaccompaniedMinorError",
    "TicketType", "TicketTypeRequest", "PurchaseSummary", "PurchaseRules",
]
