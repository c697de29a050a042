from ticket_service.schemas.purchase import (
    TicketLine, PurchaseCreate, PurchaseResponse, PurchaseErrorResponse,
)

__all__ = [
    "TicketLine", "PurchaseCreate", "PurchaseResponse", "PurchaseErrorResponse",
]
