"""
Purchase endpoint.
Marshals JSON into TicketTypeRequest values; all business rules live in TicketService.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ticket_service.domain.errors import InvalidPurchaseError
from ticket_service.schemas.purchase import PurchaseCreate, PurchaseResponse, PurchaseErrorResponse
from ticket_service.services.service_factory import get_ticket_service
from ticket_service.services.ticket_service import TicketService
from ticket_service.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/purchases", tags=["Purchases"])


@router.post(
    "/",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": PurchaseErrorResponse},
        502: {"model": PurchaseErrorResponse},
    },
)
def create_purchase(
    purchase_data: PurchaseCreate,
    service: TicketService = Depends(get_ticket_service),
):
    """
    Purchase tickets for an account.

    Rejected purchases return 422 with the rule that failed in `code`.
    Payment or seat provider failures return 502.
    Ticket type names are case-insensitive. Repeated lines of the same ticket
    type are summed.
    """
    lines = [(line.type, line.count) for line in purchase_data.tickets]
    try:
        summary = service.purchase_lines(purchase_data.account_id, lines)
    except InvalidPurchaseError:
        raise
    except Exception:
        logger.exception("upstream_failure", account_id=purchase_data.account_id)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Upstream service failure", "code": "UPSTREAM_FAILURE"},
        )
    return PurchaseResponse(account_id=purchase_data.account_id, **summary.to_dict())
