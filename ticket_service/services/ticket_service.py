"""
Ticket purchase service: validation, pricing and settlement.

PURCHASE FLOW
=============

  1. Validate the account id (positive integer)
  2. Validate every element is a TicketTypeRequest
  3. Fold the requests into a PurchaseSummary using the injected PurchaseRules
  4. Enforce the aggregate rules:
       - at most `max_tickets_per_purchase` tickets
       - child/infant tickets require at least one adult ticket
  5. Settle: charge payment, then reserve seats

Steps 1-4 are pure and raise InvalidPurchaseError. Nothing reaches a
collaborator until all of them pass, so a rejected purchase is never charged
or seated.

Settlement is not retried or rolled back. If the payment call raises, no
seats are reserved; if the reservation call raises, the payment stands. Both
errors reach the caller untouched.

Requests for the same ticket type may repeat and are summed.
"""

from collections.abc import Sequence
from typing import Iterable, Optional

from ticket_service.core.logging import get_logger
from ticket_service.core.metrics import record_purchase_attempt, record_purchase_success
from ticket_service.domain.errors import (
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    TooManyTicketsError,
    UnaccompaniedMinorError,
)
from ticket_service.domain.rules import PurchaseRules
from ticket_service.domain.summary import PurchaseSummary
from ticket_service.domain.ticket_request import TicketType, TicketTypeRequest, is_positive_int
from ticket_service.services.interfaces.payment import TicketPaymentService
from ticket_service.services.interfaces.seat_reservation import SeatReservationService

logger = get_logger(__name__)


def validate_account_id(account_id) -> None:
    if not is_positive_int(account_id):
        raise InvalidAccountError()


def build_purchase_summary(
    requests: Iterable[TicketTypeRequest],
    rules: PurchaseRules,
) -> PurchaseSummary:
    """Aggregate ticket requests into counts, seats and amount. Raises on malformed elements."""
    counts = {ticket_type: 0 for ticket_type in TicketType}
    total_seats = 0
    total_amount = 0

    for request in requests:
        if not isinstance(request, TicketTypeRequest):
            raise InvalidTicketRequestError()

        count = request.no_of_tickets
        counts[request.ticket_type] += count
        if rules.holds_seat(request.ticket_type):
            total_seats += count
        total_amount += count * rules.price_for(request.ticket_type)

    return PurchaseSummary(
        total_tickets=sum(counts.values()),
        total_amount=total_amount,
        total_seats=total_seats,
        total_adult_tickets=counts[TicketType.ADULT],
        total_child_tickets=counts[TicketType.CHILD],
        total_infant_tickets=counts[TicketType.INFANT],
    )


def validate_purchase_summary(summary: PurchaseSummary, rules: PurchaseRules) -> None:
    if summary.total_tickets > rules.max_tickets_per_purchase:
        raise TooManyTicketsError(rules.max_tickets_per_purchase)

    has_minors = summary.total_child_tickets > 0 or summary.total_infant_tickets > 0
    if has_minors and summary.total_adult_tickets == 0:
        raise UnaccompaniedMinorError()


def _record_rejection(account_id, error: InvalidPurchaseError) -> None:
    logger.warning(
        "purchase_rejected",
        account_id=account_id if is_positive_int(account_id) else None,
        kind=error.kind.value,
        reason=error.message,
    )
    record_purchase_attempt(error.kind.value)


class TicketService:
    """Validates ticket purchases and settles them with payment and seat providers."""

    def __init__(
        self,
        ticket_payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        rules: Optional[PurchaseRules] = None,
    ):
        if not isinstance(ticket_payment_service, TicketPaymentService):
            raise TypeError("ticket_payment_service is not an instance of TicketPaymentService")
        if not isinstance(seat_reservation_service, SeatReservationService):
            raise TypeError("seat_reservation_service is not an instance of SeatReservationService")

        self.ticket_payment_service = ticket_payment_service
        self.seat_reservation_service = seat_reservation_service
        self.rules = rules or PurchaseRules()

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> PurchaseSummary:
        """Variadic form of purchase()."""
        return self.purchase(account_id, ticket_type_requests)

    def purchase_lines(self, account_id, lines: Iterable[tuple]) -> PurchaseSummary:
        """
        Purchase from raw (ticket type name, count) pairs, e.g. decoded JSON.

        The account id is checked before any line, as in purchase().
        """
        try:
            validate_account_id(account_id)
            requests = [TicketTypeRequest.create(ticket_type, count) for ticket_type, count in lines]
        except InvalidPurchaseError as e:
            _record_rejection(account_id, e)
            raise
        return self.purchase(account_id, requests)

    def purchase(self, account_id: int, requests: Sequence[TicketTypeRequest]) -> PurchaseSummary:
        """
        Validate, price and settle a purchase.

        Raises:
            InvalidPurchaseError: a business rule was violated (nothing charged or reserved)
            Exception: whatever a collaborator raises, unchanged
        """
        try:
            validate_account_id(account_id)
            if isinstance(requests, (str, bytes)) or not isinstance(requests, Sequence):
                raise InvalidTicketRequestError()
            summary = build_purchase_summary(requests, self.rules)
            validate_purchase_summary(summary, self.rules)
        except InvalidPurchaseError as e:
            _record_rejection(account_id, e)
            raise

        try:
            self.ticket_payment_service.make_payment(account_id, summary.total_amount)
            self.seat_reservation_service.reserve_seat(account_id, summary.total_seats)
        except Exception as e:
            logger.error(
                "purchase_settlement_failed",
                account_id=account_id,
                amount=summary.total_amount,
                seats=summary.total_seats,
                error=str(e),
            )
            record_purchase_attempt("upstream_error")
            raise

        logger.info(
            "purchase_completed",
            account_id=account_id,
            tickets=summary.total_tickets,
            amount=summary.total_amount,
            seats=summary.total_seats,
        )
        record_purchase_attempt("success")
        record_purchase_success(summary)
        return summary
