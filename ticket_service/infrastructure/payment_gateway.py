"""
Default payment adapter.
Stands in for a third-party payment provider: checks argument types the way
the provider does, then records the charge in the log.
"""

from ticket_service.core.logging import get_logger
from ticket_service.services.interfaces.payment import TicketPaymentService

logger = get_logger(__name__)


def _require_int(name: str, value) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")


class PaymentGateway(TicketPaymentService):

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_int("accountId", account_id)
        _require_int("totalAmountToPay", total_amount_to_pay)
        logger.info(
            "payment_requested",
            account_id=account_id,
            amount=total_amount_to_pay,
        )
