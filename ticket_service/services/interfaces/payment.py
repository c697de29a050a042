"""
Payment collaborator interface.
The surrounding system supplies the implementation; failures propagate unchanged.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """
    Charges an account for a ticket purchase.

    Implementations:
    - PaymentGateway: default adapter, validates arguments and logs the charge
    """

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """
        Charge the account.

        Args:
            account_id: Positive account identifier
            total_amount_to_pay: Non-negative amount in whole currency units
        """
        pass
