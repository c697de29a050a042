"""
Purchase error taxonomy.
Every business-rule violation surfaces as an InvalidPurchaseError with a kind.
"""

from enum import Enum


class PurchaseErrorKind(str, Enum):
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_REQUEST = "INVALID_REQUEST"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    UNACCOMPANIED_MINOR = "UNACCOMPANIED_MINOR"


class InvalidPurchaseError(Exception):
    """Raised when a purchase breaks a business rule. No side effects have run."""

    def __init__(self, kind: PurchaseErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class InvalidAccountError(InvalidPurchaseError):
    def __init__(self, message: str = "Sorry, invalid account"):
        super().__init__(PurchaseErrorKind.INVALID_ACCOUNT, message)


class InvalidTicketRequestError(InvalidPurchaseError):
    def __init__(self, message: str = "Sorry, wrong ticket type request"):
        super().__init__(PurchaseErrorKind.INVALID_REQUEST, message)


class TooManyTicketsError(InvalidPurchaseError):
    def __init__(self, max_tickets: int):
        super().__init__(
            PurchaseErrorKind.TOO_MANY_TICKETS,
            f"Sorry, only maximum of {max_tickets} tickets can be purchased at a time",
        )
        self.max_tickets = max_tickets


class UnaccompaniedMinorError(InvalidPurchaseError):
    def __init__(self):
        super().__init__(
            PurchaseErrorKind.UNACCOMPANIED_MINOR,
            "Sorry, the children and infants should be accompanied by an adult",
        )
