"""
Pydantic schemas for purchase request/response validation.
"""

from typing import Any

from pydantic import BaseModel, Field


# Passed through uncoerced: TicketService validates the account id and
# TicketTypeRequest.create validates type name and count.
class TicketLine(BaseModel):
    type: str = Field(..., examples=["ADULT"])
    count: Any = Field(..., examples=[2])


class PurchaseCreate(BaseModel):
    account_id: Any = Field(..., examples=[1])
    tickets: list[TicketLine] = Field(default_factory=list)


class PurchaseResponse(BaseModel):
    account_id: int
    total_tickets: int
    total_amount: int
    total_seats: int
    total_adult_tickets: int
    total_child_tickets: int
    total_infant_tickets: int


class PurchaseErrorResponse(BaseModel):
    detail: str
    code: str
