"""Outcomes of circulation operations.

Expected failures (a book already on loan, a loan already returned) are
reported as values on these results rather than raised.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from circulation.domain.loan import Loan


class LoanErrorCode(str, Enum):
    AVAILABILITY = "availability"
    ALREADY_RETURNED = "already_returned"


class LoanError(BaseModel):
    """A precondition that stopped an operation.

    Attributes:
        code: Which precondition failed
        message: Human-readable explanation
    """
    code: LoanErrorCode
    message: str


class CheckoutResult(BaseModel):
    """Result of ``LoanManager.checkout``.

    ``loan`` is None when the checkout was refused.
    """
    loan: Optional[Loan] = None
    error: Optional[LoanError] = None
    notified: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class ReturnResult(BaseModel):
    """Result of ``LoanManager.return_loan``."""
    loan: Loan
    error: Optional[LoanError] = None
    days_late: int = 0
    fine: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def on_time(self) -> bool:
        return self.ok and self.loan.returned_at is not None and self.loan.returned_at <= self.loan.due_at
