"""Domain model for loans."""
import uuid
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from circulation.domain.catalog import Book, Borrower

ONE_DAY = timedelta(days=1)


class LoanStatus(str, Enum):
    """Lifecycle of a loan. RETURNED is terminal."""
    CREATED = "created"
    RETURNED = "returned"


class Loan(BaseModel):
    """The record of one book lent to one borrower.

    ``book`` and ``borrower`` are the caller's own instances, not copies,
    so flipping ``loan.book.available`` is visible to everyone holding
    the book.

    Attributes:
        loan_id: Unique identifier of the loan
        book: Book on loan
        borrower: Borrower holding the book
        checked_out_at: Instant of checkout (UTC)
        due_at: Instant the book is due back; fixed at checkout
        returned: Whether the loan has been closed
        returned_at: Instant of return, once returned
        days_late: Whole days past due at return
        fine: Fine charged at return
    """
    loan_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    book: Book
    borrower: Borrower
    checked_out_at: datetime
    due_at: datetime
    returned: bool = False
    returned_at: Optional[datetime] = None
    days_late: int = Field(default=0, ge=0)
    fine: float = Field(default=0.0, ge=0)

    @property
    def status(self) -> LoanStatus:
        return LoanStatus.RETURNED if self.returned else LoanStatus.CREATED

    def days_late_at(self, now: datetime) -> int:
        """Whole days between the due date and ``now``; 0 when not late."""
        if now <= self.due_at:
            return 0
        return (now - self.due_at) // ONE_DAY

    def is_overdue(self, now: datetime) -> bool:
        return not self.returned and now > self.due_at
