"""Loan lifecycle: checking books out and taking them back.

The manager is wired with a fine policy and a notification channel at
construction time and works the same way whatever implementations it gets.
"""
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Tuple

from circulation.core.config import settings
from circulation.core.logging import get_logger
from circulation.domain.catalog import Book, Borrower
from circulation.domain.loan import Loan
from circulation.domain.results import CheckoutResult, LoanError, LoanErrorCode, ReturnResult
from circulation.policies.fines import FinePolicy
from circulation.policies.notifications import NotificationPolicy
from circulation.presentation.display import Display, NullDisplay
from circulation.utils.text import format_amount

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LoanManager:
    """Orchestrates checkouts and returns for one policy combination.

    Args:
        fine_policy: Rule used to price late returns
        notifier: Channel used to tell borrowers about their loans
        display: Where status messages are rendered (discarded if omitted)
        loan_period: Time a book may be kept; defaults to LOAN_PERIOD_DAYS
        clock: Zero-argument callable returning the current aware datetime
        notify_on_return: Also notify the borrower when a loan is closed

    Example:
        >>> manager = LoanManager(StandardFinePolicy(), EmailNotifier())
        >>> result = manager.checkout(book, borrower)
        >>> manager.return_loan(result.loan).fine
        0.0
    """

    def __init__(
        self,
        fine_policy: FinePolicy,
        notifier: NotificationPolicy,
        display: Optional[Display] = None,
        loan_period: Optional[timedelta] = None,
        clock: Optional[Clock] = None,
        notify_on_return: bool = False,
    ):
        self.fine_policy = fine_policy
        self.notifier = notifier
        self.display = display or NullDisplay()
        self.loan_period = loan_period if loan_period is not None else timedelta(days=settings.loan_period_days)
        if self.loan_period <= timedelta(0):
            raise ValueError(f"loan_period must be positive, got {self.loan_period}")
        self.clock = clock or utc_now
        self.notify_on_return = notify_on_return
        self._loans: List[Loan] = []
        self.logger = get_logger(__name__, {"fine_policy": fine_policy.name})

    @property
    def loans(self) -> Tuple[Loan, ...]:
        """Every loan created by this manager, oldest first."""
        return tuple(self._loans)

    def active_loans(self) -> List[Loan]:
        return [loan for loan in self._loans if not loan.returned]

    def checkout(self, book: Book, borrower: Borrower) -> CheckoutResult:
        """Lend ``book`` to ``borrower``.

        Refused with an AVAILABILITY error, and without touching any state,
        when the book is already on loan.
        """
        if not book.available:
            message = f"Book '{book.title}' is not available"
            self.display.display(f"❌ {message}")
            self.logger.warning(
                message,
                extra={"isbn": book.isbn, "borrower_id": borrower.borrower_id,
                       "error_type": LoanErrorCode.AVAILABILITY.value}
            )
            return CheckoutResult(error=LoanError(code=LoanErrorCode.AVAILABILITY, message=message))

        now = self.clock()
        loan = Loan(
            book=book,
            borrower=borrower,
            checked_out_at=now,
            due_at=now + self.loan_period,
        )
        book.available = False
        self._loans.append(loan)

        notice = f"You have borrowed '{book.title}'. Due date: {loan.due_at.date().isoformat()}"
        notified = self._notify(notice, loan)

        self.display.display(f"✅ Loan created: '{book.title}' for {borrower.name}")
        self.logger.info(
            f"Checked out '{book.title}' to {borrower.name}, due {loan.due_at.isoformat()}",
            extra={"loan_id": loan.loan_id, "isbn": book.isbn, "borrower_id": borrower.borrower_id}
        )
        return CheckoutResult(loan=loan, notified=notified)

    def return_loan(self, loan: Loan) -> ReturnResult:
        """Close ``loan``, pricing any lateness with the fine policy.

        A loan that was already returned is left untouched and reported with
        an ALREADY_RETURNED error, however many times it is retried.
        """
        if loan.returned:
            message = f"Loan for '{loan.book.title}' was already returned"
            self.display.display(f"❌ {message}")
            self.logger.warning(
                message,
                extra={"loan_id": loan.loan_id, "error_type": LoanErrorCode.ALREADY_RETURNED.value}
            )
            return ReturnResult(
                loan=loan,
                error=LoanError(code=LoanErrorCode.ALREADY_RETURNED, message=message),
            )

        now = self.clock()
        days_late = 0
        fine = 0
        if now > loan.due_at:
            days_late = loan.days_late_at(now)
            fine = self.fine_policy.compute_fine(days_late)
            self.display.display(
                f"⚠️  {days_late} days late. Fine: {format_amount(fine, settings.currency_symbol)}"
            )
        else:
            self.display.display("✅ Book returned on time")

        loan.returned = True
        loan.returned_at = now
        loan.days_late = days_late
        loan.fine = fine
        loan.book.available = True

        self.display.display(f"📚 '{loan.book.title}' returned by {loan.borrower.name}")
        self.logger.info(
            f"Returned '{loan.book.title}' from {loan.borrower.name}",
            extra={"loan_id": loan.loan_id, "isbn": loan.book.isbn,
                   "borrower_id": loan.borrower.borrower_id, "days_late": days_late, "fine": fine}
        )

        if self.notify_on_return:
            notice = f"Thanks for returning '{loan.book.title}'."
            if fine:
                notice += f" Fine due: {format_amount(fine, settings.currency_symbol)}"
            self._notify(notice, loan)

        return ReturnResult(loan=loan, days_late=days_late, fine=fine)

    def _notify(self, notice: str, loan: Loan) -> bool:
        """Send ``notice`` to the loan's borrower; failures never propagate."""
        borrower = loan.borrower
        try:
            notified = self.notifier.notify(notice, borrower.name)
        except Exception as e:
            self.logger.error(
                f"Notifier raised while notifying {borrower.name} about loan {loan.loan_id}: {e}",
                extra={"loan_id": loan.loan_id, "borrower_id": borrower.borrower_id,
                       "error_type": type(e).__name__}
            )
            return False

        if not notified:
            self.logger.warning(
                f"Could not notify {borrower.name} about loan {loan.loan_id}",
                extra={"loan_id": loan.loan_id, "borrower_id": borrower.borrower_id}
            )
        return bool(notified)
