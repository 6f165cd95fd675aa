"""Library circulation desk.

Books, borrowers and loans, with pluggable fine and notification policies
wired into a loan manager.
"""
from circulation.domain.catalog import Book, Borrower
from circulation.domain.loan import Loan, LoanStatus
from circulation.domain.results import CheckoutResult, LoanError, LoanErrorCode, ReturnResult
from circulation.policies.fines import (
    DiscountedFinePolicy,
    FinePolicy,
    StandardFinePolicy,
    WaivedFinePolicy,
)
from circulation.policies.notifications import EmailNotifier, NotificationPolicy, SmsNotifier
from circulation.services.loans import LoanManager

__version__ = "1.0.0"

__all__ = [
    "Book",
    "Borrower",
    "CheckoutResult",
    "DiscountedFinePolicy",
    "EmailNotifier",
    "FinePolicy",
    "Loan",
    "LoanError",
    "LoanErrorCode",
    "LoanManager",
    "LoanStatus",
    "NotificationPolicy",
    "ReturnResult",
    "SmsNotifier",
    "StandardFinePolicy",
    "WaivedFinePolicy",
]
