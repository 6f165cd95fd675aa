"""Walkthrough of the circulation desk with two policy combinations.

Regular borrowers get the standard fine and e-mail notices; students get
the discounted fine and text messages. The run shows a checkout, a late
return, an on-time return, a double return and a refused checkout.
"""
from datetime import timedelta
from typing import Dict, Optional

from circulation.core.logging import get_logger
from circulation.domain.catalog import Book, Borrower
from circulation.domain.results import CheckoutResult, ReturnResult
from circulation.policies.fines import DiscountedFinePolicy, StandardFinePolicy
from circulation.policies.notifications import EmailNotifier, SmsNotifier
from circulation.presentation.display import ConsoleDisplay, Display
from circulation.services.loans import LoanManager, utc_now
from circulation.services.reports import fines_by_borrower

logger = get_logger(__name__)


def run_demo(display: Optional[Display] = None) -> Dict[str, object]:
    """Run the scenario, rendering every step on ``display``.

    Returns:
        The intermediate results keyed by step name, for callers that want
        to inspect them.
    """
    display = display or ConsoleDisplay()

    display.display("🏛️  LIBRARY CIRCULATION DESK")
    display.display("=" * 50)

    orwell = Book(title="1984", author="George Orwell", isbn="978-0-452-28423-4")
    marquez = Book(
        title="Cien años de soledad",
        author="Gabriel García Márquez",
        isbn="978-84-376-0494-7",
    )
    ana = Borrower(name="Ana García", borrower_id="U001")
    carlos = Borrower(name="Carlos López", borrower_id="U002")

    regular = LoanManager(StandardFinePolicy(), EmailNotifier(display), display=display)
    student = LoanManager(DiscountedFinePolicy(), SmsNotifier(display), display=display)

    display.display("\n🔄 CHECKOUTS:")
    first: CheckoutResult = regular.checkout(orwell, ana)
    second: CheckoutResult = student.checkout(marquez, carlos)

    display.display("\n🚫 CHECKOUT OF A BOOK ALREADY ON LOAN:")
    refused = student.checkout(orwell, carlos)

    display.display("\n📅 LATE RETURN:")
    first.loan.due_at = utc_now() - timedelta(days=3)
    late: ReturnResult = regular.return_loan(first.loan)

    display.display("\n📅 ON-TIME RETURN:")
    on_time: ReturnResult = student.return_loan(second.loan)

    display.display("\n🔁 RETURNING THE SAME LOAN AGAIN:")
    repeated = regular.return_loan(first.loan)

    display.display("\n💰 FINES BY BORROWER:")
    summary = fines_by_borrower(regular.loans + student.loans)
    display.display(summary.to_string(index=False))

    logger.info(f"Demo finished with {len(regular.loans) + len(student.loans)} loans")
    return {
        "checkout": first,
        "student_checkout": second,
        "refused": refused,
        "late_return": late,
        "on_time_return": on_time,
        "repeated_return": repeated,
        "summary": summary,
    }
