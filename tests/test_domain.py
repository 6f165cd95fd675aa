"""Unit tests for domain models."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from circulation.domain.catalog import Book, Borrower
from circulation.domain.loan import Loan, LoanStatus
from circulation.domain.results import CheckoutResult, LoanError, LoanErrorCode, ReturnResult

START = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class TestBookModel:
    """Test Book model."""

    def test_book_defaults_to_available(self):
        """Test a new book is on the shelf."""
        book = Book(title="1984", author="George Orwell", isbn="978-0-452-28423-4")

        assert book.available is True

    def test_book_requires_title(self):
        """Test an empty title is rejected."""
        with pytest.raises(ValidationError):
            Book(title="", author="George Orwell", isbn="978-0-452-28423-4")


class TestBorrowerModel:
    """Test Borrower model."""

    def test_borrower_creation(self):
        borrower = Borrower(name="Ana García", borrower_id="U001")

        assert borrower.name == "Ana García"
        assert borrower.borrower_id == "U001"

    def test_borrower_is_immutable(self, ana):
        """Test borrowers cannot be changed after creation."""
        with pytest.raises(ValidationError):
            ana.name = "Someone Else"


class TestLoanModel:
    """Test Loan model."""

    def _loan(self, book, borrower):
        return Loan(book=book, borrower=borrower, checked_out_at=START, due_at=START + timedelta(days=14))

    def test_loan_defaults(self, book_1984, ana):
        loan = self._loan(book_1984, ana)

        assert loan.returned is False
        assert loan.returned_at is None
        assert loan.fine == 0
        assert loan.status == LoanStatus.CREATED
        assert len(loan.loan_id) == 32

    def test_loan_ids_are_unique(self, book_1984, ana):
        assert self._loan(book_1984, ana).loan_id != self._loan(book_1984, ana).loan_id

    def test_loan_keeps_references(self, book_1984, ana):
        """Test the loan holds the same book and borrower objects."""
        loan = self._loan(book_1984, ana)

        assert loan.book is book_1984
        assert loan.borrower is ana

    @pytest.mark.parametrize("offset, expected", [
        (timedelta(days=-2), 0),
        (timedelta(0), 0),
        (timedelta(hours=23, minutes=59), 0),
        (timedelta(days=1), 1),
        (timedelta(days=3, hours=12), 3),
    ])
    def test_days_late_at(self, book_1984, ana, offset, expected):
        """Test lateness counts whole 24-hour days past due."""
        loan = self._loan(book_1984, ana)

        assert loan.days_late_at(loan.due_at + offset) == expected

    def test_is_overdue(self, book_1984, ana):
        loan = self._loan(book_1984, ana)
        later = loan.due_at + timedelta(seconds=1)

        assert loan.is_overdue(later) is True
        assert loan.is_overdue(loan.due_at) is False

        loan.returned = True
        assert loan.is_overdue(later) is False


class TestResults:
    """Test operation result models."""

    def test_failed_checkout(self):
        result = CheckoutResult(error=LoanError(code=LoanErrorCode.AVAILABILITY, message="on loan"))

        assert result.ok is False
        assert result.loan is None

    def test_failed_return_is_not_on_time(self, book_1984, ana):
        loan = Loan(book=book_1984, borrower=ana, checked_out_at=START, due_at=START + timedelta(days=14))
        result = ReturnResult(loan=loan, error=LoanError(code=LoanErrorCode.ALREADY_RETURNED, message="done"))

        assert result.ok is False
        assert result.on_time is False
        assert result.loan is loan
