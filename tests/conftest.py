"""Pytest configuration and shared fixtures."""
import logging
from datetime import datetime, timedelta, timezone

import pytest

from circulation.domain.catalog import Book, Borrower
from circulation.policies.fines import DiscountedFinePolicy, StandardFinePolicy
from circulation.policies.notifications import EmailNotifier, SmsNotifier
from circulation.presentation.display import RecordingDisplay
from circulation.services.loans import LoanManager

START = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    """Clock frozen at 2024-03-01 09:30 UTC."""
    return FixedClock()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def book_1984():
    return Book(title="1984", author="George Orwell", isbn="978-0-452-28423-4")


@pytest.fixture
def book_cien():
    return Book(
        title="Cien años de soledad",
        author="Gabriel García Márquez",
        isbn="978-84-376-0494-7",
    )


@pytest.fixture
def ana():
    return Borrower(name="Ana García", borrower_id="U001")


@pytest.fixture
def carlos():
    return Borrower(name="Carlos López", borrower_id="U002")


@pytest.fixture
def standard_manager(clock, display):
    """Regular borrowers: standard fine, e-mail notices."""
    return LoanManager(StandardFinePolicy(10), EmailNotifier(display), display=display, clock=clock)


@pytest.fixture
def student_manager(clock, display):
    """Students: discounted fine, text messages."""
    return LoanManager(DiscountedFinePolicy(5), SmsNotifier(display), display=display, clock=clock)


@pytest.fixture
def restore_root_logger():
    """Undo any setup_logging() call made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
