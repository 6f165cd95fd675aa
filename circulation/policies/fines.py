"""Fine policies: rules mapping whole days late to a penalty.

Every policy implements ``compute_fine(days_late)`` and is safe to hand to
any ``LoanManager``; the manager never looks at which one it holds.
"""
from abc import ABC, abstractmethod
from typing import Optional

from circulation.core.config import settings


class FinePolicy(ABC):
    """Fine calculation capability."""

    @abstractmethod
    def compute_fine(self, days_late: int) -> float:
        """Return the fine owed for ``days_late`` whole days (>= 0)."""

    @property
    def name(self) -> str:
        return type(self).__name__


def _check_days_late(days_late: int) -> None:
    if days_late < 0:
        raise ValueError(f"days_late must be non-negative, got {days_late}")


class PerDayFinePolicy(FinePolicy):
    """Flat rate charged for each whole day late."""

    def __init__(self, daily_rate: float):
        if daily_rate < 0:
            raise ValueError(f"daily_rate must be non-negative, got {daily_rate}")
        self.daily_rate = daily_rate

    def compute_fine(self, days_late: int) -> float:
        _check_days_late(days_late)
        return days_late * self.daily_rate

    def __repr__(self) -> str:
        return f"{self.name}(daily_rate={self.daily_rate})"


class StandardFinePolicy(PerDayFinePolicy):
    """Regular borrowers: ``STANDARD_FINE_RATE`` per day (10 by default)."""

    def __init__(self, daily_rate: Optional[float] = None):
        super().__init__(settings.standard_fine_rate if daily_rate is None else daily_rate)


class DiscountedFinePolicy(PerDayFinePolicy):
    """Student tier: ``DISCOUNTED_FINE_RATE`` per day (5 by default)."""

    def __init__(self, daily_rate: Optional[float] = None):
        super().__init__(settings.discounted_fine_rate if daily_rate is None else daily_rate)


class WaivedFinePolicy(FinePolicy):
    """VIP tier: lateness is never charged."""

    def compute_fine(self, days_late: int) -> float:
        _check_days_late(days_late)
        return 0

    def __repr__(self) -> str:
        return f"{self.name}()"
