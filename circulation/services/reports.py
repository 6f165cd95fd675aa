"""Tabular reports over a manager's loan history."""
from typing import Iterable
import pandas as pd

from circulation.domain.loan import Loan

HISTORY_COLUMNS = [
    "loan_id", "title", "isbn", "borrower", "borrower_id",
    "checked_out_at", "due_at", "returned_at", "status", "days_late", "fine",
]
FINES_COLUMNS = ["borrower_id", "borrower", "loans", "total_days_late", "total_fine"]


def loan_history_frame(loans: Iterable[Loan]) -> pd.DataFrame:
    """One row per loan, in the order given."""
    rows = [
        {
            "loan_id": loan.loan_id,
            "title": loan.book.title,
            "isbn": loan.book.isbn,
            "borrower": loan.borrower.name,
            "borrower_id": loan.borrower.borrower_id,
            "checked_out_at": loan.checked_out_at,
            "due_at": loan.due_at,
            "returned_at": loan.returned_at,
            "status": loan.status.value,
            "days_late": loan.days_late,
            "fine": float(loan.fine),
        }
        for loan in loans
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def fines_by_borrower(loans: Iterable[Loan]) -> pd.DataFrame:
    """Aggregate returned loans per borrower id, largest total fine first.

    Returns:
        DataFrame with columns borrower_id, borrower, loans, total_days_late, total_fine
    """
    df = loan_history_frame(loans)
    df = df[df["status"] == "returned"]
    if df.empty:
        return pd.DataFrame(columns=FINES_COLUMNS)

    summary = (
        df.groupby(["borrower_id", "borrower"], sort=False)
        .agg(
            loans=("loan_id", "count"),
            total_days_late=("days_late", "sum"),
            total_fine=("fine", "sum"),
        )
        .reset_index()
    )
    return summary.sort_values("total_fine", ascending=False, kind="stable").reset_index(drop=True)
