"""Loan orchestration and reporting."""
