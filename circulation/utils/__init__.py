"""Text helpers shared by notifiers and the loan manager."""
