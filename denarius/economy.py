"""Treasury bookkeeping for a kingdom."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Economy:
    """Holds the treasury and the income and expenses pending for the month."""

    denars: float
    income: float = 0.0
    expenses: float = 0.0

    def add_income(self, amount: float) -> None:
        """Add to the income pending for this month."""
        self.income += amount

    def add_expense(self, amount: float) -> None:
        """Add to the expenses pending for this month."""
        self.expenses += amount

    def update_monthly(self) -> None:
        """Settle the month: apply the balance to the treasury and reset it."""
        self.denars += self.income - self.expenses
        self.income = 0.0
        self.expenses = 0.0

    def take_loan(self, amount: float) -> None:
        """Put borrowed denars straight into the treasury."""
        self.denars += amount