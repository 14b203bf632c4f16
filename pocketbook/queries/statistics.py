"""
Statistics Query

DESIGN DECISION: Statistics are computed from the ledger on demand,
DETERMINISTICALLY, and returned as plain data. Formatting (currency
symbols, column widths, "no data" messages) belongs to the caller.

The report carries everything the statistics screen needs in one call:
totals, per-category breakdowns and the status of every budget.
"""

from pocketbook.accounts import User
from pocketbook.models.results import StatisticsReport
from pocketbook.wallet import NEAR_BUDGET_RATIO


class StatisticsQuery:
    """
    Builds statistics reports for users.

    GUARANTEES:
    - Only reports what is in the ledger
    - Breakdowns omit categories without records
    - Running it never changes any state
    """

    def __init__(self, near_ratio: float = NEAR_BUDGET_RATIO):
        self._near_ratio = near_ratio

    def execute(self, user: User) -> StatisticsReport:
        wallet = user.wallet
        total_income = wallet.total_income()
        total_expense = wallet.total_expense()

        return StatisticsReport(
            login=user.login,
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense,
            income_by_category=wallet.income_by_category(),
            expense_by_category=wallet.expense_by_category(),
            budgets=wallet.evaluate_alerts(self._near_ratio),
            transaction_count=wallet.transaction_count(),
        )
