"""
Wallet

One ledger plus one budget tracker, owned by exactly one user.
The wallet is the read/write surface the accounting service works
through; it does no validation of its own beyond what the budget
tracker enforces on caps.
"""

from typing import Optional

from pocketbook.models.budget import BalanceAlert, BudgetAlert
from pocketbook.models.transaction import TransactionKind, TransactionRecord
from pocketbook.wallet.budget import (
    LOW_BALANCE_THRESHOLD,
    NEAR_BUDGET_RATIO,
    BudgetTracker,
    classify_balance,
)
from pocketbook.wallet.ledger import Ledger


class Wallet:
    """Ledger and budget caps of one user."""

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        budgets: Optional[BudgetTracker] = None,
    ):
        self._ledger = ledger if ledger is not None else Ledger()
        self._budgets = budgets if budgets is not None else BudgetTracker()

    def __repr__(self) -> str:
        return (
            f"Wallet(balance={self.balance():.2f}, "
            f"budgets={len(self._budgets)}, transactions={len(self._ledger)})"
        )

    # Mutations

    def add_transaction(self, record: TransactionRecord) -> None:
        self._ledger.append(record)

    def remove_transaction(self, record: TransactionRecord) -> bool:
        """Remove a record by identity. Corrective/rollback use only."""
        return self._ledger.remove(record)

    def set_budget(self, category: str, cap: float) -> None:
        self._budgets.set_budget(category, cap)

    def remove_budget(self, category: str) -> bool:
        return self._budgets.remove_budget(category)

    # Totals

    def total_income(self) -> float:
        return self._ledger.total_by_kind(TransactionKind.INCOME)

    def total_expense(self) -> float:
        return self._ledger.total_by_kind(TransactionKind.EXPENSE)

    def balance(self) -> float:
        """Total income minus total expense."""
        return self.total_income() - self.total_expense()

    def income_by_category(self) -> dict[str, float]:
        return self._ledger.group_by_category(TransactionKind.INCOME)

    def expense_by_category(self) -> dict[str, float]:
        return self._ledger.group_by_category(TransactionKind.EXPENSE)

    def spent_in(self, category: str) -> float:
        return self._ledger.spent_in(category)

    # Records

    def transactions(self) -> list[TransactionRecord]:
        return self._ledger.records()

    def transaction_count(self) -> int:
        return len(self._ledger)

    def transactions_by_kind(self, kind: TransactionKind) -> list[TransactionRecord]:
        return self._ledger.filter_by_kind(kind)

    def transactions_by_category(self, category: str) -> list[TransactionRecord]:
        return self._ledger.filter_by_category(category)

    def recent(self, n: int) -> list[TransactionRecord]:
        return self._ledger.recent(n)

    # Budgets

    def budgets(self) -> dict[str, float]:
        return self._budgets.budgets()

    def has_budget(self, category: str) -> bool:
        return self._budgets.has_budget(category)

    def remaining_for(self, category: str) -> float:
        return self._budgets.remaining_for(category, self._ledger)

    def evaluate_alerts(self, near_ratio: float = NEAR_BUDGET_RATIO) -> list[BudgetAlert]:
        return self._budgets.evaluate_alerts(self._ledger, near_ratio)

    def balance_alert(self, low_threshold: float = LOW_BALANCE_THRESHOLD) -> BalanceAlert:
        return classify_balance(self.balance(), low_threshold)
