"""
Budget Tracker

Per-category spending caps, checked against ledger expense totals.

Alert thresholds:
- EXCEEDED: spent > cap
- NEAR:     spent > near_ratio x cap (default 0.8), not exceeded
- NORMAL:   otherwise

Evaluation is a pure query. It never changes the caps or the ledger.
"""

from typing import Optional

from pocketbook.models.budget import (
    AlertLevel,
    BalanceAlert,
    BalanceAlertLevel,
    BudgetAlert,
)
from pocketbook.models.transaction import TransactionKind
from pocketbook.validation import validate_amount
from pocketbook.wallet.ledger import Ledger


NEAR_BUDGET_RATIO = 0.8
LOW_BALANCE_THRESHOLD = 1000.0


def classify_spending(
    spent: float,
    cap: float,
    near_ratio: float = NEAR_BUDGET_RATIO,
) -> AlertLevel:
    """Classify spending against a cap."""
    if spent > cap:
        return AlertLevel.EXCEEDED
    if spent > cap * near_ratio:
        return AlertLevel.NEAR
    return AlertLevel.NORMAL


def classify_balance(
    balance: float,
    low_threshold: float = LOW_BALANCE_THRESHOLD,
) -> BalanceAlert:
    """Classify a wallet balance: negative, low or ok."""
    if balance < 0:
        level = BalanceAlertLevel.NEGATIVE
    elif balance < low_threshold:
        level = BalanceAlertLevel.LOW
    else:
        level = BalanceAlertLevel.OK
    return BalanceAlert(level=level, balance=balance, threshold=low_threshold)


class BudgetTracker:
    """
    Mapping from category to spending cap.

    At most one cap per category. Setting a cap again overwrites it;
    no history is kept. Iteration order is insertion order of the
    category's first cap.
    """

    def __init__(self, budgets: Optional[dict[str, float]] = None):
        self._caps: dict[str, float] = {}
        for category, cap in (budgets or {}).items():
            self.set_budget(category, cap)

    def __len__(self) -> int:
        return len(self._caps)

    def __contains__(self, category: object) -> bool:
        return category in self._caps

    def __repr__(self) -> str:
        return f"BudgetTracker(categories={list(self._caps)})"

    def set_budget(self, category: str, cap: float) -> None:
        """
        Insert or overwrite the cap for a category.

        Raises:
            InvalidAmountError: If cap <= 0 (mapping left unchanged)
        """
        self._caps[category] = validate_amount(cap)

    def remove_budget(self, category: str) -> bool:
        """Remove the cap if present. Returns whether it existed."""
        return self._caps.pop(category, None) is not None

    def has_budget(self, category: str) -> bool:
        return category in self._caps

    def cap_for(self, category: str) -> Optional[float]:
        """The cap for a category, or None when there is none."""
        return self._caps.get(category)

    def budgets(self) -> dict[str, float]:
        """Copy of all caps."""
        return dict(self._caps)

    def remaining_for(self, category: str, ledger: Ledger) -> float:
        """
        Cap minus expense-to-date for a category.

        Returns 0 when the category has no cap. Use `has_budget` to tell
        "no cap" apart from "nothing left".
        """
        cap = self._caps.get(category)
        if cap is None:
            return 0.0
        return cap - ledger.spent_in(category)

    def evaluate_alerts(
        self,
        ledger: Ledger,
        near_ratio: float = NEAR_BUDGET_RATIO,
    ) -> list[BudgetAlert]:
        """One alert per capped category, in cap insertion order."""
        spending = ledger.group_by_category(TransactionKind.EXPENSE)
        alerts = []
        for category, cap in self._caps.items():
            spent = spending.get(category, 0.0)
            alerts.append(BudgetAlert(
                category=category,
                level=classify_spending(spent, cap, near_ratio),
                cap=cap,
                spent=spent,
            ))
        return alerts
