"""Wallet package: ledger, budget tracker and their composite."""

from pocketbook.wallet.budget import (
    LOW_BALANCE_THRESHOLD,
    NEAR_BUDGET_RATIO,
    BudgetTracker,
    classify_balance,
    classify_spending,
)
from pocketbook.wallet.ledger import Ledger
from pocketbook.wallet.wallet import Wallet

__all__ = [
    "LOW_BALANCE_THRESHOLD",
    "NEAR_BUDGET_RATIO",
    "BudgetTracker",
    "Ledger",
    "Wallet",
    "classify_balance",
    "classify_spending",
]
