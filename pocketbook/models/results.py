"""
Operation Result Models

What the accounting service hands back to the embedding layer.
Everything the display needs is here, so the caller never has to reach
into a wallet.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pocketbook.models.budget import BalanceAlert, BudgetAlert
from pocketbook.models.transaction import TransactionRecord


class MutationResult(BaseModel):
    """Result of adding an income or expense."""
    model_config = ConfigDict(frozen=True)

    record: TransactionRecord
    alerts: list[BudgetAlert] = Field(
        default_factory=list,
        description="Status of every capped category after the mutation"
    )
    balance_alert: Optional[BalanceAlert] = None

    @property
    def triggered_alerts(self) -> list[BudgetAlert]:
        """Only the alerts that are NEAR or EXCEEDED."""
        return [alert for alert in self.alerts if alert.is_triggered]


class TransferResult(BaseModel):
    """Result of a completed transfer. Both legs are always present."""
    model_config = ConfigDict(frozen=True)

    debit: TransactionRecord = Field(
        ...,
        description="Expense recorded on the sender's wallet"
    )
    credit: TransactionRecord = Field(
        ...,
        description="Income recorded on the recipient's wallet"
    )
    recipient: str
    sender_balance: float
    alerts: list[BudgetAlert] = Field(default_factory=list)
    balance_alert: Optional[BalanceAlert] = None


class StatisticsReport(BaseModel):
    """
    Aggregated view of one wallet.

    Category breakdowns only contain categories that have records of
    the matching kind.
    """
    model_config = ConfigDict(frozen=True)

    login: str
    generated_at: datetime = Field(default_factory=datetime.now)

    total_income: float
    total_expense: float
    balance: float

    income_by_category: dict[str, float] = Field(default_factory=dict)
    expense_by_category: dict[str, float] = Field(default_factory=dict)

    budgets: list[BudgetAlert] = Field(
        default_factory=list,
        description="Cap, spent and level for every capped category"
    )
    transaction_count: int = Field(ge=0)

    @property
    def has_budgets(self) -> bool:
        return bool(self.budgets)
