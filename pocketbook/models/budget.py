"""
Budget Alert Models

Results of evaluating spending caps and the wallet balance.
These are pure values: the embedding layer decides how to show them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AlertLevel(str, Enum):
    """
    How close a category is to its cap.

    EXCEEDED: spent > cap
    NEAR:     spent > near ratio x cap (and not exceeded)
    NORMAL:   otherwise
    """
    NORMAL = "normal"
    NEAR = "near"
    EXCEEDED = "exceeded"


class BalanceAlertLevel(str, Enum):
    """Wallet balance health."""
    OK = "ok"
    LOW = "low"            # Below the configured threshold
    NEGATIVE = "negative"  # Below zero


class BudgetAlert(BaseModel):
    """Spending status for one capped category."""
    model_config = ConfigDict(frozen=True)

    category: str
    level: AlertLevel
    cap: float = Field(gt=0)
    spent: float = Field(ge=0)

    @property
    def remaining(self) -> float:
        """Cap minus spent. Negative once the cap is exceeded."""
        return self.cap - self.spent

    @property
    def is_triggered(self) -> bool:
        """Check if this alert needs the user's attention."""
        return self.level != AlertLevel.NORMAL


class BalanceAlert(BaseModel):
    """Balance status of a wallet after a mutation."""
    model_config = ConfigDict(frozen=True)

    level: BalanceAlertLevel
    balance: float
    threshold: float = Field(
        ge=0,
        description="Low-balance threshold the balance was compared against"
    )

    @property
    def is_triggered(self) -> bool:
        return self.level != BalanceAlertLevel.OK
