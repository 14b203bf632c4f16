"""
Transaction Models

A TransactionRecord is the single unit of the ledger. Once created it
never changes: kind, amount and category are fixed at construction.

DESIGN DECISION: Records are frozen Pydantic models. Validation at
construction means an invalid record (zero amount, blank category)
simply cannot exist, whoever builds it.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionKind(str, Enum):
    """Direction of a money movement."""
    INCOME = "income"
    EXPENSE = "expense"


def new_transaction_id() -> str:
    """Generate a globally unique, opaque transaction identifier."""
    return uuid4().hex


class TransactionRecord(BaseModel):
    """
    One income or expense event.

    Timestamps come from the wall clock. Ties are possible and insertion
    order is the only reliable ordering within a ledger.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=new_transaction_id,
        min_length=1,
        description="Unique transaction identifier"
    )
    kind: TransactionKind = Field(
        ...,
        description="Income or expense"
    )
    amount: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Amount in the wallet's (single) currency unit"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Category label"
    )
    description: str = Field(
        default="",
        description="Free-text note, may be empty"
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="When the record was created (wall clock)"
    )

    @field_validator('category')
    @classmethod
    def category_not_blank(cls, v: str) -> str:
        """Reject whitespace-only categories."""
        if not v.strip():
            raise ValueError("Category must not be blank")
        return v

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE
