"""
Snapshot Models

The persisted form of the whole account directory. A snapshot is
written and read as one unit, so both sides of a transfer always land
in the same file.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, field_validator, model_validator

from pocketbook.models.transaction import TransactionRecord


SNAPSHOT_VERSION = 1


class UserSnapshot(BaseModel):
    """One user with their wallet contents."""

    login: str = Field(..., min_length=1)
    # Plaintext, compared by equality. Known weakness, kept as-is.
    secret: str
    transactions: list[TransactionRecord] = Field(
        default_factory=list,
        description="Ledger records in insertion order"
    )
    budgets: dict[str, Annotated[float, Field(gt=0, allow_inf_nan=False)]] = Field(
        default_factory=dict,
        description="Category caps in insertion order"
    )


class DirectorySnapshot(BaseModel):
    """Every user in the directory."""

    version: int = Field(default=SNAPSHOT_VERSION)
    saved_at: datetime = Field(default_factory=datetime.now)
    users: list[UserSnapshot] = Field(default_factory=list)

    @field_validator('version')
    @classmethod
    def validate_version(cls, v: int) -> int:
        """Only formats this build knows how to read."""
        if v < 1 or v > SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version: {v}")
        return v

    @model_validator(mode='after')
    def validate_unique_logins(self) -> 'DirectorySnapshot':
        """A snapshot with two users under one login is corrupt."""
        logins = [user.login for user in self.users]
        if len(logins) != len(set(logins)):
            raise ValueError("Snapshot contains duplicate logins")
        return self
