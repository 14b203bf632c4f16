"""
Configuration Management for Pocketbook

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Thresholds and file locations are validated once, at startup.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Ledger engine settings.

    Loads configuration from POCKETBOOK_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="POCKETBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Persistence
    data_file: Path = Field(
        default=Path("finance_data.json"),
        description="Where the directory snapshot is stored"
    )
    audit_file: Optional[Path] = Field(
        default=None,
        description="JSON-lines audit log. If unset, audit events are only logged"
    )

    # Alert thresholds
    near_budget_ratio: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Share of a cap above which a category is NEAR its budget"
    )
    low_balance_threshold: float = Field(
        default=1000.0,
        ge=0.0,
        description="Balance below which a LOW balance alert is raised"
    )

    # Transfers
    transfer_category: str = Field(
        default="Transfer",
        min_length=1,
        description="Category used for both legs of a transfer"
    )

    # Registration rules
    min_login_length: int = Field(
        default=3,
        ge=1,
        le=64,
        description="Minimum login length"
    )

    # Queries
    recent_transactions_default: int = Field(
        default=5,
        ge=1,
        le=1000,
        description="How many records `recent_transactions` returns by default"
    )

    @field_validator('transfer_category')
    @classmethod
    def validate_transfer_category(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Transfer category must not be blank")
        return v


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
