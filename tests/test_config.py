"""
Tests for configuration.
"""

import pytest
from pydantic import ValidationError

from pocketbook.config import LedgerSettings


class TestLedgerSettings:
    """Tests for LedgerSettings."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults with no environment."""
        monkeypatch.chdir(tmp_path)
        settings = LedgerSettings()
        assert settings.near_budget_ratio == 0.8
        assert settings.low_balance_threshold == 1000.0
        assert settings.transfer_category == "Transfer"
        assert settings.min_login_length == 3
        assert settings.recent_transactions_default == 5
        assert settings.audit_file is None

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test POCKETBOOK_* variables are read."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("POCKETBOOK_NEAR_BUDGET_RATIO", "0.5")
        monkeypatch.setenv("POCKETBOOK_DATA_FILE", str(tmp_path / "ledger.json"))
        settings = LedgerSettings()
        assert settings.near_budget_ratio == 0.5
        assert settings.data_file == tmp_path / "ledger.json"

    @pytest.mark.parametrize("field,value", [
        ("near_budget_ratio", 0),
        ("near_budget_ratio", 1.5),
        ("low_balance_threshold", -1),
        ("transfer_category", "   "),
        ("min_login_length", 0),
    ])
    def test_rejects_invalid(self, field, value):
        """Test out-of-range settings fail at startup."""
        with pytest.raises(ValidationError):
            LedgerSettings(**{field: value})
