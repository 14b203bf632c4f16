"""
Tests for budget caps, alert classification and the Wallet facade.
"""

import pytest

from pocketbook.errors import InvalidAmountError
from pocketbook.models.budget import AlertLevel, BalanceAlertLevel
from pocketbook.models.transaction import TransactionKind, TransactionRecord
from pocketbook.wallet import (
    BudgetTracker,
    Ledger,
    Wallet,
    classify_balance,
    classify_spending,
)


def expense(category, amount):
    return TransactionRecord(kind=TransactionKind.EXPENSE, category=category, amount=amount)


def income(category, amount):
    return TransactionRecord(kind=TransactionKind.INCOME, category=category, amount=amount)


class TestClassification:
    """Tests for the threshold functions."""

    @pytest.mark.parametrize("spent,expected", [
        (0, AlertLevel.NORMAL),
        (50, AlertLevel.NORMAL),
        (80, AlertLevel.NORMAL),
        (81, AlertLevel.NEAR),
        (100, AlertLevel.NEAR),
        (101, AlertLevel.EXCEEDED),
    ])
    def test_classify_spending(self, spent, expected):
        """Test NORMAL / NEAR / EXCEEDED boundaries at the default ratio."""
        assert classify_spending(spent, 100) == expected

    def test_custom_ratio(self):
        """Test that the near ratio is configurable."""
        assert classify_spending(60, 100, near_ratio=0.5) == AlertLevel.NEAR
        assert classify_spending(60, 100, near_ratio=0.75) == AlertLevel.NORMAL

    @pytest.mark.parametrize("balance,expected", [
        (-0.5, BalanceAlertLevel.NEGATIVE),
        (0, BalanceAlertLevel.LOW),
        (999, BalanceAlertLevel.LOW),
        (1000, BalanceAlertLevel.OK),
        (5000, BalanceAlertLevel.OK),
    ])
    def test_classify_balance(self, balance, expected):
        """Test negative, low and ok balances."""
        alert = classify_balance(balance)
        assert alert.level == expected
        assert alert.threshold == 1000.0


class TestBudgetTracker:
    """Tests for BudgetTracker."""

    def test_set_and_overwrite(self):
        """Test that setting a cap again replaces it."""
        tracker = BudgetTracker()
        tracker.set_budget("Food", 250)
        tracker.set_budget("Food", 400)
        assert tracker.cap_for("Food") == 400.0
        assert len(tracker) == 1

    @pytest.mark.parametrize("cap", [0, -10])
    def test_invalid_cap_leaves_mapping_unchanged(self, cap):
        """Test that a rejected cap does not replace the old one."""
        tracker = BudgetTracker({"Food": 250})
        with pytest.raises(InvalidAmountError):
            tracker.set_budget("Food", cap)
        assert tracker.budgets() == {"Food": 250.0}

    def test_constructor_validates_caps(self):
        """Test that initial caps obey the same rule."""
        with pytest.raises(InvalidAmountError):
            BudgetTracker({"Food": -1})

    def test_remove_budget(self):
        """Test removing an existing and a missing cap."""
        tracker = BudgetTracker({"Food": 250})
        assert tracker.remove_budget("Food") is True
        assert tracker.remove_budget("Food") is False
        assert "Food" not in tracker

    def test_budgets_is_a_copy(self):
        """Test that the returned mapping does not alias the tracker."""
        tracker = BudgetTracker({"Food": 250})
        caps = tracker.budgets()
        caps["Rent"] = 1
        assert not tracker.has_budget("Rent")

    def test_remaining_for(self):
        """Test remaining with and without a cap."""
        tracker = BudgetTracker({"Food": 250})
        ledger = Ledger([expense("Food", 100), expense("Food", 200)])
        assert tracker.remaining_for("Food", ledger) == -50.0
        assert tracker.remaining_for("Rent", ledger) == 0.0

    def test_evaluate_alerts(self):
        """Test one alert per capped category in insertion order."""
        tracker = BudgetTracker({"Food": 250, "Rent": 1000, "Fun": 100})
        ledger = Ledger([
            expense("Food", 300),
            expense("Fun", 90),
            expense("Travel", 500),
            income("Food", 1000),
        ])
        alerts = tracker.evaluate_alerts(ledger)

        assert [a.category for a in alerts] == ["Food", "Rent", "Fun"]
        assert [a.level for a in alerts] == [
            AlertLevel.EXCEEDED,
            AlertLevel.NORMAL,
            AlertLevel.NEAR,
        ]
        assert alerts[0].spent == 300.0
        assert alerts[1].spent == 0.0

    def test_evaluate_does_not_mutate(self):
        """Test that evaluation is a pure query."""
        tracker = BudgetTracker({"Food": 250})
        ledger = Ledger([expense("Food", 300)])
        tracker.evaluate_alerts(ledger)
        assert tracker.budgets() == {"Food": 250.0}
        assert len(ledger) == 1


class TestWallet:
    """Tests for the Wallet facade."""

    def test_new_wallet_is_empty(self):
        """Test a fresh wallet has zero balance and no caps."""
        wallet = Wallet()
        assert wallet.balance() == 0.0
        assert wallet.transaction_count() == 0
        assert wallet.budgets() == {}
        assert wallet.evaluate_alerts() == []

    def test_balance(self):
        """Test balance is income minus expense."""
        wallet = Wallet()
        wallet.add_transaction(income("Salary", 2000))
        wallet.add_transaction(expense("Food", 300))
        assert wallet.total_income() == 2000.0
        assert wallet.total_expense() == 300.0
        assert wallet.balance() == 1700.0
        assert wallet.balance_alert().level == BalanceAlertLevel.OK

    def test_balance_can_go_negative(self):
        """Test that expenses are not limited by the balance."""
        wallet = Wallet()
        wallet.add_transaction(expense("Rent", 800))
        assert wallet.balance() == -800.0
        assert wallet.balance_alert().level == BalanceAlertLevel.NEGATIVE

    def test_remove_transaction(self):
        """Test removing a record restores the totals."""
        wallet = Wallet()
        record = expense("Food", 40)
        wallet.add_transaction(record)
        assert wallet.remove_transaction(record) is True
        assert wallet.balance() == 0.0

    def test_budget_round_trip(self):
        """Test caps set through the wallet."""
        wallet = Wallet()
        wallet.set_budget("Food", 250)
        wallet.add_transaction(expense("Food", 100))
        assert wallet.has_budget("Food")
        assert wallet.remaining_for("Food") == 150.0
        assert wallet.remove_budget("Food") is True
        assert not wallet.has_budget("Food")

    def test_empty_ledger_passed_in_is_kept(self):
        """Test an explicitly passed empty ledger is used, not replaced."""
        ledger = Ledger()
        wallet = Wallet(ledger=ledger)
        wallet.add_transaction(income("Salary", 10))
        assert len(ledger) == 1
