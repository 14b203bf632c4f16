"""
Tests for statistics reports.
"""

import pytest

from pocketbook.accounts import User
from pocketbook.errors import NotAuthenticatedError
from pocketbook.models.budget import AlertLevel
from pocketbook.models.transaction import TransactionKind, TransactionRecord
from pocketbook.queries import StatisticsQuery


def add(user, kind, category, amount):
    user.wallet.add_transaction(
        TransactionRecord(kind=kind, category=category, amount=amount)
    )


class TestStatisticsQuery:
    """Tests for StatisticsQuery."""

    def test_empty_wallet(self):
        """Test a user with no records."""
        report = StatisticsQuery().execute(User("alice", "p1"))
        assert report.login == "alice"
        assert report.total_income == 0.0
        assert report.total_expense == 0.0
        assert report.balance == 0.0
        assert report.income_by_category == {}
        assert report.expense_by_category == {}
        assert report.transaction_count == 0
        assert not report.has_budgets

    def test_totals_and_breakdowns(self):
        """Test totals, balance and per-category sums."""
        user = User("alice", "p1")
        add(user, TransactionKind.INCOME, "Salary", 2000)
        add(user, TransactionKind.EXPENSE, "Food", 300)
        add(user, TransactionKind.EXPENSE, "Rent", 800)
        add(user, TransactionKind.EXPENSE, "Food", 50)

        report = StatisticsQuery().execute(user)

        assert report.total_income == 2000.0
        assert report.total_expense == 1150.0
        assert report.balance == 850.0
        assert report.income_by_category == {"Salary": 2000.0}
        assert report.expense_by_category == {"Food": 350.0, "Rent": 800.0}
        assert report.transaction_count == 4

    def test_budget_status(self):
        """Test every capped category appears with its level."""
        user = User("alice", "p1")
        user.wallet.set_budget("Food", 250)
        user.wallet.set_budget("Rent", 1000)
        add(user, TransactionKind.EXPENSE, "Food", 300)

        report = StatisticsQuery().execute(user)

        assert report.has_budgets
        assert {b.category: b.level for b in report.budgets} == {
            "Food": AlertLevel.EXCEEDED,
            "Rent": AlertLevel.NORMAL,
        }

    def test_does_not_change_state(self):
        """Test running a report leaves the wallet as it was."""
        user = User("alice", "p1")
        add(user, TransactionKind.INCOME, "Salary", 10)
        StatisticsQuery().execute(user)
        assert user.wallet.transaction_count() == 1


class TestServiceStatistics:
    """Tests for statistics through the service."""

    def test_report_for_session_user(self, service, alice):
        """Test the report covers the logged-in user only."""
        service.add_income(alice, "Salary", 2000)
        bob = service.login("bob", "p2")
        service.add_income(bob, "Salary", 5)

        report = service.query_statistics(alice)
        assert report.login == "alice"
        assert report.total_income == 2000.0

    def test_requires_session(self, service):
        """Test statistics need an active session."""
        with pytest.raises(NotAuthenticatedError):
            service.query_statistics(None)
