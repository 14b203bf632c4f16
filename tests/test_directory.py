"""
Tests for the account directory, users and sessions.
"""

import pytest

from pocketbook.accounts import AccountDirectory, Session, User
from pocketbook.errors import (
    AuthenticationFailedError,
    DuplicateLoginError,
    UserNotFoundError,
)
from pocketbook.models.transaction import TransactionKind, TransactionRecord


class TestRegistration:
    """Tests for register / unregister."""

    def test_register_creates_empty_wallet(self):
        """Test a new user starts with an empty wallet."""
        directory = AccountDirectory()
        user = directory.register("alice", "p1")
        assert user.login == "alice"
        assert user.wallet.balance() == 0.0
        assert "alice" in directory
        assert len(directory) == 1

    def test_duplicate_login_rejected(self):
        """Test registering a taken login fails and keeps the original."""
        directory = AccountDirectory()
        original = directory.register("alice", "p1")
        with pytest.raises(DuplicateLoginError):
            directory.register("alice", "other")
        assert directory.resolve("alice") is original
        assert original.check_secret("p1")

    def test_logins_are_case_sensitive(self):
        """Test that logins differing in case are different users."""
        directory = AccountDirectory()
        directory.register("alice", "p1")
        directory.register("Alice", "p2")
        assert directory.logins() == ["alice", "Alice"]

    def test_unregister(self):
        """Test dropping a user."""
        directory = AccountDirectory()
        directory.register("alice", "p1")
        assert directory.unregister("alice") is True
        assert directory.unregister("alice") is False
        assert "alice" not in directory

    def test_constructor_rejects_duplicates(self):
        """Test the directory never holds two users with one login."""
        with pytest.raises(DuplicateLoginError):
            AccountDirectory([User("alice", "a"), User("alice", "b")])


class TestLookup:
    """Tests for authenticate and resolve."""

    @pytest.fixture
    def directory(self):
        directory = AccountDirectory()
        directory.register("alice", "p1")
        return directory

    def test_authenticate(self, directory):
        """Test a matching login and secret."""
        assert directory.authenticate("alice", "p1").login == "alice"

    @pytest.mark.parametrize("login,secret", [
        ("alice", "wrong"),
        ("alice", "P1"),
        ("nobody", "p1"),
    ])
    def test_authenticate_failure_is_uniform(self, directory, login, secret):
        """Test unknown login and wrong secret give the same error."""
        with pytest.raises(AuthenticationFailedError, match="Invalid login or password"):
            directory.authenticate(login, secret)

    def test_resolve_unknown(self, directory):
        """Test resolving a missing login."""
        with pytest.raises(UserNotFoundError):
            directory.resolve("carol")


class TestSnapshots:
    """Tests for directory snapshots."""

    def test_round_trip(self):
        """Test users, secrets, records and caps survive a snapshot."""
        directory = AccountDirectory()
        alice = directory.register("alice", "p1")
        directory.register("bob", "p2")
        record = TransactionRecord(
            kind=TransactionKind.INCOME,
            category="Salary",
            amount=2000,
            description="March",
        )
        alice.wallet.add_transaction(record)
        alice.wallet.set_budget("Food", 250)

        restored = AccountDirectory.from_snapshot(directory.to_snapshot())

        assert restored.logins() == ["alice", "bob"]
        restored_alice = restored.authenticate("alice", "p1")
        assert restored_alice.wallet.transactions() == [record]
        assert restored_alice.wallet.budgets() == {"Food": 250.0}
        assert restored.resolve("bob").wallet.transaction_count() == 0

    def test_snapshot_does_not_alias_wallet(self):
        """Test changes after a snapshot do not leak into it."""
        directory = AccountDirectory()
        alice = directory.register("alice", "p1")
        snapshot = directory.to_snapshot()
        alice.wallet.set_budget("Food", 250)
        assert snapshot.users[0].budgets == {}


class TestSession:
    """Tests for Session."""

    def test_new_session_is_active(self):
        """Test a new session carries its login."""
        session = Session("alice")
        assert session.is_active
        assert session.login == "alice"

    def test_close(self):
        """Test a closed session has no login."""
        session = Session("alice")
        session.close()
        assert not session.is_active
        assert session.login is None

    def test_sessions_are_distinct(self):
        """Test every session gets its own id."""
        assert Session("alice").session_id != Session("alice").session_id
