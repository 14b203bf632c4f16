"""
Account Directory

Maps logins to users. Each user owns exactly one wallet for the
lifetime of the account; users are never deleted by normal flows.

Logins are case-sensitive and compared exactly. Login format rules are
applied by the caller before registration, not here.

SECURITY NOTE: Secrets are stored and compared as plaintext, by
equality. This is a known weakness carried over as-is; replacing it
needs a salted one-way hash and constant-time comparison.
"""

from typing import Iterable, Iterator, Optional

from pocketbook.errors import (
    AuthenticationFailedError,
    DuplicateLoginError,
    UserNotFoundError,
)
from pocketbook.models.snapshot import DirectorySnapshot, UserSnapshot
from pocketbook.wallet import BudgetTracker, Ledger, Wallet


class User:
    """A registered account holder and their wallet."""

    def __init__(self, login: str, secret: str, wallet: Optional[Wallet] = None):
        self._login = login
        self._secret = secret
        self._wallet = wallet if wallet is not None else Wallet()

    def __repr__(self) -> str:
        return f"User(login={self._login!r})"

    @property
    def login(self) -> str:
        return self._login

    @property
    def wallet(self) -> Wallet:
        return self._wallet

    def check_secret(self, secret: str) -> bool:
        return self._secret == secret

    def to_snapshot(self) -> UserSnapshot:
        return UserSnapshot(
            login=self._login,
            secret=self._secret,
            transactions=self._wallet.transactions(),
            budgets=self._wallet.budgets(),
        )

    @classmethod
    def from_snapshot(cls, snapshot: UserSnapshot) -> "User":
        wallet = Wallet(
            ledger=Ledger(snapshot.transactions),
            budgets=BudgetTracker(snapshot.budgets),
        )
        return cls(login=snapshot.login, secret=snapshot.secret, wallet=wallet)


class AccountDirectory:
    """
    All registered users, keyed by login.

    Insertion order carries no meaning but is preserved in snapshots.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: dict[str, User] = {}
        for user in users or ():
            if user.login in self._users:
                raise DuplicateLoginError(f"Login already registered: {user.login}")
            self._users[user.login] = user

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, login: object) -> bool:
        return login in self._users

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))

    def logins(self) -> list[str]:
        return list(self._users)

    def register(self, login: str, secret: str) -> User:
        """
        Create a user with an empty wallet.

        Raises:
            DuplicateLoginError: If the login is already taken
        """
        if login in self._users:
            raise DuplicateLoginError(f"Login already registered: {login}")
        user = User(login, secret)
        self._users[login] = user
        return user

    def unregister(self, login: str) -> bool:
        """
        Drop a user again.

        Only used to undo a registration whose save failed.
        """
        return self._users.pop(login, None) is not None

    def authenticate(self, login: str, secret: str) -> User:
        """
        Return the user when login exists and secret matches exactly.

        Unknown login and wrong secret raise the same error so the caller
        cannot probe which logins exist.

        Raises:
            AuthenticationFailedError: On any mismatch
        """
        user = self._users.get(login)
        if user is None or not user.check_secret(secret):
            raise AuthenticationFailedError("Invalid login or password")
        return user

    def resolve(self, login: str) -> User:
        """
        Look up a user, e.g. a transfer recipient.

        Raises:
            UserNotFoundError: If no such login exists
        """
        user = self._users.get(login)
        if user is None:
            raise UserNotFoundError(f"User not found: {login}")
        return user

    def to_snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            users=[user.to_snapshot() for user in self._users.values()],
        )

    @classmethod
    def from_snapshot(cls, snapshot: DirectorySnapshot) -> "AccountDirectory":
        return cls(User.from_snapshot(user) for user in snapshot.users)
