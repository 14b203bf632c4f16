"""Accounts package: users, the account directory and sessions."""

from pocketbook.accounts.directory import AccountDirectory, User
from pocketbook.accounts.session import Session

__all__ = ["AccountDirectory", "Session", "User"]
