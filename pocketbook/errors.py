"""
Accounting Errors

Every failure the accounting surface can report to its caller.
All of them are local and synchronous: nothing is retried here, and
nothing is process-fatal.

Storage failures live beside the storage interface
(see pocketbook.services.storage.interface).
"""


class AccountingError(Exception):
    """Base exception for all accounting operations."""
    pass


class NotAuthenticatedError(AccountingError):
    """Operation requires an active session."""
    pass


class InvalidAmountError(AccountingError, ValueError):
    """Amount must be a finite number greater than zero."""
    pass


class InvalidCategoryError(AccountingError, ValueError):
    """Category label must not be blank."""
    pass


class InvalidLoginError(AccountingError, ValueError):
    """Login does not meet the registration rules."""
    pass


class InvalidSecretError(AccountingError, ValueError):
    """Credential secret must not be blank."""
    pass


class DuplicateLoginError(AccountingError):
    """A user with this login is already registered."""
    pass


class AuthenticationFailedError(AccountingError):
    """Unknown login or wrong secret."""
    pass


class UserNotFoundError(AccountingError):
    """No user is registered under the given login."""
    pass


class InsufficientFundsError(AccountingError):
    """Sender balance is lower than the requested transfer amount."""
    pass
