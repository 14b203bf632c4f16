"""
Input Validation

DESIGN DECISION: Validation happens before any state changes.
Each check either returns the normalized value or raises a specific
AccountingError subclass, so callers can tell exactly what was wrong.

IMPORTANT: Validation NEVER silently fixes issues.
A blank category is rejected, not defaulted.
"""

import math
import numbers
import re
from typing import Any

from pocketbook.errors import (
    InvalidAmountError,
    InvalidCategoryError,
    InvalidLoginError,
    InvalidSecretError,
)


DEFAULT_MIN_LOGIN_LENGTH = 3

_LOGIN_PATTERN = re.compile(r"[A-Za-z0-9]+")


def validate_amount(amount: Any) -> float:
    """
    Check that an amount is a finite number greater than zero.

    Returns the amount as a float.

    Raises:
        InvalidAmountError: If the amount is not a number, not finite or <= 0
    """
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}")
    try:
        value = float(amount)
    except (TypeError, ValueError) as e:
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}") from e

    if not math.isfinite(value):
        raise InvalidAmountError(f"Amount must be finite, got {amount!r}")
    if value <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {value}")
    return value


def validate_category(category: Any) -> str:
    """Check that a category label is non-blank text."""
    if not isinstance(category, str) or not category.strip():
        raise InvalidCategoryError("Category must not be empty")
    return category


def validate_login(login: Any, min_length: int = DEFAULT_MIN_LOGIN_LENGTH) -> str:
    """
    Check registration rules for a login.

    Rules:
    - At least `min_length` characters
    - ASCII letters and digits only

    Logins are case-sensitive and kept exactly as given.
    """
    if not isinstance(login, str):
        raise InvalidLoginError("Login must be text")
    if len(login) < min_length:
        raise InvalidLoginError(
            f"Login must be at least {min_length} characters long"
        )
    if not _LOGIN_PATTERN.fullmatch(login):
        raise InvalidLoginError("Login may only contain letters and digits")
    return login


def validate_secret(secret: Any) -> str:
    """Check that a credential secret is non-blank text."""
    if not isinstance(secret, str) or not secret.strip():
        raise InvalidSecretError("Password must not be empty")
    return secret
