"""Input validation package."""

from pocketbook.validation.validator import (
    DEFAULT_MIN_LOGIN_LENGTH,
    validate_amount,
    validate_category,
    validate_login,
    validate_secret,
)

__all__ = [
    "DEFAULT_MIN_LOGIN_LENGTH",
    "validate_amount",
    "validate_category",
    "validate_login",
    "validate_secret",
]
