"""Validation helpers for user supplied values."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class ValidationError(ValueError):
    """Raised when a value fails validation; names the offending field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def validate_non_empty_string(value: str, field_name: str) -> None:
    """Reject strings that are empty or hold only whitespace."""
    if not value.strip():
        logger.warning("%s is empty or contains only whitespace", field_name)
        raise ValidationError(field_name, f"{field_name} cannot be empty")


def validate_password(password: str) -> None:
    """Reject passwords shorter than the minimum length in UTF-8 bytes."""
    length = len(password.encode("utf-8"))
    if length < MIN_PASSWORD_LENGTH:
        logger.warning(
            "Password too short: %d characters (minimum: %d)",
            length,
            MIN_PASSWORD_LENGTH,
        )
        raise ValidationError(
            "password",
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
        )


def validate_email(email: str) -> None:
    """Apply a basic shape check to an e-mail address."""
    if "@" not in email or "." not in email:
        logger.warning("Invalid email format: %s", email)
        raise ValidationError("email", "Invalid email format")


def validate_range(value: Any, minimum: Any, maximum: Any, field_name: str) -> None:
    """Reject values outside the inclusive range [minimum, maximum]."""
    if value < minimum or value > maximum:
        logger.warning(
            "%s out of range: %r (min: %r, max: %r)",
            field_name,
            value,
            minimum,
            maximum,
        )
        raise ValidationError(
            field_name,
            f"{field_name} must be between {minimum!r} and {maximum!r}",
        )