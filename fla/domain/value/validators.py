"""Shared validation helpers for string value objects.

Lengths are counted in characters (code points), not bytes.
"""

from fla.domain.error import ValidationError


def err_len(field: str, min_length: int, max_length: int) -> str:
    return f"{field} must be between {min_length} and {max_length} characters."


def err_gt(field: str, min_length: int) -> str:
    return f"{field} must be greater than {min_length} characters."


def err_lt(field: str, max_length: int) -> str:
    return f"{field} must be less than {max_length} characters."


def err_missing(field: str) -> str:
    return f"Missing {field}."


def validate_presence(field: str, value: str, operation: str) -> None:
    """Ensure a field is not blank.

    Raises:
        ValidationError: If the value is empty or whitespace only
    """
    if not value.strip():
        raise ValidationError(err_missing(field), operation=operation)


def validate_length(
    field: str, value: str, min_length: int, max_length: int, operation: str
) -> None:
    """Ensure a string is within ``min_length``..``max_length`` characters.

    Raises:
        ValidationError: If the value is too short or too long
    """
    if not min_length <= len(value) <= max_length:
        raise ValidationError(
            err_len(field, min_length, max_length), operation=operation
        )


def validate_min_length(field: str, value: str, min_length: int, operation: str) -> None:
    """Ensure a string has at least ``min_length`` characters."""
    if len(value) < min_length:
        raise ValidationError(err_gt(field, min_length), operation=operation)


def validate_max_length(field: str, value: str, max_length: int, operation: str) -> None:
    """Ensure a string has at most ``max_length`` characters."""
    if len(value) > max_length:
        raise ValidationError(err_lt(field, max_length), operation=operation)
