"""Input validators shared by the domain models."""
import math

from rental_agency.exceptions import InvalidArgumentError


def require_text(value, what: str) -> str:
    """Return `value` if it is a non-blank string, else raise InvalidArgumentError."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Error: {what} must be a non-empty string")
    return value


def require_positive(value, what: str) -> float:
    """
    Return `value` as a float if it is a real number > 0.
    Booleans and NaN are rejected even though Python treats them as numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"Error: {what} must be a number")
    if math.isnan(value) or value <= 0:
        raise InvalidArgumentError(f"Error: {what} must be greater than zero")
    return float(value)


def require_days(value) -> int:
    """Rental length: a whole number of days, at least one."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError("Error: rental days must be a whole number")
    if value < 1:
        raise InvalidArgumentError("Error: rental days must be positive")
    return value
