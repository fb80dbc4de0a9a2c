"""Boundary checks shared by every public operation."""

from __future__ import annotations

import math
from numbers import Real

from roi_engine.errors import InvalidInputError

# Upper bounds that keep every derived amount finite.
MAX_AMOUNT = 1e12
MAX_COUNT = 1_000_000


def check_number(name: str, value: object) -> float:
    """Return ``value`` as a finite float or raise InvalidInputError."""
    if value is None:
        raise InvalidInputError(name, "is required")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(name, f"must be a number, got {value!r}", value)
    if not math.isfinite(value):
        raise InvalidInputError(name, f"must be finite, got {value}", value)
    return float(value)


def check_amount(name: str, value: object, allow_zero: bool = True) -> float:
    """A monetary amount: finite, not negative, at most MAX_AMOUNT."""
    number = check_number(name, value)
    if number < 0:
        raise InvalidInputError(name, "cannot be negative", value)
    if number == 0 and not allow_zero:
        raise InvalidInputError(name, f"must be greater than 0, got {value}", value)
    if number > MAX_AMOUNT:
        raise InvalidInputError(name, f"must be at most {MAX_AMOUNT:g}, got {value}", value)
    return number


def check_positive_int(name: str, value: object) -> int:
    """A head-count or cadence: whole, positive, at most MAX_COUNT."""
    number = check_number(name, value)
    if number <= 0:
        raise InvalidInputError(name, f"must be greater than 0, got {value}", value)
    if not number.is_integer():
        raise InvalidInputError(name, f"must be a whole number, got {value}", value)
    if number > MAX_COUNT:
        raise InvalidInputError(name, f"must be at most {MAX_COUNT}, got {value}", value)
    return int(number)
