# core/utils.py

"""
Repository for program-wide utilities.

Includes identifier generation, date defaults, float comparison and rounding, and the
shared input validators used by every record model.
"""

from __future__ import annotations

import calendar
import datetime
import math
import uuid
from typing import Any

from core.config import (
    DEFAULT_TERM_LENGTH_MONTHS,
    FLOAT_ABS_TOLERANCE,
    GRADE_PRECISION,
)
from core.errors import InvalidArgumentError


def generate_uuid() -> str:
    return str(uuid.uuid4())


def get_today_date() -> datetime.date:
    return datetime.date.today()


# === string helpers ===


def is_only_whitespace(text: str) -> bool:
    return not text.strip()


def normalize(text: str) -> str:
    return text.strip().lower()


# === float helpers ===


def float_equal(
    a: float,
    b: float,
    rel_tol: float = 1e-6,
    abs_tol: float = FLOAT_ABS_TOLERANCE,
) -> bool:
    """
    Compares two floats using both a relative and an absolute tolerance.

    Returns:
        True if the values are within `max(rel_tol * max(|a|, |b|), abs_tol)` of each other.
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def float_round(value: float, places: int = GRADE_PRECISION) -> float:
    """
    Rounds a value to the given number of decimal places, with halves rounded away from zero.

    Notes:
        - Python's built-in `round()` uses banker's rounding, so 0.125 would become 0.12.
          Grades are always rounded half away from zero instead.
    """
    factor = 10**places
    scaled = math.floor(abs(value) * factor + 0.5)

    return math.copysign(scaled / factor, value)


# === date helpers ===


def add_months(start: datetime.date, months: int) -> datetime.date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])

    return datetime.date(year, month, day)


def default_start_date() -> datetime.date:
    return get_today_date()


def default_end_date(start_date: datetime.date) -> datetime.date:
    return add_months(start_date, DEFAULT_TERM_LENGTH_MONTHS)


# === data validators ===


def validate_required_string(value: Any, field: str = "Title") -> str:
    """
    Validates that a required text field is a string containing more than whitespace.

    Args:
        value (Any): The input value to validate.
        field (str): The field name used in the error message.

    Returns:
        The unchanged string.

    Raises:
        InvalidArgumentError: If the input is not a string or is empty after trimming.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} must be a string.")

    if is_only_whitespace(value):
        raise InvalidArgumentError(f"{field} must be non-empty.")

    return value


def validate_optional_string(value: Any) -> str:
    """
    Normalizes an optional text field: None and whitespace-only strings become "".
    """
    if value is None:
        return ""

    if not isinstance(value, str):
        raise InvalidArgumentError("Description must be a string.")

    return "" if is_only_whitespace(value) else value


def validate_date(value: Any, field: str = "Date") -> datetime.date:
    """
    Validates and normalizes a calendar date.

    Accepts a `datetime.date`, a `datetime.datetime` (truncated to its date), or an
    ISO-formatted "YYYY-MM-DD" string.

    Returns:
        The validated `datetime.date`.

    Raises:
        InvalidArgumentError: If the input is not a date or names a non-existent day (e.g. 2025-02-30).
    """
    if isinstance(value, datetime.datetime):
        return value.date()

    if isinstance(value, datetime.date):
        return value

    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value.strip())

        except ValueError:
            raise InvalidArgumentError(
                f"{field} is invalid. Dates must be real days formatted as YYYY-MM-DD."
            ) from None

    raise InvalidArgumentError(f"{field} is invalid.")


def validate_date_order(start_date: datetime.date, end_date: datetime.date) -> None:
    """
    Raises:
        InvalidArgumentError: If the start date falls after the end date.
    """
    if start_date > end_date:
        raise InvalidArgumentError("Start date must be on or before the end date.")
