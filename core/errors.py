# core/errors.py

"""
Error kinds raised by the record models.

Each error also derives from the closest builtin exception, so callers that already
handle `ValueError` or `LookupError` keep working.
"""

from __future__ import annotations


class RecordError(Exception):
    """Base class for all record-keeping errors."""


class InvalidArgumentError(RecordError, ValueError):
    """Raised for malformed input to a constructor or setter."""


class OutOfRangeError(RecordError, ValueError):
    """Raised when a numeric value falls outside its valid domain."""


class NotFoundError(RecordError, LookupError):
    """Raised when an identifier or title does not match any record."""


class LogicError(RecordError):
    """Raised when an operation would violate a uniqueness or state invariant."""
