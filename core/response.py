# core/response.py

from __future__ import annotations

from enum import Enum

from core.errors import InvalidArgumentError, LogicError, NotFoundError, OutOfRangeError


class ErrorCode(Enum):
    # === Not Found ===
    # unknown identifier or title
    NOT_FOUND = "NOT_FOUND"

    # === Constraint Violations ===
    # duplicate identifier or title, or no record selected
    LOGIC_ERROR = "LOGIC_ERROR"

    # === Validation Failures ===
    # required argument or attribute is missing
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # field value is malformed (empty title, invalid date, bad weights or scale)
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # numeric value is outside its valid domain
    OUT_OF_RANGE = "OUT_OF_RANGE"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object for controller manipulator and lookup methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
        trace (str | None): Optional exception traceback when errors occur.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
        trace: str | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}
        self._trace = trace

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data or {}

    @property
    def trace(self) -> str | None:
        return self._trace

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            error=None,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def from_exception(cls, exc: Exception, context: str) -> Response:
        """
        Builds a failed `Response` from an exception raised by the record models.

        Args:
            exc (Exception): The raised exception.
            context (str): A short prefix describing the attempted operation, e.g. "Failed to add course".

        Returns:
            Response: A failed response with the following mapping:
                - `NotFoundError` -> `ErrorCode.NOT_FOUND`, 404
                - `LogicError` -> `ErrorCode.LOGIC_ERROR`, 409
                - `OutOfRangeError` -> `ErrorCode.OUT_OF_RANGE`, 400
                - `InvalidArgumentError` -> `ErrorCode.INVALID_FIELD_VALUE`, 400
                - `TypeError` -> `ErrorCode.MISSING_REQUIRED_FIELD`, 400
                - anything else -> `ErrorCode.INTERNAL_ERROR`, 400
        """
        if isinstance(exc, NotFoundError):
            return cls.fail(
                detail=f"{context}: {exc}",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if isinstance(exc, LogicError):
            return cls.fail(
                detail=f"{context}: {exc}",
                error=ErrorCode.LOGIC_ERROR,
                status_code=409,
            )

        if isinstance(exc, OutOfRangeError):
            return cls.fail(
                detail=f"{context}: {exc}",
                error=ErrorCode.OUT_OF_RANGE,
            )

        if isinstance(exc, InvalidArgumentError):
            return cls.fail(
                detail=f"{context}: {exc}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if isinstance(exc, TypeError):
            return cls.fail(
                detail=f"{context}: {exc}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        return cls.fail(
            detail=f"Unexpected error: {exc}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "error": self.error.value if isinstance(self.error, Enum) else self.error,
            "detail": self.detail,
            "data": self.data,
            "status_code": self.status_code,
            "trace": self.trace,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> Response:
        error = payload.get("error")

        if error in ErrorCode._value2member_map_:
            error = ErrorCode(error)

        return cls(
            success=payload["success"],
            error=error,
            detail=payload.get("detail"),
            data=payload.get("data", {}),
            status_code=payload.get("status_code"),
            trace=payload.get("trace"),
        )

    # === dunder methods ===

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        else:
            error_str = (
                self.error.value if isinstance(self.error, Enum) else self.error or ""
            )
            return f"Error: {error_str}"
