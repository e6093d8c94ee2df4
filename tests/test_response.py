# tests/test_response.py

import pytest

from core.errors import InvalidArgumentError, LogicError, NotFoundError, OutOfRangeError
from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(detail="Course successfully added.")

    assert response.success
    assert response.status_code == 200
    assert response.error is None
    assert response.data == {}
    assert str(response) == "Success: Course successfully added."


def test_fail_defaults():
    response = Response.fail(error=ErrorCode.LOGIC_ERROR)

    assert not response.success
    assert response.status_code == 400
    assert str(response) == "Error: LOGIC_ERROR"


@pytest.mark.parametrize(
    "exc, error, status_code",
    [
        (NotFoundError("Course not found: x."), ErrorCode.NOT_FOUND, 404),
        (LogicError("duplicate"), ErrorCode.LOGIC_ERROR, 409),
        (OutOfRangeError("too big"), ErrorCode.OUT_OF_RANGE, 400),
        (InvalidArgumentError("blank"), ErrorCode.INVALID_FIELD_VALUE, 400),
        (TypeError("missing argument"), ErrorCode.MISSING_REQUIRED_FIELD, 400),
        (KeyError("boom"), ErrorCode.INTERNAL_ERROR, 400),
    ],
)
def test_from_exception(exc, error, status_code):
    response = Response.from_exception(exc, "Failed to add course")

    assert not response.success
    assert response.error == error
    assert response.status_code == status_code


def test_from_exception_includes_context():
    response = Response.from_exception(LogicError("No term selected."), "Failed to add course")

    assert response.detail == "Failed to add course: No term selected."


def test_response_round_trips_through_dict():
    response = Response.fail(
        detail="Failed to find course: Course not found.",
        error=ErrorCode.NOT_FOUND,
        status_code=404,
    )

    payload = response.to_dict()
    restored = Response.from_dict(payload)

    assert payload["error"] == "NOT_FOUND"
    assert restored.error == ErrorCode.NOT_FOUND
    assert restored.detail == response.detail
    assert restored.status_code == 404


def test_model_errors_keep_builtin_bases():
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(NotFoundError, LookupError)
