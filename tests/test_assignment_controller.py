# tests/test_assignment_controller.py

import logging

import pytest

from controllers.assignment_controller import AssignmentController
from controllers.common import failure_response
from core.errors import NotFoundError
from core.response import ErrorCode


@pytest.fixture
def assignment_controller(sample_course, sample_assignment):
    sample_course.add_assignment(sample_assignment)
    return AssignmentController(sample_course)


def test_controller_indexes_existing_assignments(assignment_controller):
    assert assignment_controller.get_assignment_id("problem set 1") == "a001"


def test_get_assignment_id_raises_for_unknown_title(assignment_controller):
    with pytest.raises(NotFoundError):
        assignment_controller.get_assignment_id("Lab 9")


# === lookups ===


def test_find_assignment_ignores_case_and_whitespace(assignment_controller, sample_assignment):
    response = assignment_controller.find_assignment("  PROBLEM SET 1 ")

    assert response.success
    assert response.data["record"] is sample_assignment


def test_find_missing_assignment(assignment_controller):
    response = assignment_controller.find_assignment("Lab 9")

    assert not response.success
    assert response.error == ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_select_assignment(assignment_controller, sample_assignment):
    response = assignment_controller.select_assignment("Problem Set 1")

    assert response.success
    assert assignment_controller.active_assignment is sample_assignment


# === data manipulators ===


def test_add_assignment(assignment_controller, sample_course):
    response = assignment_controller.add_assignment(
        "Midterm", category="Midterm", completed=True, grade=80.0
    )

    assert response.success
    assert response.data["record"] in sample_course.assignments.values()
    # 92.5 * 0.25/0.6 + 80 * 0.35/0.6
    assert sample_course.grade_pct == pytest.approx(85.21)


def test_add_duplicate_title_fails(assignment_controller, sample_course):
    response = assignment_controller.add_assignment("problem set 1")

    assert not response.success
    assert response.error == ErrorCode.LOGIC_ERROR
    assert response.status_code == 409
    assert len(sample_course.assignments) == 1


def test_add_assignment_with_bad_grade_fails(assignment_controller, sample_course):
    response = assignment_controller.add_assignment("Lab 1", completed=True, grade=120)

    assert response.error == ErrorCode.OUT_OF_RANGE
    assert len(sample_course.assignments) == 1


def test_add_assignment_with_blank_title_fails(assignment_controller):
    response = assignment_controller.add_assignment("  ")

    assert response.error == ErrorCode.INVALID_FIELD_VALUE


def test_failed_add_is_logged(assignment_controller, caplog):
    with caplog.at_level(logging.INFO, logger="controllers.assignment_controller"):
        assignment_controller.add_assignment("Problem Set 1")

    assert "Failed to add assignment" in caplog.text
    assert caplog.records[-1].levelno == logging.INFO


def test_type_error_is_logged_with_traceback(caplog):
    logger = logging.getLogger("controllers.assignment_controller")

    try:
        raise TypeError("unsupported operand type(s) for +: 'float' and 'str'")

    except TypeError as e:
        with caplog.at_level(logging.INFO, logger="controllers.assignment_controller"):
            response = failure_response(e, "Failed to update assignment grade", logger)

    assert response.error == ErrorCode.MISSING_REQUIRED_FIELD
    assert caplog.records[-1].levelno == logging.ERROR
    assert caplog.records[-1].exc_info is not None


def test_remove_assignment(assignment_controller, sample_course):
    assignment_controller.select_assignment("Problem Set 1")

    response = assignment_controller.remove_assignment("Problem Set 1")

    assert response.success
    assert sample_course.assignments == {}
    assert assignment_controller.active_assignment is None
    assert sample_course.letter_grade == "N/A"
    assert not assignment_controller.find_assignment("Problem Set 1").success


def test_remove_missing_assignment(assignment_controller, sample_course):
    response = assignment_controller.remove_assignment("Lab 9")

    assert response.error == ErrorCode.NOT_FOUND
    assert len(sample_course.assignments) == 1


# --- field edits ---


def test_edit_title_moves_index(assignment_controller):
    response = assignment_controller.edit_title("a001", "Problem Set One")

    assert response.success
    assert assignment_controller.find_assignment("problem set one").success
    assert not assignment_controller.find_assignment("Problem Set 1").success


def test_edit_title_rejects_duplicate(assignment_controller, sample_assignment):
    assignment_controller.add_assignment("Lab 1")

    response = assignment_controller.edit_title("a001", "LAB 1")

    assert response.error == ErrorCode.LOGIC_ERROR
    assert sample_assignment.title == "Problem Set 1"


def test_edit_title_same_title_different_case(assignment_controller, sample_assignment):
    response = assignment_controller.edit_title("a001", "PROBLEM SET 1")

    assert response.success
    assert sample_assignment.title == "PROBLEM SET 1"


def test_edit_grade_recomputes_course(assignment_controller, sample_course):
    response = assignment_controller.edit_grade("a001", 75.0)

    assert response.success
    assert response.data["grade_pct"] == 75.0
    assert sample_course.letter_grade == "C"


def test_edit_grade_out_of_range(assignment_controller, sample_assignment):
    response = assignment_controller.edit_grade("a001", -1)

    assert response.error == ErrorCode.OUT_OF_RANGE
    assert sample_assignment.grade == 92.5


def test_edit_grade_unknown_id(assignment_controller):
    response = assignment_controller.edit_grade("missing", 50.0)

    assert response.error == ErrorCode.NOT_FOUND


def test_edit_completed_recomputes_course(assignment_controller, sample_course):
    response = assignment_controller.edit_completed("a001", False)

    assert response.success
    assert sample_course.grade_pct == 0.0
    assert sample_course.letter_grade == "N/A"


def test_edit_category_recomputes_course(assignment_controller, sample_course):
    assignment_controller.add_assignment(
        "Final", category="Final Exam", completed=True, grade=70.0
    )

    response = assignment_controller.edit_category("a001", "Midterm")

    assert response.success
    # 92.5 * 0.35/0.75 + 70 * 0.4/0.75
    assert sample_course.grade_pct == pytest.approx(80.5)


def test_edit_category_rejects_unweighted_category(assignment_controller, sample_course):
    response = assignment_controller.edit_category("a001", "Quiz")

    assert response.error == ErrorCode.INVALID_FIELD_VALUE
    assert sample_course.find_assignment("a001").category == "Homework"
    assert sample_course.letter_grade == "A-"


def test_add_assignment_with_unweighted_category_fails(assignment_controller, sample_course):
    response = assignment_controller.add_assignment(
        "Quiz 1", category="Quiz", completed=True, grade=100.0
    )

    assert response.error == ErrorCode.INVALID_FIELD_VALUE
    assert len(sample_course.assignments) == 1
    assert not assignment_controller.find_assignment("Quiz 1").success


def test_add_assignment_uses_course_default_category(sample_course):
    sample_course.set_grade_weights({"Labs": 0.4, "Exams": 0.6})
    controller = AssignmentController(sample_course)

    response = controller.add_assignment("Lab 1", completed=True, grade=88.0)

    assert response.data["record"].category == "Exams"
    assert sample_course.letter_grade == "B+"


def test_title_checks_see_assignments_added_elsewhere(assignment_controller, sample_course):
    other = AssignmentController(sample_course)
    other.add_assignment("Lab 1")

    response = assignment_controller.add_assignment("lab 1")

    assert response.error == ErrorCode.LOGIC_ERROR
    assert assignment_controller.find_assignment("LAB 1").success
    assert len(sample_course.assignments) == 2


def test_edit_due_date(assignment_controller, sample_assignment):
    response = assignment_controller.edit_due_date("a001", "2025-10-01")

    assert response.success
    assert sample_assignment.due_date_iso == "2025-10-01"

    response = assignment_controller.edit_due_date("a001", "2025-10-32")

    assert response.error == ErrorCode.INVALID_FIELD_VALUE
    assert sample_assignment.due_date_iso == "2025-10-01"


def test_edit_description(assignment_controller, sample_assignment):
    assignment_controller.edit_description("a001", "   ")

    assert sample_assignment.description == ""
