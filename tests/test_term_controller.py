# tests/test_term_controller.py

import pytest

from controllers.course_controller import CourseController
from controllers.interfaces import RecordController
from controllers.mock_controller import MockController
from controllers.term_controller import TermController
from core.errors import LogicError
from core.response import ErrorCode


def test_add_term():
    controller = TermController()

    response = controller.add_term("Fall 2025", "2025-08-25", "2025-12-12")

    assert response.success
    term = response.data["record"]
    assert controller.terms == {term.id: term}
    assert controller.active_term is None


def test_add_duplicate_term_fails(term_controller):
    response = term_controller.add_term("FALL 2025")

    assert response.error == ErrorCode.LOGIC_ERROR
    assert len(term_controller.terms) == 1


def test_add_term_with_bad_dates_fails():
    controller = TermController()

    response = controller.add_term("Fall 2025", "2025-12-12", "2025-08-25")

    assert response.error == ErrorCode.INVALID_FIELD_VALUE
    assert controller.terms == {}


def test_select_term(term_controller):
    assert term_controller.active_term.title == "Fall 2025"
    assert isinstance(term_controller.get_course_controller(), CourseController)


def test_select_missing_term(term_controller):
    response = term_controller.select_term("Spring 2026")

    assert response.error == ErrorCode.NOT_FOUND
    assert term_controller.active_term.title == "Fall 2025"


def test_remove_term_clears_selection(term_controller):
    response = term_controller.remove_term("fall 2025")

    assert response.success
    assert term_controller.terms == {}
    assert term_controller.active_term is None

    with pytest.raises(LogicError):
        term_controller.get_course_controller()


def test_remove_missing_term_fails(term_controller):
    before = len(term_controller.terms)

    response = term_controller.remove_term("Spring 2026")

    assert response.error == ErrorCode.NOT_FOUND
    assert len(term_controller.terms) == before
    assert term_controller.active_term.title == "Fall 2025"


def test_edit_title(term_controller):
    term_id = term_controller.get_term_id("Fall 2025")

    response = term_controller.edit_title(term_id, "Autumn 2025")

    assert response.success
    assert term_controller.find_term("autumn 2025").success
    assert not term_controller.find_term("Fall 2025").success


def test_edit_start_date_after_end_fails(term_controller):
    term_id = term_controller.get_term_id("Fall 2025")

    response = term_controller.edit_start_date(term_id, "2026-01-01")

    assert response.error == ErrorCode.INVALID_FIELD_VALUE


# === record controller capabilities ===


def test_term_controller_is_a_record_controller(term_controller):
    assert isinstance(term_controller, RecordController)


def test_capabilities_require_selected_term():
    controller = TermController()

    response = controller.add_course("CS 162", 4)

    assert response.error == ErrorCode.LOGIC_ERROR

    with pytest.raises(LogicError):
        controller.get_term_gpa()

    with pytest.raises(LogicError):
        controller.get_courses()


def test_term_gpa_through_capabilities(term_controller):
    grades = {"CS 161": (81.0, 3), "CS 162": (91.0, 3), "CS 225": (78.0, 1)}

    for title, (grade, credits) in grades.items():
        course = term_controller.add_course(title, credits).data["record"]
        response = term_controller.add_assignment(course.id, f"{title} Final", grade)
        assert response.success

    assert len(term_controller.get_courses()) == 3
    assert term_controller.get_term_gpa() == pytest.approx(2.9)


def test_add_assignment_to_unknown_course(term_controller):
    response = term_controller.add_assignment("missing", "Lab 1", 90.0)

    assert response.error == ErrorCode.NOT_FOUND


def test_add_assignment_rejects_duplicate_title(term_controller):
    course = term_controller.add_course("CS 162", 4).data["record"]
    term_controller.add_assignment(course.id, "Lab 1", 90.0)

    response = term_controller.add_assignment(course.id, "lab 1", 80.0)

    assert response.error == ErrorCode.LOGIC_ERROR
    assert len(course.assignments) == 1


def test_add_assignment_to_selected_course_keeps_index(term_controller):
    course = term_controller.add_course("CS 162", 4).data["record"]
    course_controller = term_controller.get_course_controller()
    course_controller.select_course("CS 162")

    term_controller.add_assignment(course.id, "Lab 1", 90.0)

    assignment_controller = course_controller.get_assignment_controller()
    assert assignment_controller.find_assignment("Lab 1").success


def test_add_assignment_uses_a_weighted_category(term_controller):
    course = term_controller.add_course("CS 162", 4).data["record"]
    course.set_grade_weights({"Exams": 1.0})

    response = term_controller.add_assignment(course.id, "Final", 95.0)

    assert response.success
    assert response.data["record"].category == "Exams"
    assert course.grade_pct == 95.0
    assert course.letter_grade == "A"
    assert term_controller.get_term_gpa() == 4.0


def test_stale_selection_still_rejects_duplicate_titles(term_controller):
    cs161 = term_controller.add_course("CS 161", 4).data["record"]
    term_controller.add_course("CS 162", 4)
    course_controller = term_controller.get_course_controller()

    cs161_assignments = course_controller.select_course("CS 161").data[
        "assignment_controller"
    ]
    course_controller.select_course("CS 162")

    assert term_controller.add_assignment(cs161.id, "Lab 1", 90.0).success

    response = cs161_assignments.add_assignment("lab 1", completed=True, grade=80.0)

    assert response.error == ErrorCode.LOGIC_ERROR
    assert [a.title for a in cs161.assignments.values()] == ["Lab 1"]


def test_course_titles_added_through_another_controller_are_seen(term_controller):
    first = term_controller.get_course_controller()
    term_controller.select_term("Fall 2025")
    second = term_controller.get_course_controller()

    second.add_course("CS 162")

    assert first.find_course("cs 162").success
    assert first.add_course("CS 162").error == ErrorCode.LOGIC_ERROR


# === mock controller ===


def test_mock_controller_is_a_record_controller():
    assert isinstance(MockController(), RecordController)


def test_mock_controller_accepts_everything():
    mock = MockController(term_gpa=3.5)

    course_response = mock.add_course("CS 162", 4)
    assignment_response = mock.add_assignment("any", "Lab 1", 100.0)

    assert course_response.success
    assert course_response.detail == "Mock course accepted: CS 162."
    assert assignment_response.detail == "Mock assignment accepted: Lab 1."
    assert mock.get_term_gpa() == 3.5
    assert mock.get_courses() == {}
