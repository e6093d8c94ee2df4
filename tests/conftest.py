# tests/conftest.py

import datetime

import pytest

from controllers.course_controller import CourseController
from controllers.term_controller import TermController
from models.assignment import Assignment
from models.course import Course
from models.term import Term

START_DATE = datetime.date(2025, 8, 25)
END_DATE = datetime.date(2025, 12, 12)
DUE_DATE = datetime.date(2025, 9, 15)


@pytest.fixture
def sample_assignment():
    return Assignment(
        id="a001",
        title="Problem Set 1",
        description="Chapters 1-3",
        category="Homework",
        due_date=DUE_DATE,
        completed=True,
        grade=92.5,
    )


@pytest.fixture
def incomplete_assignment():
    return Assignment(
        id="a002",
        title="Midterm Exam",
        category="Midterm",
        due_date=DUE_DATE,
    )


@pytest.fixture
def sample_course():
    return Course(
        id="c001",
        title="CS 162",
        description="Intro to Computer Science II",
        start_date=START_DATE,
        end_date=END_DATE,
        num_credits=4,
    )


@pytest.fixture
def empty_course():
    return Course("MTH 251", start_date=START_DATE, end_date=END_DATE)


@pytest.fixture
def sample_term():
    return Term(id="t001", title="Fall 2025", start_date=START_DATE, end_date=END_DATE)


@pytest.fixture
def course_controller(sample_term):
    return CourseController(sample_term)


@pytest.fixture
def term_controller():
    controller = TermController()
    controller.add_term("Fall 2025", START_DATE, END_DATE)
    controller.select_term("Fall 2025")
    return controller


@pytest.fixture
def make_assignment():
    def _make_assignment(
        category: str, grade: float, completed: bool = True
    ) -> Assignment:
        return Assignment(
            title=f"{category} {grade}",
            category=category,
            due_date=DUE_DATE,
            completed=completed,
            grade=grade,
        )

    return _make_assignment


@pytest.fixture
def make_graded_course(make_assignment):
    def _make_graded_course(title: str, grade_pct: float, num_credits: int) -> Course:
        course = Course(
            title, start_date=START_DATE, end_date=END_DATE, num_credits=num_credits
        )
        course.add_assignment(make_assignment("Homework", grade_pct))
        return course

    return _make_graded_course
