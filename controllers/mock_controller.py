# controllers/mock_controller.py

"""
Stand-in `RecordController` for tests: every add succeeds without storing anything.
"""

from __future__ import annotations

from core.response import Response
from models.course import Course


class MockController:

    def __init__(self, term_gpa: float = 4.0):
        self._term_gpa = term_gpa

    def add_course(self, course_title: str, credits: int) -> Response:
        return Response.succeed(detail=f"Mock course accepted: {course_title}.")

    def add_assignment(
        self, course_id: str, assignment_title: str, grade: float
    ) -> Response:
        return Response.succeed(detail=f"Mock assignment accepted: {assignment_title}.")

    def get_term_gpa(self) -> float:
        return self._term_gpa

    def get_courses(self) -> dict[str, Course]:
        return {}
