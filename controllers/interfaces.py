# controllers/interfaces.py

"""
The capability set shared by the real and mock controllers.

Callers that only need to add records and read the term GPA should depend on
`RecordController`, so a `MockController` can stand in during tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.response import Response
from models.course import Course


@runtime_checkable
class RecordController(Protocol):

    def add_course(self, course_title: str, credits: int) -> Response: ...

    def add_assignment(
        self, course_id: str, assignment_title: str, grade: float
    ) -> Response: ...

    def get_term_gpa(self) -> float: ...

    def get_courses(self) -> dict[str, Course]: ...
