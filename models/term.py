# models/term.py

"""
The Term model stores term metadata and owns zero or more `Course` records.

Term-level figures are computed on every read from the courses currently held, so they
always reflect edits made to a course after it was added:
- `total_credits`: the sum of each course's `num_credits`.
- `ovr_gpa`: the sum of each course's `gpa_val` divided by the number of courses. Credits do
  not weight the mean; `calculate_weighted_gpa()` provides the credit-weighted figure.

Notes:
- A term with no courses, or whose courses carry zero credits in total, reports a GPA of 0.0.
"""

from __future__ import annotations

import datetime

from core.errors import LogicError, NotFoundError
from core.utils import (
    default_end_date,
    default_start_date,
    generate_uuid,
    validate_date,
    validate_date_order,
    validate_required_string,
)
from models.course import Course


class Term:

    def __init__(
        self,
        title: str,
        start_date: datetime.date | str | None = None,
        end_date: datetime.date | str | None = None,
        active: bool = True,
        id: str | None = None,
    ):
        if start_date is None:
            start_date = default_start_date()
        start_date = validate_date(start_date, "Start date")

        if end_date is None:
            end_date = default_end_date(start_date)
        end_date = validate_date(end_date, "End date")

        title = validate_required_string(title, "Title")
        validate_date_order(start_date, end_date)

        self._id = id or generate_uuid()
        self._title = title
        self._start_date = start_date
        self._end_date = end_date
        self._is_active = bool(active)
        self._courses: dict[str, Course] = {}

    # === properties ===

    @property
    def courses(self) -> dict[str, Course]:
        return self._courses

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        self._title = validate_required_string(title, "Title")

    @property
    def start_date(self) -> datetime.date:
        return self._start_date

    @start_date.setter
    def start_date(self, start_date: datetime.date | str) -> None:
        start_date = validate_date(start_date, "Start date")
        validate_date_order(start_date, self._end_date)
        self._start_date = start_date

    @property
    def end_date(self) -> datetime.date:
        return self._end_date

    @end_date.setter
    def end_date(self, end_date: datetime.date | str) -> None:
        end_date = validate_date(end_date, "End date")
        validate_date_order(self._start_date, end_date)
        self._end_date = end_date

    @property
    def is_active(self) -> bool:
        return self._is_active

    @is_active.setter
    def is_active(self, active: bool) -> None:
        self._is_active = bool(active)

    @property
    def status(self) -> str:
        return "'ACTIVE'" if self._is_active else "'INACTIVE'"

    @property
    def total_credits(self) -> int:
        return self.calculate_total_credits()

    @property
    def ovr_gpa(self) -> float:
        return self.calculate_ovr_gpa()

    # === gpa calculations ===

    def calculate_total_credits(self) -> int:
        return sum(course.num_credits for course in self._courses.values())

    def calculate_ovr_gpa(self) -> float:
        """
        Computes the term GPA as the sum of course GPA values over the number of courses.

        Returns:
            The unweighted mean GPA, or 0.0 if there are no courses or no credits.
        """
        if not self._courses or self.calculate_total_credits() == 0:
            return 0.0

        total_gpa = sum(course.gpa_val for course in self._courses.values())

        return total_gpa / len(self._courses)

    def calculate_weighted_gpa(self) -> float:
        """
        Computes the credit-weighted term GPA: sum(gpa * credits) / sum(credits).

        Returns:
            The weighted GPA, or 0.0 if there are no credits.
        """
        total_credits = self.calculate_total_credits()

        if total_credits == 0:
            return 0.0

        weighted = sum(
            course.gpa_val * course.num_credits for course in self._courses.values()
        )

        return weighted / total_credits

    # === data manipulators ===

    def add_course(self, course: Course) -> None:
        """
        Raises:
            LogicError: If a course with the same id is already in this term.
        """
        if course.id in self._courses:
            raise LogicError("A course with the same ID already exists.")

        self._courses[course.id] = course

    def remove_course(self, id: str) -> Course:
        """
        Returns:
            The removed `Course`.

        Raises:
            NotFoundError: If no course has the given id.
        """
        try:
            return self._courses.pop(id)

        except KeyError:
            raise NotFoundError(f"Course not found: {id}.") from None

    def find_course(self, id: str) -> Course:
        """
        Raises:
            NotFoundError: If no course has the given id.
        """
        try:
            return self._courses[id]

        except KeyError:
            raise NotFoundError(f"Course not found: {id}.") from None

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "start_date": self._start_date.isoformat(),
            "end_date": self._end_date.isoformat(),
            "active": self._is_active,
            "courses": [c.to_dict() for c in self._courses.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Term:
        term = cls(
            id=data["id"],
            title=data["title"],
            start_date=data["start_date"],
            end_date=data["end_date"],
            active=data["active"],
        )

        for course_data in data.get("courses", []):
            term.add_course(Course.from_dict(course_data))

        return term

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented

        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Term({self._id}, {self._title}, {self._start_date.isoformat()}, {self._end_date.isoformat()}, {self._is_active})"

    def __str__(self) -> str:
        return f"TERM: title: {self._title}, id: {self._id}"
