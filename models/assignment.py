# models/assignment.py

"""
The Assignment model represents a single graded piece of coursework inside a `Course`.

Each `Assignment` stores a title, optional description, a grading category (a key into
the owning course's weight map), a due date, a completion flag, and a percentage grade
from 0 to 100.

Notes:
- An `Assignment` has no reference to its owning `Course`. After editing an assignment
  that is already tracked, the course must be told to recompute via `Course.refresh_grades()`.
- All validation happens before assignment, so a rejected setter leaves the field unchanged.
"""

from __future__ import annotations

import datetime
import math
from typing import Any

from core.config import DEFAULT_CATEGORY, MAX_ASSIGNMENT_GRADE
from core.errors import InvalidArgumentError, OutOfRangeError
from core.utils import (
    float_round,
    generate_uuid,
    get_today_date,
    validate_date,
    validate_optional_string,
    validate_required_string,
)


class Assignment:

    def __init__(
        self,
        title: str,
        description: str | None = "",
        category: str = DEFAULT_CATEGORY,
        due_date: datetime.date | str | None = None,
        completed: bool = False,
        grade: float = 0.0,
        id: str | None = None,
    ):
        if due_date is None:
            due_date = get_today_date()

        # validate everything before committing any field
        title = validate_required_string(title, "Title")
        description = validate_optional_string(description)
        category = validate_required_string(category, "Category")
        due_date = validate_date(due_date, "Due date")
        grade = Assignment.validate_grade_input(grade)

        self._id = id or generate_uuid()
        self._title = title
        self._description = description
        self._category = category
        self._due_date = due_date
        self._completed = bool(completed)
        self._grade = grade if self._completed else 0.0

    # === properties ===

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
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, description: str | None) -> None:
        self._description = validate_optional_string(description)

    @property
    def category(self) -> str:
        return self._category

    @category.setter
    def category(self, category: str) -> None:
        self._category = validate_required_string(category, "Category")

    @property
    def due_date(self) -> datetime.date:
        return self._due_date

    @due_date.setter
    def due_date(self, due_date: datetime.date | str) -> None:
        self._due_date = validate_date(due_date, "Due date")

    @property
    def due_date_iso(self) -> str:
        return self._due_date.isoformat()

    @property
    def completed(self) -> bool:
        return self._completed

    @completed.setter
    def completed(self, completed: bool) -> None:
        self._completed = bool(completed)

    @property
    def status(self) -> str:
        return "'COMPLETE'" if self._completed else "'INCOMPLETE'"

    def toggle_completed_status(self) -> None:
        self._completed = not self._completed

    @property
    def grade(self) -> float:
        return self._grade

    @grade.setter
    def grade(self, grade: float) -> None:
        self._grade = Assignment.validate_grade_input(grade)

    def set_grade_from_points(self, points_earned: float, total_points: float) -> None:
        """
        Sets the percentage grade from a points-earned / points-possible pair.

        Raises:
            InvalidArgumentError: If either value is not a number, or `total_points` is not positive.
            OutOfRangeError: If the resulting percentage falls outside 0 to 100.
        """
        try:
            points_earned = float(points_earned)
            total_points = float(total_points)

        except (TypeError, ValueError):
            raise InvalidArgumentError("Points must be numbers.") from None

        if total_points <= 0:
            raise InvalidArgumentError("Total points must be greater than 0.")

        self.grade = (points_earned / total_points) * 100.0

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "description": self._description,
            "category": self._category,
            "due_date": self.due_date_iso,
            "completed": self._completed,
            "grade": self._grade,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            category=data["category"],
            due_date=data["due_date"],
            completed=data["completed"],
            grade=data["grade"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented

        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Assignment({self._id}, {self._title}, {self._category}, {self.due_date_iso}, {self._completed}, {self._grade})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: title: {self._title}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_grade_input(grade: Any) -> float:
        """
        Validates and normalizes input for an `Assignment` grade.

        Accepts any input, and then:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it is between 0 and 100, inclusive.
            - Rounds to 2 decimal places, halves away from zero.

        Args:
            grade (Any): The input value to validate.

        Returns:
            The normalized grade value (float).

        Raises:
            InvalidArgumentError: If the input cannot be cast to float or is non-finite.
            OutOfRangeError: If the input is less than 0 or greater than 100.
        """
        if isinstance(grade, bool):
            raise InvalidArgumentError("Invalid input. Grade must be a number.")

        try:
            grade = float(grade)

        except (TypeError, ValueError):
            raise InvalidArgumentError("Invalid input. Grade must be a number.") from None

        if not math.isfinite(grade):
            raise InvalidArgumentError("Invalid input. Grade must be a finite number.")

        if grade < 0 or grade > MAX_ASSIGNMENT_GRADE:
            raise OutOfRangeError(
                f"Invalid input. Grade must be from 0 to {MAX_ASSIGNMENT_GRADE:g}."
            )

        return float_round(grade)
