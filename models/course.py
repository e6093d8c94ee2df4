# models/course.py

"""
The Course model stores course metadata and owns zero or more `Assignment` records.

Each course rolls its assignments up into derived grade fields:
- `grades_by_category`: the mean grade of completed assignments in each weighted category.
- `grade_pct`: the weighted course percentage, renormalized over categories that have completed work.
- `letter_grade`: the label of the greatest grade scale threshold at or below `grade_pct`.
- `gpa_val`: the grade points associated with `letter_grade`.

Derived fields are always recomputed together, in that order, by every mutator that can
change the percentage (adding or removing assignments, changing weights or scale, and the
manual override in `set_grade_pct()`).

Notes:
- The default tables are read-only; every `Course` starts with its own copy of the default
  grade weights and grade scale, which it may replace independently.
- Every assignment's category must be a key of the course's grade weights.
- Assignments are held by reference. After editing a tracked assignment in place, call
  `refresh_grades()`.
"""

from __future__ import annotations

import bisect
import datetime
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from core.config import (
    DEFAULT_CATEGORY,
    DEFAULT_NUM_CREDITS,
    GRADE_WEIGHT_TOLERANCE,
    MAX_COURSE_GRADE_PCT,
    NO_GRADE,
)
from core.errors import (
    InvalidArgumentError,
    LogicError,
    NotFoundError,
    OutOfRangeError,
)
from core.utils import (
    default_end_date,
    default_start_date,
    float_equal,
    float_round,
    generate_uuid,
    validate_date,
    validate_date_order,
    validate_optional_string,
    validate_required_string,
)
from models.assignment import Assignment

# default grade weights if unset; must add up to 1.0
DEFAULT_GRADE_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "Homework": 0.25,
        "Midterm": 0.35,
        "Final Exam": 0.4,
    }
)

# lower percentage threshold for each letter grade
DEFAULT_GRADE_SCALE: Mapping[float, str] = MappingProxyType(
    {
        0.0: "F",
        60.0: "D-",
        63.0: "D",
        67.0: "D+",
        70.0: "C-",
        73.0: "C",
        77.0: "C+",
        80.0: "B-",
        83.0: "B",
        87.0: "B+",
        90.0: "A-",
        93.0: "A",
        97.0: "A+",
    }
)

GPA_SCALE: Mapping[str, float] = MappingProxyType(
    {
        "A+": 4.0,
        "A": 4.0,
        "A-": 3.7,
        "B+": 3.3,
        "B": 3.0,
        "B-": 2.7,
        "C+": 2.3,
        "C": 2.0,
        "C-": 1.7,
        "D+": 1.3,
        "D": 1.0,
        "D-": 0.7,
        "F": 0.0,
        NO_GRADE: 0.0,
    }
)


class Course:

    def __init__(
        self,
        title: str,
        description: str | None = "",
        start_date: datetime.date | str | None = None,
        end_date: datetime.date | str | None = None,
        num_credits: int = DEFAULT_NUM_CREDITS,
        active: bool = True,
        id: str | None = None,
    ):
        # internal defaulting for omitted dates
        if start_date is None:
            start_date = default_start_date()
        start_date = validate_date(start_date, "Start date")

        if end_date is None:
            end_date = default_end_date(start_date)
        end_date = validate_date(end_date, "End date")

        title = validate_required_string(title, "Title")
        description = validate_optional_string(description)
        validate_date_order(start_date, end_date)
        num_credits = Course.validate_num_credits_input(num_credits)

        self._id = id or generate_uuid()
        self._title = title
        self._description = description
        self._start_date = start_date
        self._end_date = end_date
        self._num_credits = num_credits
        self._is_active = bool(active)

        self._assignments: dict[str, Assignment] = {}
        self._grade_weights: dict[str, float] = dict(DEFAULT_GRADE_WEIGHTS)
        self._grade_scale: dict[float, str] = dict(DEFAULT_GRADE_SCALE)
        self._grades_by_category: dict[str, float] = {}
        self._grade_pct: float = 0.0
        self._letter_grade: str = NO_GRADE
        self._gpa_val: float = 0.0

    # === properties ===

    # --- core data structures ---

    @property
    def assignments(self) -> dict[str, Assignment]:
        return self._assignments

    @property
    def grade_weights(self) -> dict[str, float]:
        return dict(self._grade_weights)

    @property
    def grade_scale(self) -> dict[float, str]:
        return dict(self._grade_scale)

    @property
    def grades_by_category(self) -> dict[str, float]:
        return dict(self._grades_by_category)

    @property
    def default_category(self) -> str:
        """
        The category new assignments go into when none is named: "Homework" while the course
        weights it, otherwise the most heavily weighted category.
        """
        if DEFAULT_CATEGORY in self._grade_weights:
            return DEFAULT_CATEGORY

        return max(self._grade_weights, key=self._grade_weights.__getitem__)

    # --- metadata fields ---

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
    def num_credits(self) -> int:
        return self._num_credits

    @num_credits.setter
    def num_credits(self, num_credits: int) -> None:
        self._num_credits = Course.validate_num_credits_input(num_credits)

    @property
    def is_active(self) -> bool:
        return self._is_active

    @is_active.setter
    def is_active(self, active: bool) -> None:
        self._is_active = bool(active)

    @property
    def status(self) -> str:
        return "'ACTIVE'" if self._is_active else "'INACTIVE'"

    # --- derived grade fields ---

    @property
    def grade_pct(self) -> float:
        return self._grade_pct

    @property
    def letter_grade(self) -> str:
        return self._letter_grade

    @property
    def gpa_val(self) -> float:
        return self._gpa_val

    # === grade calculations ===

    def calculate_completed_assignments(self) -> int:
        return sum(1 for a in self._assignments.values() if a.completed)

    def calculate_grades_by_category(self) -> dict[str, float]:
        """
        Computes the mean grade of completed assignments for every weighted category.

        Returns:
            A new dict of category name -> mean grade (rounded to 2 places). Categories with no
            completed assignments, and categories missing from the weight map, are left out.

        Notes:
            - Also replaces `self.grades_by_category` with the result.
        """
        totals: dict[str, float] = {}
        counts: dict[str, int] = {}

        for assignment in self._assignments.values():
            if not assignment.completed:
                continue

            category = assignment.category
            totals[category] = totals.get(category, 0.0) + assignment.grade
            counts[category] = counts.get(category, 0) + 1

        grades_by_category = {
            category: float_round(totals[category] / counts[category])
            for category in self._grade_weights
            if counts.get(category, 0) > 0
        }

        self._grades_by_category = grades_by_category

        return dict(grades_by_category)

    def calculate_grade_pct(self) -> float:
        """
        Computes the weighted course percentage from the current assignments.

        Categories with no completed work are excluded and the remaining weights are
        renormalized to sum to 1.0, so an ungraded category counts as "not yet graded"
        rather than as zero.

        Returns:
            The course percentage rounded to 2 places, or 0.0 if nothing is completed.
        """
        if not self._assignments or self.calculate_completed_assignments() == 0:
            self._grades_by_category = {}
            return 0.0

        grades_by_category = self.calculate_grades_by_category()

        active_weight_total = sum(
            weight
            for category, weight in self._grade_weights.items()
            if category in grades_by_category
        )

        if float_equal(active_weight_total, 0.0):
            return 0.0

        total = 0.0

        for category, grade in grades_by_category.items():
            normalized_weight = self._grade_weights[category] / active_weight_total
            total += grade * normalized_weight

        return float_round(total)

    def calculate_letter_grade(
        self,
        grade_pct: float,
        grade_scale: Mapping[float, str] | None = None,
    ) -> str:
        """
        Maps a percentage onto a letter grade using a threshold scale.

        Args:
            grade_pct (float): The course percentage.
            grade_scale (Mapping[float, str] | None): Threshold -> label; defaults to this course's scale.

        Returns:
            - "N/A" if `grade_pct` is ~0 and no assignment is completed yet.
            - Otherwise the label of the greatest threshold <= `grade_pct`; the highest label if
              `grade_pct` exceeds every threshold.
        """
        if grade_scale is None:
            grade_scale = self._grade_scale

        if float_equal(grade_pct, 0.0) and self.calculate_completed_assignments() == 0:
            return NO_GRADE

        thresholds = sorted(grade_scale)
        index = bisect.bisect_right(thresholds, grade_pct)

        # grade_scale always contains 0, so this only happens for negative input
        if index == 0:
            return grade_scale[thresholds[0]]

        return grade_scale[thresholds[index - 1]]

    def calculate_gpa_val(self, letter_grade: str) -> float:
        """
        Raises:
            RuntimeError: If the letter grade is not in the GPA scale.
        """
        try:
            return GPA_SCALE[letter_grade]

        except KeyError:
            raise RuntimeError(
                f"Unrecognized letter grade: {letter_grade!r}. Letter grades must come from the GPA scale."
            ) from None

    # === data manipulators ===

    # --- derived grade fields ---

    def set_grade_pct(self, grade_pct: float | None = None) -> None:
        """
        Sets the course percentage and refreshes the letter grade and GPA value.

        Args:
            grade_pct (float | None):
                - None to recompute the percentage from assignments.
                - A number to override it manually (0 to 150 to allow for extra credit).

        Raises:
            InvalidArgumentError: If a manual value is not a finite number.
            OutOfRangeError: If a manual value is outside 0 to 150.
        """
        if grade_pct is None:
            self._grade_pct = self.calculate_grade_pct()
        else:
            self._grade_pct = Course.validate_grade_pct_input(grade_pct)

        self.set_letter_grade()
        self.set_gpa_val()

    def set_letter_grade(self) -> None:
        self._letter_grade = self.calculate_letter_grade(self._grade_pct)

    def set_gpa_val(self) -> None:
        self._gpa_val = self.calculate_gpa_val(self._letter_grade)

    def refresh_grades(self) -> None:
        self.set_grade_pct()

    # --- grading configuration ---

    def set_grade_weights(self, grade_weights: Mapping[str, Any]) -> None:
        """
        Replaces the category weights and recomputes the course grade.

        Raises:
            InvalidArgumentError: If the mapping is empty, any weight is invalid, the weights do
                not sum to 1.0 within tolerance, or a tracked assignment's category would lose its
                weight. The previous weights are left in place.
        """
        grade_weights = Course.validate_grade_weights_input(grade_weights)

        for assignment in self._assignments.values():
            if assignment.category not in grade_weights:
                raise InvalidArgumentError(
                    f"Grade weights must include {assignment.category!r}, "
                    f"the category of '{assignment.title}'."
                )

        self._grade_weights = grade_weights
        self.refresh_grades()

    def set_grade_scale(self, grade_scale: Mapping[Any, str]) -> None:
        """
        Replaces the grade scale and recomputes the course grade.

        Raises:
            InvalidArgumentError: If the scale is malformed. The previous scale is left in place.
        """
        self._grade_scale = Course.validate_grade_scale_input(grade_scale)
        self.refresh_grades()

    # --- assignment manipulation ---

    def add_assignment(self, assignment: Assignment) -> None:
        """
        Raises:
            LogicError: If an assignment with the same id is already in this course.
            InvalidArgumentError: If the assignment's category has no weight in this course.
        """
        if assignment.id in self._assignments:
            raise LogicError("An assignment with the same ID already exists.")

        self.validate_category(assignment.category)

        self._assignments[assignment.id] = assignment
        self.refresh_grades()

    def remove_assignment(self, id: str) -> Assignment:
        """
        Returns:
            The removed `Assignment`.

        Raises:
            NotFoundError: If no assignment has the given id.
        """
        try:
            assignment = self._assignments.pop(id)

        except KeyError:
            raise NotFoundError(f"Assignment not found: {id}.") from None

        self.refresh_grades()

        return assignment

    def find_assignment(self, id: str) -> Assignment:
        """
        Raises:
            NotFoundError: If no assignment has the given id.
        """
        try:
            return self._assignments[id]

        except KeyError:
            raise NotFoundError(f"Assignment not found: {id}.") from None

    def validate_category(self, category: str) -> str:
        """
        Raises:
            InvalidArgumentError: If the category is not a key of this course's grade weights.
        """
        if category not in self._grade_weights:
            weighted = ", ".join(self._grade_weights)
            raise InvalidArgumentError(
                f"Category {category!r} has no weight in this course. Weighted categories: {weighted}."
            )

        return category

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "description": self._description,
            "start_date": self._start_date.isoformat(),
            "end_date": self._end_date.isoformat(),
            "num_credits": self._num_credits,
            "active": self._is_active,
            "grade_weights": dict(self._grade_weights),
            "grade_scale": [
                [threshold, label]
                for threshold, label in sorted(self._grade_scale.items())
            ],
            "assignments": [a.to_dict() for a in self._assignments.values()],
            "grade_pct": self._grade_pct,
            "letter_grade": self._letter_grade,
            "gpa_val": self._gpa_val,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Course:
        """
        Rebuilds a `Course` and its assignments from `to_dict()` output.

        Notes:
            - Derived grade fields are recomputed from the assignments rather than read back.
        """
        course = cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            start_date=data["start_date"],
            end_date=data["end_date"],
            num_credits=data["num_credits"],
            active=data["active"],
        )

        if "grade_weights" in data:
            course._grade_weights = Course.validate_grade_weights_input(
                data["grade_weights"]
            )

        if "grade_scale" in data:
            course._grade_scale = Course.validate_grade_scale_input(
                {threshold: label for threshold, label in data["grade_scale"]}
            )

        for assignment_data in data.get("assignments", []):
            assignment = Assignment.from_dict(assignment_data)
            course.validate_category(assignment.category)
            course._assignments[assignment.id] = assignment

        course.refresh_grades()

        return course

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented

        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Course({self._id}, {self._title}, {self._num_credits}, {self._grade_pct}, {self._letter_grade}, {self._is_active})"

    def __str__(self) -> str:
        return f"COURSE: title: {self._title}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_num_credits_input(num_credits: Any) -> int:
        """
        Validates input for a `Course` credit count.

        Raises:
            InvalidArgumentError: If the input is not an integer.
            OutOfRangeError: If the input is negative.
        """
        if isinstance(num_credits, bool) or not isinstance(num_credits, int):
            raise InvalidArgumentError("Number of credits must be a whole number.")

        if num_credits < 0:
            raise OutOfRangeError(
                "Number of credits must be greater than or equal to 0."
            )

        return num_credits

    @staticmethod
    def validate_grade_pct_input(grade_pct: Any) -> float:
        """
        Validates input for a manual course percentage override.

        Raises:
            InvalidArgumentError: If the input cannot be cast to float or is non-finite.
            OutOfRangeError: If the input is outside 0 to 150.
        """
        try:
            grade_pct = float(grade_pct)

        except (TypeError, ValueError):
            raise InvalidArgumentError(
                "Grade percentage must be a number."
            ) from None

        if not math.isfinite(grade_pct):
            raise InvalidArgumentError("Grade percentage must be a finite number.")

        if grade_pct < 0 or grade_pct > MAX_COURSE_GRADE_PCT:
            raise OutOfRangeError(
                f"Grade percentage must be from 0 to {MAX_COURSE_GRADE_PCT:g}."
            )

        return grade_pct

    @staticmethod
    def validate_grade_weights_input(grade_weights: Any) -> dict[str, float]:
        """
        Validates and normalizes a category -> weight mapping.

        Accepts any mapping, and then:
            - Ensures it is non-empty.
            - Ensures every key is a non-empty category name.
            - Casts every weight to float and ensures it is finite and between 0 and 1.
            - Ensures the weights sum to 1.0 within a 1e-5 tolerance.

        Returns:
            A new dict of the normalized weights.

        Raises:
            InvalidArgumentError: If any of the checks fail.
        """
        if not isinstance(grade_weights, Mapping) or not grade_weights:
            raise InvalidArgumentError("Grade weights must be a non-empty mapping.")

        normalized: dict[str, float] = {}

        for category, weight in grade_weights.items():
            validate_required_string(category, "Category")

            try:
                weight = float(weight)

            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    f"Weight for {category!r} must be a number."
                ) from None

            if not math.isfinite(weight) or weight < 0 or weight > 1:
                raise InvalidArgumentError(
                    f"Weight for {category!r} must be a finite number from 0 to 1."
                )

            normalized[category] = weight

        total = sum(normalized.values())

        if not float_equal(
            total,
            1.0,
            rel_tol=GRADE_WEIGHT_TOLERANCE,
            abs_tol=GRADE_WEIGHT_TOLERANCE,
        ):
            raise InvalidArgumentError(
                f"Grade weights must equal 100%. Current total: {total * 100:.2f}%"
            )

        return normalized

    @staticmethod
    def validate_grade_scale_input(grade_scale: Any) -> dict[float, str]:
        """
        Validates and normalizes a threshold -> letter grade mapping.

        Accepts any mapping, and then:
            - Ensures it is non-empty.
            - Casts every threshold to float and ensures it is finite, non-negative, and below 100.
            - Ensures a threshold of 0 is present so every percentage maps to a label.
            - Ensures every label is a letter grade known to the GPA scale.

        Returns:
            A new dict of the normalized scale.

        Raises:
            InvalidArgumentError: If any of the checks fail.
        """
        if not isinstance(grade_scale, Mapping) or not grade_scale:
            raise InvalidArgumentError("Grade scale must be a non-empty mapping.")

        normalized: dict[float, str] = {}

        for threshold, label in grade_scale.items():
            try:
                threshold = float(threshold)

            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    "Grade scale thresholds must be numbers."
                ) from None

            if not math.isfinite(threshold) or threshold < 0:
                raise InvalidArgumentError(
                    "Grade scale thresholds must be finite and non-negative."
                )

            if threshold >= 100:
                raise InvalidArgumentError(
                    "Grade scale includes values greater than or equal to 100."
                )

            if label not in GPA_SCALE or label == NO_GRADE:
                raise InvalidArgumentError(
                    f"Grade scale label {label!r} is not a recognized letter grade."
                )

            normalized[threshold] = label

        if 0.0 not in normalized:
            raise InvalidArgumentError("Grade scale does not include 0.")

        return normalized
