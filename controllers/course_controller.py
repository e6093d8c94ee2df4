# controllers/course_controller.py

"""
Coordinates `Course` records inside a single `Term`.

Selecting a course creates an `AssignmentController` for it, which is how callers reach
that course's assignments.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from typing import Any

from core.config import DEFAULT_NUM_CREDITS
from core.errors import LogicError
from core.response import Response
from controllers.assignment_controller import AssignmentController
from controllers.common import TitleIndex, failure_response
from models.course import Course
from models.term import Term

logger = logging.getLogger(__name__)


class CourseController:

    def __init__(self, term: Term):
        self._term = term
        self._titles: TitleIndex[Course] = TitleIndex("Course", term.courses)
        self._active_course: Course | None = None
        self._assignment_controller: AssignmentController | None = None

    # === properties ===

    @property
    def term(self) -> Term:
        return self._term

    @property
    def courses(self) -> dict[str, Course]:
        return self._term.courses

    @property
    def active_course(self) -> Course | None:
        return self._active_course

    # === data accessors ===

    def get_course_id(self, title: str) -> str:
        """
        Raises:
            NotFoundError: If no course in the term has the given title.
        """
        return self._titles.get_id(title)

    def get_assignment_controller(self) -> AssignmentController:
        """
        Raises:
            LogicError: If no course is selected.
        """
        if self._assignment_controller is None:
            raise LogicError("No course selected.")

        return self._assignment_controller

    def assignment_controller_for(self, course_id: str) -> AssignmentController:
        """
        Returns the `AssignmentController` for a course, reusing the selected one when it matches.

        Raises:
            NotFoundError: If no course has the given id.
        """
        course = self._term.find_course(course_id)

        if self._assignment_controller is not None and self._active_course == course:
            return self._assignment_controller

        return AssignmentController(course)

    def find_course(self, title: str) -> Response:
        """
        Finds a `Course` in the term by title, ignoring case and surrounding whitespace.

        Returns:
            Response: On success, data contains "record" (Course). Fails with
            `ErrorCode.NOT_FOUND` if no course has the title.

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            course = self._term.find_course(self._titles.get_id(title))

        except Exception as e:
            return failure_response(e, "Failed to find course", logger)

        else:
            return Response.succeed(
                data={
                    "record": course,
                },
            )

    def select_course(self, title: str) -> Response:
        """
        Marks the titled `Course` as active and creates its `AssignmentController`.

        Returns:
            Response: On success, data contains "record" (Course) and
            "assignment_controller" (AssignmentController).
        """
        find_response = self.find_course(title)

        if not find_response.success:
            return find_response

        course = find_response.data["record"]

        try:
            assignment_controller = AssignmentController(course)

        except Exception as e:
            return failure_response(e, "Failed to select course", logger)

        self._active_course = course
        self._assignment_controller = assignment_controller

        return Response.succeed(
            detail=f"Course selected: {course.title}.",
            data={
                "record": course,
                "assignment_controller": assignment_controller,
            },
        )

    # === data manipulators ===

    def add_course(
        self,
        title: str,
        description: str | None = "",
        start_date: datetime.date | str | None = None,
        end_date: datetime.date | str | None = None,
        num_credits: int = DEFAULT_NUM_CREDITS,
        active: bool = True,
    ) -> Response:
        """
        Creates a `Course` from the given fields and adds it to the term.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the course was created and added.
                    - False if validation fails or the title is already used in this term.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` for an empty title, invalid dates, or a start date after the end date.
                    - `ErrorCode.OUT_OF_RANGE` for negative credits.
                    - `ErrorCode.LOGIC_ERROR` for a duplicate title.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Course): The added `Course` object.
        """
        try:
            course = Course(
                title=title,
                description=description,
                start_date=start_date,
                end_date=end_date,
                num_credits=num_credits,
                active=active,
            )

            self._titles.require_unique(course.title)
            self._term.add_course(course)

        except Exception as e:
            return failure_response(e, "Failed to add course", logger)

        else:
            logger.debug("Added course %s to term %s", course.id, self._term.id)

            return Response.succeed(
                detail="Course successfully added to the term.",
                data={
                    "record": course,
                },
            )

    def remove_course(self, title: str) -> Response:
        """
        Removes the titled `Course`, and all of its assignments, from the term.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` if no course has the title.

        Notes:
            - Clears the selection if the removed course was selected.
        """
        try:
            course = self._term.remove_course(self._titles.get_id(title))

        except Exception as e:
            return failure_response(e, "Failed to remove course", logger)

        else:
            if self._active_course == course:
                self._active_course = None
                self._assignment_controller = None

            logger.debug("Removed course %s from term %s", course.id, self._term.id)

            return Response.succeed(
                detail="Course successfully removed from the term.",
            )

    # --- field edits, addressed by id ---

    def _edit_course(self, id: str, field: str, value: Any) -> Response:
        try:
            course = self._term.find_course(id)
            setattr(course, field, value)

        except Exception as e:
            return failure_response(e, f"Failed to update course {field}", logger)

        else:
            return Response.succeed(
                detail=f"Course {field} updated.",
                data={
                    "record": course,
                },
            )

    def edit_title(self, id: str, new_title: str) -> Response:
        try:
            course = self._term.find_course(id)
            self._titles.rename(course, new_title)

        except Exception as e:
            return failure_response(e, "Failed to update course title", logger)

        else:
            return Response.succeed(
                detail=f"Course title updated to {course.title}.",
                data={
                    "record": course,
                },
            )

    def edit_description(self, id: str, new_description: str | None) -> Response:
        return self._edit_course(id, "description", new_description)

    def edit_start_date(self, id: str, new_start_date: datetime.date | str) -> Response:
        return self._edit_course(id, "start_date", new_start_date)

    def edit_end_date(self, id: str, new_end_date: datetime.date | str) -> Response:
        return self._edit_course(id, "end_date", new_end_date)

    def edit_num_credits(self, id: str, new_num_credits: int) -> Response:
        return self._edit_course(id, "num_credits", new_num_credits)

    def edit_active(self, id: str, new_active: bool) -> Response:
        return self._edit_course(id, "is_active", new_active)

    # --- grading configuration ---

    def edit_grade_weights(self, id: str, new_weights: Mapping[str, Any]) -> Response:
        """
        Replaces a course's category weights.

        Returns:
            Response: Fails with `ErrorCode.INVALID_FIELD_VALUE` if the weights do not sum to
            100%; the previous weights stay in place. On success, data contains "record" and
            "grade_pct".
        """
        try:
            course = self._term.find_course(id)
            course.set_grade_weights(new_weights)

        except Exception as e:
            return failure_response(e, "Failed to update grade weights", logger)

        else:
            return Response.succeed(
                detail="Grade weights updated.",
                data={
                    "record": course,
                    "grade_pct": course.grade_pct,
                },
            )

    def edit_grade_scale(self, id: str, new_scale: Mapping[Any, str]) -> Response:
        try:
            course = self._term.find_course(id)
            course.set_grade_scale(new_scale)

        except Exception as e:
            return failure_response(e, "Failed to update grade scale", logger)

        else:
            return Response.succeed(
                detail="Grade scale updated.",
                data={
                    "record": course,
                    "letter_grade": course.letter_grade,
                },
            )

    def edit_grade_pct(self, id: str, new_grade_pct: float | None = None) -> Response:
        """
        Overrides a course's percentage, or recomputes it from assignments when None is given.

        Returns:
            Response: Fails with `ErrorCode.OUT_OF_RANGE` for a value outside 0 to 150.
        """
        try:
            course = self._term.find_course(id)
            course.set_grade_pct(new_grade_pct)

        except Exception as e:
            return failure_response(e, "Failed to update grade percentage", logger)

        else:
            return Response.succeed(
                detail=f"Grade percentage set to {course.grade_pct}.",
                data={
                    "record": course,
                    "grade_pct": course.grade_pct,
                    "letter_grade": course.letter_grade,
                    "gpa_val": course.gpa_val,
                },
            )
