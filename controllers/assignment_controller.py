# controllers/assignment_controller.py

"""
Coordinates `Assignment` records inside a single `Course`.

The controller holds the course handle and a case-insensitive title lookup, so callers can
address assignments by title. Every mutation that can affect grading asks the course to
recompute its derived grade fields afterwards.
"""

from __future__ import annotations

import datetime
import logging

from core.response import Response
from controllers.common import TitleIndex, failure_response
from models.assignment import Assignment
from models.course import Course

logger = logging.getLogger(__name__)


class AssignmentController:

    def __init__(self, course: Course):
        self._course = course
        self._titles: TitleIndex[Assignment] = TitleIndex(
            "Assignment", course.assignments
        )
        self._active_assignment: Assignment | None = None

    # === properties ===

    @property
    def course(self) -> Course:
        return self._course

    @property
    def assignments(self) -> dict[str, Assignment]:
        return self._course.assignments

    @property
    def active_assignment(self) -> Assignment | None:
        return self._active_assignment

    # === data accessors ===

    def get_assignment_id(self, title: str) -> str:
        """
        Raises:
            NotFoundError: If no assignment in the course has the given title.
        """
        return self._titles.get_id(title)

    def find_assignment(self, title: str) -> Response:
        """
        Finds an `Assignment` in the course by title, ignoring case and surrounding whitespace.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the assignment was found.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no assignment has the title.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The matched `Assignment` object.

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            assignment = self._course.find_assignment(self._titles.get_id(title))

        except Exception as e:
            return failure_response(e, "Failed to find assignment", logger)

        else:
            return Response.succeed(
                data={
                    "record": assignment,
                },
            )

    def select_assignment(self, title: str) -> Response:
        """
        Marks the titled `Assignment` as the active assignment.

        Returns:
            Response: On success, data contains "record" (Assignment). Fails with
            `ErrorCode.NOT_FOUND` if no assignment has the title.
        """
        find_response = self.find_assignment(title)

        if not find_response.success:
            return find_response

        self._active_assignment = find_response.data["record"]

        return Response.succeed(
            detail=f"Assignment selected: {self._active_assignment.title}.",
            data=find_response.data,
        )

    # === data manipulators ===

    def add_assignment(
        self,
        title: str,
        description: str | None = "",
        category: str | None = None,
        due_date: datetime.date | str | None = None,
        completed: bool = False,
        grade: float = 0.0,
    ) -> Response:
        """
        Creates an `Assignment` from the given fields and adds it to the course.

        Args:
            category (str | None): A category weighted by the course; None picks
                `Course.default_category`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the assignment was created and added.
                    - False if validation fails or the title is already used in this course.
                - detail (str | None): A human-readable description of the result.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` for an empty title, an invalid date, or a category
                      the course does not weight.
                    - `ErrorCode.OUT_OF_RANGE` for a grade outside 0 to 100.
                    - `ErrorCode.LOGIC_ERROR` for a duplicate title.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The added `Assignment` object.

        Notes:
            - The title is checked for uniqueness before the course is touched, so a failed add
              never leaves a partially added record.
            - The course recomputes its grade fields on success.
        """
        if category is None:
            category = self._course.default_category

        try:
            assignment = Assignment(
                title=title,
                description=description,
                category=category,
                due_date=due_date,
                completed=completed,
                grade=grade,
            )

            self._titles.require_unique(assignment.title)
            self._course.add_assignment(assignment)

        except Exception as e:
            return failure_response(e, "Failed to add assignment", logger)

        else:
            logger.debug("Added assignment %s to course %s", assignment.id, self._course.id)

            return Response.succeed(
                detail="Assignment successfully added to the course.",
                data={
                    "record": assignment,
                },
            )

    def remove_assignment(self, title: str) -> Response:
        """
        Removes the titled `Assignment` from the course.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` if no assignment has the title.

        Notes:
            - Clears the active assignment if it was the one removed.
        """
        try:
            assignment = self._course.remove_assignment(self._titles.get_id(title))

        except Exception as e:
            return failure_response(e, "Failed to remove assignment", logger)

        else:
            if self._active_assignment == assignment:
                self._active_assignment = None

            logger.debug(
                "Removed assignment %s from course %s", assignment.id, self._course.id
            )

            return Response.succeed(
                detail="Assignment successfully removed from the course.",
            )

    # --- field edits, addressed by id ---

    def edit_title(self, id: str, new_title: str) -> Response:
        """
        Renames an `Assignment` once the new title is confirmed free in the course.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` for an unknown id,
            `ErrorCode.INVALID_FIELD_VALUE` for an empty title, or `ErrorCode.LOGIC_ERROR` if
            another assignment already uses the title.
        """
        try:
            assignment = self._course.find_assignment(id)
            self._titles.rename(assignment, new_title)

        except Exception as e:
            return failure_response(e, "Failed to update assignment title", logger)

        else:
            return Response.succeed(
                detail=f"Assignment title updated to {assignment.title}.",
                data={
                    "record": assignment,
                },
            )

    def edit_description(self, id: str, new_description: str | None) -> Response:
        try:
            assignment = self._course.find_assignment(id)
            assignment.description = new_description

        except Exception as e:
            return failure_response(e, "Failed to update assignment description", logger)

        else:
            return Response.succeed(
                detail="Assignment description updated.",
                data={
                    "record": assignment,
                },
            )

    def edit_category(self, id: str, new_category: str) -> Response:
        """
        Moves an `Assignment` to another category and recomputes the course grade.

        Returns:
            Response: Fails with `ErrorCode.INVALID_FIELD_VALUE` if the course does not weight
            the new category; the assignment keeps its old category.
        """
        try:
            assignment = self._course.find_assignment(id)
            assignment.category = self._course.validate_category(new_category)
            self._course.refresh_grades()

        except Exception as e:
            return failure_response(e, "Failed to update assignment category", logger)

        else:
            return Response.succeed(
                detail=f"Assignment category updated to {assignment.category}.",
                data={
                    "record": assignment,
                },
            )

    def edit_due_date(self, id: str, new_due_date: datetime.date | str) -> Response:
        try:
            assignment = self._course.find_assignment(id)
            assignment.due_date = new_due_date

        except Exception as e:
            return failure_response(e, "Failed to update assignment due date", logger)

        else:
            return Response.succeed(
                detail=f"Assignment due date updated to {assignment.due_date_iso}.",
                data={
                    "record": assignment,
                },
            )

    def edit_completed(self, id: str, new_completed: bool) -> Response:
        try:
            assignment = self._course.find_assignment(id)
            assignment.completed = new_completed
            self._course.refresh_grades()

        except Exception as e:
            return failure_response(e, "Failed to update assignment status", logger)

        else:
            return Response.succeed(
                detail=f"Assignment status updated to {assignment.status}.",
                data={
                    "record": assignment,
                },
            )

    def edit_grade(self, id: str, new_grade: float) -> Response:
        """
        Sets an `Assignment` grade and recomputes the course grade.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` for an unknown id,
            `ErrorCode.OUT_OF_RANGE` for a grade outside 0 to 100, or
            `ErrorCode.INVALID_FIELD_VALUE` for non-numeric input.
        """
        try:
            assignment = self._course.find_assignment(id)
            assignment.grade = new_grade
            self._course.refresh_grades()

        except Exception as e:
            return failure_response(e, "Failed to update assignment grade", logger)

        else:
            return Response.succeed(
                detail=f"Assignment grade updated to {assignment.grade}.",
                data={
                    "record": assignment,
                    "grade_pct": self._course.grade_pct,
                },
            )
