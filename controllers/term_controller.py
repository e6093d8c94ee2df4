# controllers/term_controller.py

"""
Top-level coordinator: owns every `Term` and tracks which one is selected.

Selecting a term creates a `CourseController` for it. The controller also implements the
`RecordController` capability set against the selected term.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from core.errors import LogicError, NotFoundError
from core.response import Response
from controllers.common import TitleIndex, failure_response
from controllers.course_controller import CourseController
from models.course import Course
from models.term import Term

logger = logging.getLogger(__name__)


class TermController:

    def __init__(self):
        self._terms: dict[str, Term] = {}
        self._titles: TitleIndex[Term] = TitleIndex("Term", self._terms)
        self._active_term: Term | None = None
        self._course_controller: CourseController | None = None

    # === properties ===

    @property
    def terms(self) -> dict[str, Term]:
        return self._terms

    @property
    def active_term(self) -> Term | None:
        return self._active_term

    # === data accessors ===

    def get_term_id(self, title: str) -> str:
        """
        Raises:
            NotFoundError: If no term has the given title.
        """
        return self._titles.get_id(title)

    def get_course_controller(self) -> CourseController:
        """
        Raises:
            LogicError: If no term is selected.
        """
        if self._course_controller is None:
            raise LogicError("No term selected.")

        return self._course_controller

    def _find_term_by_id(self, id: str) -> Term:
        try:
            return self._terms[id]

        except KeyError:
            raise NotFoundError(f"Term not found: {id}.") from None

    def find_term(self, title: str) -> Response:
        """
        Finds a `Term` by title, ignoring case and surrounding whitespace.

        Returns:
            Response: On success, data contains "record" (Term). Fails with
            `ErrorCode.NOT_FOUND` if no term has the title.

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            term = self._find_term_by_id(self._titles.get_id(title))

        except Exception as e:
            return failure_response(e, "Failed to find term", logger)

        else:
            return Response.succeed(
                data={
                    "record": term,
                },
            )

    def select_term(self, title: str) -> Response:
        """
        Marks the titled `Term` as active and creates its `CourseController`.

        Returns:
            Response: On success, data contains "record" (Term) and
            "course_controller" (CourseController).
        """
        find_response = self.find_term(title)

        if not find_response.success:
            return find_response

        term = find_response.data["record"]

        try:
            course_controller = CourseController(term)

        except Exception as e:
            return failure_response(e, "Failed to select term", logger)

        self._active_term = term
        self._course_controller = course_controller

        return Response.succeed(
            detail=f"Term selected: {term.title}.",
            data={
                "record": term,
                "course_controller": course_controller,
            },
        )

    # === data manipulators ===

    def add_term(
        self,
        title: str,
        start_date: datetime.date | str | None = None,
        end_date: datetime.date | str | None = None,
        active: bool = True,
    ) -> Response:
        """
        Creates a `Term` from the given fields and starts tracking it.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the term was created and added.
                    - False if validation fails or the title is already used.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` for an empty title or invalid dates.
                    - `ErrorCode.LOGIC_ERROR` for a duplicate title.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Term): The added `Term` object.
        """
        try:
            term = Term(
                title=title,
                start_date=start_date,
                end_date=end_date,
                active=active,
            )

            self._titles.require_unique(term.title)

            if term.id in self._terms:
                raise LogicError("A term with the same ID already exists.")

            self._terms[term.id] = term

        except Exception as e:
            return failure_response(e, "Failed to add term", logger)

        else:
            logger.debug("Added term %s", term.id)

            return Response.succeed(
                detail="Term successfully added.",
                data={
                    "record": term,
                },
            )

    def import_term(self, data: dict) -> Response:
        """
        Rebuilds a `Term`, with its courses and assignments, from `Term.to_dict()` output and
        starts tracking it.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the snapshot was rebuilt and added.
                    - False if any record in it fails validation or the title is already used.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` or `ErrorCode.OUT_OF_RANGE` for invalid fields.
                    - `ErrorCode.LOGIC_ERROR` for a duplicate title or id.
                    - `ErrorCode.INTERNAL_ERROR` for a malformed snapshot.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Term): The imported `Term` object.
        """
        try:
            term = Term.from_dict(data)

            self._titles.require_unique(term.title)

            if term.id in self._terms:
                raise LogicError("A term with the same ID already exists.")

            self._terms[term.id] = term

        except Exception as e:
            return failure_response(e, "Failed to import term", logger)

        else:
            logger.debug("Imported term %s with %d courses", term.id, len(term.courses))

            return Response.succeed(
                detail="Term successfully imported.",
                data={
                    "record": term,
                },
            )

    def remove_term(self, title: str) -> Response:
        """
        Removes the titled `Term` and everything it contains.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` if no term has the title.

        Notes:
            - Clears the selection if the removed term was selected.
        """
        try:
            term = self._find_term_by_id(self._titles.get_id(title))
            del self._terms[term.id]

        except Exception as e:
            return failure_response(e, "Failed to remove term", logger)

        else:
            if self._active_term == term:
                self._active_term = None
                self._course_controller = None

            logger.debug("Removed term %s", term.id)

            return Response.succeed(
                detail="Term successfully removed.",
            )

    # --- field edits, addressed by id ---

    def _edit_term(self, id: str, field: str, value: Any) -> Response:
        try:
            term = self._find_term_by_id(id)
            setattr(term, field, value)

        except Exception as e:
            return failure_response(e, f"Failed to update term {field}", logger)

        else:
            return Response.succeed(
                detail=f"Term {field} updated.",
                data={
                    "record": term,
                },
            )

    def edit_title(self, id: str, new_title: str) -> Response:
        try:
            term = self._find_term_by_id(id)
            self._titles.rename(term, new_title)

        except Exception as e:
            return failure_response(e, "Failed to update term title", logger)

        else:
            return Response.succeed(
                detail=f"Term title updated to {term.title}.",
                data={
                    "record": term,
                },
            )

    def edit_start_date(self, id: str, new_start_date: datetime.date | str) -> Response:
        return self._edit_term(id, "start_date", new_start_date)

    def edit_end_date(self, id: str, new_end_date: datetime.date | str) -> Response:
        return self._edit_term(id, "end_date", new_end_date)

    def edit_active(self, id: str, new_active: bool) -> Response:
        return self._edit_term(id, "is_active", new_active)

    # === record controller capabilities ===

    def add_course(self, course_title: str, credits: int) -> Response:
        """
        Adds a course with default dates to the selected term.

        Returns:
            Response: Fails with `ErrorCode.LOGIC_ERROR` if no term is selected; otherwise the
            result of `CourseController.add_course()`.
        """
        try:
            course_controller = self.get_course_controller()

        except Exception as e:
            return failure_response(e, "Failed to add course", logger)

        return course_controller.add_course(title=course_title, num_credits=credits)

    def add_assignment(
        self, course_id: str, assignment_title: str, grade: float
    ) -> Response:
        """
        Adds a completed, graded assignment to a course of the selected term.

        Returns:
            Response: Fails with `ErrorCode.LOGIC_ERROR` if no term is selected,
            `ErrorCode.NOT_FOUND` for an unknown course id; otherwise the result of
            `AssignmentController.add_assignment()`.

        Notes:
            - The assignment goes into the course's `default_category`, which is always weighted.
        """
        try:
            assignment_controller = self.get_course_controller().assignment_controller_for(
                course_id
            )

        except Exception as e:
            return failure_response(e, "Failed to add assignment", logger)

        return assignment_controller.add_assignment(
            title=assignment_title,
            category=assignment_controller.course.default_category,
            completed=True,
            grade=grade,
        )

    def get_term_gpa(self) -> float:
        """
        Raises:
            LogicError: If no term is selected.
        """
        return self.get_course_controller().term.ovr_gpa

    def get_courses(self) -> dict[str, Course]:
        """
        Raises:
            LogicError: If no term is selected.
        """
        return self.get_course_controller().courses
