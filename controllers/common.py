# controllers/common.py

"""
Shared pieces of the controller layer.

`TitleIndex` is the case-insensitive title lookup each controller uses to find
records by name. `failure_response()` converts an exception raised by the models into a
failed `Response` and logs it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Generic

from core.errors import LogicError, NotFoundError, RecordError
from core.response import Response
from core.utils import normalize, validate_required_string
from models.types import RecordType


class TitleIndex(Generic[RecordType]):
    """
    Case-insensitive title lookup over a live id -> record mapping.

    Every lookup reads the mapping as it is now, so records added or renamed through
    another controller, or directly on the owning model, are always seen.

    Args:
        label (str): The record kind used in error messages, e.g. "Course".
        records (Mapping[str, RecordType]): The owning collection, keyed by id.
    """

    def __init__(self, label: str, records: Mapping[str, RecordType]):
        self._label = label
        self._records = records

    def __contains__(self, title: str) -> bool:
        return self._find_id(title) is not None

    def __len__(self) -> int:
        return len(self._records)

    def _find_id(self, title: str) -> str | None:
        key = normalize(title)

        for id, record in self._records.items():
            if normalize(record.title) == key:
                return id

        return None

    def get_id(self, title: str) -> str:
        """
        Raises:
            NotFoundError: If no record has the given title.
        """
        id = self._find_id(title)

        if id is None:
            raise NotFoundError(f"{self._label} not found: {title}.")

        return id

    def require_unique(self, title: str, exclude_id: str | None = None) -> None:
        """
        Validates that no other record already uses the given title.

        Args:
            title (str): The title to check.
            exclude_id (str | None): The id of a record allowed to hold the title (used on rename).

        Raises:
            LogicError: If a different record already uses the normalized title.
        """
        existing_id = self._find_id(title)

        if existing_id is not None and existing_id != exclude_id:
            raise LogicError(
                f"A {self._label.lower()} with the title '{title}' already exists."
            )

    def rename(self, record: RecordType, new_title: str) -> None:
        """
        Sets `record.title` after checking the new title is free.

        Raises:
            InvalidArgumentError: If the new title is empty.
            LogicError: If another record already uses the new title.
        """
        validate_required_string(new_title, "Title")
        self.require_unique(new_title, exclude_id=record.id)

        record.title = new_title


def failure_response(
    exc: Exception, context: str, logger: logging.Logger
) -> Response:
    """
    Logs a failed controller operation and builds the matching `Response`.

    Notes:
        - Expected record errors are logged at INFO. Anything else, `TypeError` included, is
          logged with its traceback.
        - Must be called from inside an `except` block.
    """
    if isinstance(exc, RecordError):
        logger.info("%s: %s", context, exc)
    else:
        logger.exception("%s: unexpected error", context)

    return Response.from_exception(exc, context)
