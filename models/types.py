# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .assignment import Assignment
from .course import Course
from .term import Term

RecordType = TypeVar("RecordType", Assignment, Course, Term)
