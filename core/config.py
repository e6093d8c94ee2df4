# core/config.py

"""
Process-wide configuration constants.

Grade tables (weights, letter scale, GPA points) live with the `Course` model;
everything here is a plain scalar shared across models and controllers.
"""

# === record defaults ===

DEFAULT_NUM_CREDITS = 3

# default course/term length when no end date is supplied
DEFAULT_TERM_LENGTH_MONTHS = 4

DEFAULT_CATEGORY = "Homework"

# letter grade reported while nothing has been graded
NO_GRADE = "N/A"

# === numeric tolerances ===

# grade weights must sum to 1.0 within this relative/absolute tolerance
GRADE_WEIGHT_TOLERANCE = 1e-5

FLOAT_ABS_TOLERANCE = 1e-8

# === grade bounds ===

MAX_ASSIGNMENT_GRADE = 100.0

# manual course overrides may exceed 100 to allow for extra credit
MAX_COURSE_GRADE_PCT = 150.0

GRADE_PRECISION = 2

# === formatting ===

DATE_FORMAT = "%Y-%m-%d"
