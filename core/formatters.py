# core/formatters.py

# all pure utilities & date helpers
# must never import from models!

import datetime
from collections.abc import Mapping
from typing import Any

from core.config import DATE_FORMAT

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_bool(value: bool) -> str:
    return "Yes" if value else "No"


def format_mapping(mapping: Mapping[Any, Any]) -> str:
    """
    Renders a mapping as one "key -> value" line per entry, in iteration order.
    """
    return "\n".join(f"{key} -> {value}" for key, value in mapping.items())


# === number formatters ===


def format_grade_pct(grade_pct: float) -> str:
    return f"{grade_pct:.2f}%"


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"


def format_weight(weight: float) -> str:
    return f"{weight * 100:.1f} %"


# === date formatters ===


def format_date(date: datetime.date | None) -> str:
    return date.strftime(DATE_FORMAT) if date else "[NO DATE]"


def format_date_range(start_date: datetime.date, end_date: datetime.date) -> str:
    return f"{format_date(start_date)} - {format_date(end_date)}"
