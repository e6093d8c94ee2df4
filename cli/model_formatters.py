# cli/model_formatters.py

# anything that renders domain objects or performs controller read-only operations
from textwrap import dedent

import core.formatters as formatters
from controllers.interfaces import RecordController
from models.assignment import Assignment
from models.course import Course
from models.term import Term

# === assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    grade = f"{assignment.grade:>6.2f}" if assignment.completed else "[INCOMPLETE]"

    return f"{assignment.title:<20} | {assignment.category:<12} | Due: {formatters.format_date(assignment.due_date)} | {grade}"


def format_assignment_multiline(assignment: Assignment) -> str:
    description = (
        f"\n... Description: {assignment.description}" if assignment.description else ""
    )

    return (
        dedent(
            f"""\
            ID: {assignment.id}
            ... Assignment: {assignment.title}"""
        )
        + description
        + "\n"
        + dedent(
            f"""\
            ... Category: {assignment.category}
            ... Due Date: {formatters.format_date(assignment.due_date)}
            ... Completed? {formatters.format_bool(assignment.completed)}
            ... Grade: {assignment.grade}"""
        )
    )


# === course formatters ===


def format_course_oneline(course: Course) -> str:
    status = " [INACTIVE]" if not course.is_active else ""

    return f"{course.title:<20} | {course.num_credits} cr | {formatters.format_grade_pct(course.grade_pct):>8} | {course.letter_grade}{status}"


def format_course_multiline(course: Course) -> str:
    total = len(course.assignments)
    incomplete = total - course.calculate_completed_assignments()
    description = f"\n... Description: {course.description}" if course.description else ""

    return (
        dedent(
            f"""\
            ID: {course.id}
            ... Course: {course.title}"""
        )
        + description
        + "\n"
        + dedent(
            f"""\
            ... Duration: {formatters.format_date_range(course.start_date, course.end_date)}
            ... Number of Credits: {course.num_credits}
            ... Grade Percentage: {formatters.format_grade_pct(course.grade_pct)}
            ... Letter Grade: {course.letter_grade}
            ... GPA Value: {course.gpa_val:.1f}
            ... Total Assignments: {total}
            ... Incomplete Assignments: {incomplete}
            ... Current? {formatters.format_bool(course.is_active)}"""
        )
    )


def format_grade_weights(course: Course) -> str:
    return formatters.format_mapping(
        {
            category: formatters.format_weight(weight)
            for category, weight in course.grade_weights.items()
        }
    )


def format_grade_scale(course: Course) -> str:
    # highest threshold first, as a scale is usually read
    return formatters.format_mapping(
        {
            f"{threshold:g}": label
            for threshold, label in sorted(course.grade_scale.items(), reverse=True)
        }
    )


# === term formatters ===


def format_term_multiline(term: Term) -> str:
    line = "=" * 59

    return dedent(
        f"""\
        {line}
        ID: {term.id}
        Term: {term.title}
        Duration: {formatters.format_date_range(term.start_date, term.end_date)}
        Total Credits: {term.total_credits}
        Overall GPA: {formatters.format_gpa(term.ovr_gpa)}
        Current? {formatters.format_bool(term.is_active)}
        {line}"""
    )


def format_term_summary(controller: RecordController) -> str:
    banner = formatters.format_banner_text("TERM SUMMARY")
    courses = controller.get_courses()
    lines = [format_course_oneline(course) for course in courses.values()]

    body = "\n".join(lines) if lines else "[NO COURSES]"

    return f"{banner}\n{body}\nTerm GPA: {formatters.format_gpa(controller.get_term_gpa())}"
