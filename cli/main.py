# cli/main.py

"""
Read-only term report.

Loads a term snapshot (the JSON form of `Term.to_dict()`) through a `TermController` and
prints the term, each of its courses with weights, scale, and assignments, and the term
summary.
"""

import json
import sys

import cli.model_formatters as model_formatters
import core.formatters as formatters
from controllers.term_controller import TermController


def load_term_snapshot(path: str) -> dict:
    with open(path, "r") as f:
        return json.load(f)


def render_term_report(controller: TermController) -> str:
    """
    Raises:
        LogicError: If no term is selected.
    """
    term = controller.get_course_controller().term
    sections = [model_formatters.format_term_multiline(term)]

    for course in term.courses.values():
        assignments = [
            model_formatters.format_assignment_oneline(assignment)
            for assignment in course.assignments.values()
        ]

        sections.append(
            "\n".join(
                [
                    model_formatters.format_course_multiline(course),
                    formatters.format_banner_text("GRADE WEIGHTS"),
                    model_formatters.format_grade_weights(course),
                    formatters.format_banner_text("GRADE SCALE"),
                    model_formatters.format_grade_scale(course),
                    formatters.format_banner_text("ASSIGNMENTS"),
                    "\n".join(assignments) if assignments else "[NO ASSIGNMENTS]",
                ]
            )
        )

    sections.append(model_formatters.format_term_summary(controller))

    return "\n\n".join(sections)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print("Usage: term-report <term-snapshot.json>", file=sys.stderr)
        return 2

    try:
        data = load_term_snapshot(args[0])

    except (OSError, json.JSONDecodeError) as e:
        print(f"Could not read term snapshot: {e}", file=sys.stderr)
        return 1

    controller = TermController()
    import_response = controller.import_term(data)

    if not import_response.success:
        print(import_response.detail, file=sys.stderr)
        return 1

    controller.select_term(import_response.data["record"].title)
    print(render_term_report(controller))

    return 0


if __name__ == "__main__":
    sys.exit(main())
