"""Mark parsing, grading and form state."""

from .calculator import GradeReport, calculate_report, get_grade, grade_marks, parse_marks
from .form import FormState, ResultLabels, handle_calculate, render

__all__ = [
    "GradeReport",
    "calculate_report",
    "get_grade",
    "grade_marks",
    "parse_marks",
    "FormState",
    "ResultLabels",
    "handle_calculate",
    "render",
]
