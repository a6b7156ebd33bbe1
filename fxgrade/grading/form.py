"""Grade form state, calculate handler and label rendering.

Kept free of any widget toolkit so the window only wires events to
``handle_calculate`` and paints whatever ``render`` returns.
"""

import logging
from dataclasses import dataclass, replace

from ..config import RESULT_PLACEHOLDER
from ..exceptions import MarkInputError
from .calculator import GradeReport, format_percentage, grade_marks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormState:
    """Latest report shown by the form and the pending error message, if any."""

    report: GradeReport | None = None
    error: str | None = None


@dataclass(frozen=True)
class ResultLabels:
    total: str
    average: str
    grade: str


def handle_calculate(state: FormState, text: str | None) -> FormState:
    """
    Handle the "calculate" action for the marks field.

    On success the new report replaces the old one. On invalid input the
    error is recorded, and the report is cleared only for errors that
    reset results (bad tokens, out-of-range marks).
    """
    try:
        report = grade_marks(text)
    except MarkInputError as e:
        logger.debug("Rejected marks input: %s", e)
        report = None if e.resets_results else state.report
        return replace(state, report=report, error=str(e))

    return FormState(report=report, error=None)


def render(report: GradeReport | None) -> ResultLabels:
    """Label texts for a report. Placeholders when there is none."""
    if report is None:
        return ResultLabels(RESULT_PLACEHOLDER, RESULT_PLACEHOLDER, RESULT_PLACEHOLDER)

    return ResultLabels(
        total=str(report.total),
        average=format_percentage(report.average),
        grade=report.grade,
    )
