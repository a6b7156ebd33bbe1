"""Mark parsing and grade calculation."""

import logging
import re
from dataclasses import dataclass

from ..config import (
    AVERAGE_DECIMALS,
    FAILING_GRADE,
    GRADE_THRESHOLDS,
    MARK_MAX,
    MARK_MIN,
    MARK_SEPARATOR,
)
from ..exceptions import (
    InvalidMarkTokenError,
    MarkOutOfRangeError,
    NoMarksEnteredError,
    NoValidMarksError,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class GradeReport:
    """Total, average percentage and letter grade for a list of marks."""

    marks: tuple[int, ...]
    total: int
    average: float
    grade: str

    def to_dict(self) -> dict:
        return {
            "marks": list(self.marks),
            "total": self.total,
            "average": self.average,
            "grade": self.grade,
        }


def parse_marks(text: str | None) -> list[int]:
    """
    Parse a comma-separated list of marks.

    Tokens are trimmed and empty ones skipped. Tokens are checked in
    order and the first bad one aborts parsing.

    Raises:
        NoMarksEnteredError: input is blank.
        InvalidMarkTokenError: a token is not an integer.
        MarkOutOfRangeError: a mark is outside [MARK_MIN, MARK_MAX].
        NoValidMarksError: only empty tokens were given.
    """
    if text is None or not text.strip():
        raise NoMarksEnteredError()

    marks = []
    for token in text.split(MARK_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        if not _INTEGER_RE.fullmatch(token):
            raise InvalidMarkTokenError(token)

        try:
            mark = int(token)
        except ValueError:
            # digit strings past the interpreter's int conversion limit
            raise InvalidMarkTokenError(token) from None
        if mark < MARK_MIN or mark > MARK_MAX:
            raise MarkOutOfRangeError(mark, MARK_MIN, MARK_MAX)
        marks.append(mark)

    if not marks:
        raise NoValidMarksError()
    return marks


def get_grade(percentage: float) -> str:
    """Get letter grade from an average percentage. Boundaries go to the higher grade."""
    for grade, minimum in GRADE_THRESHOLDS.items():
        if percentage >= minimum:
            return grade
    return FAILING_GRADE


def format_percentage(average: float) -> str:
    """Format an average as a percentage, e.g. 84.33%."""
    return f"{average:.{AVERAGE_DECIMALS}f}%"


def calculate_report(marks: list[int]) -> GradeReport:
    """Compute total, average and grade for a non-empty mark list."""
    if not marks:
        raise NoValidMarksError()

    total = sum(marks)
    average = total / len(marks)
    grade = get_grade(average)
    logger.debug("Graded %d marks: total=%d average=%.2f grade=%s", len(marks), total, average, grade)

    return GradeReport(marks=tuple(marks), total=total, average=average, grade=grade)


def grade_marks(text: str | None) -> GradeReport:
    """Parse the input text and grade it."""
    return calculate_report(parse_marks(text))
