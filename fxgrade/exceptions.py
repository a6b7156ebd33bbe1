"""Exception hierarchy shared by the converter and the grade calculator."""

from __future__ import annotations


class FxGradeError(Exception):
    """Base class for all fxgrade errors."""


class InputValidationError(FxGradeError):
    """User input does not have the expected format."""


class InvalidCurrencyCodeError(InputValidationError):
    """Currency code is not three letters."""


class InvalidAmountError(InputValidationError):
    """Amount is not a non-negative number."""


class RateServiceError(FxGradeError, ConnectionError):
    """Exchange rate service could not be reached or answered with an error."""


class MarkInputError(FxGradeError, ValueError):
    """Mark list could not be graded.

    ``resets_results`` tells the form whether previously displayed
    results must be cleared.
    """

    resets_results = False


class NoMarksEnteredError(MarkInputError):
    """Input field is blank."""

    def __init__(self) -> None:
        super().__init__("No marks entered. Please enter at least one mark.")


class InvalidMarkTokenError(MarkInputError):
    """A token is not an integer."""

    resets_results = True

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__("Invalid input. Please enter numbers only, separated by commas.")


class MarkOutOfRangeError(MarkInputError):
    """A mark lies outside the allowed range."""

    resets_results = True

    def __init__(self, mark: int, low: int, high: int) -> None:
        self.mark = mark
        super().__init__(f"Invalid mark: {mark}. Marks must be between {low} and {high}.")


class NoValidMarksError(MarkInputError):
    """Only empty tokens were entered."""

    def __init__(self) -> None:
        super().__init__("No valid marks were entered.")
