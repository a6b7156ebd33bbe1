"""Console prompts for currency codes and amounts."""

import logging
import math
import re
from typing import TextIO

from pydantic import TypeAdapter, ValidationError
from rich.console import Console

from ..config import AMOUNT_PROMPT, CONTINUE_ANSWERS, CONTINUE_PROMPT, CURRENCY_PROMPT
from ..exceptions import InvalidAmountError, InvalidCurrencyCodeError
from .models import ConversionRequest, CurrencyCode

logger = logging.getLogger(__name__)

_currency_adapter = TypeAdapter(CurrencyCode)
_AMOUNT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

INVALID_CODE_MESSAGE = "Invalid format. Please enter a 3-letter currency code (e.g., USD)."
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a number (e.g., 100 or 50.75)."
NEGATIVE_AMOUNT_MESSAGE = "Amount cannot be negative. Please try again."


def parse_currency_code(raw: str) -> str:
    """
    Normalize a currency code.

    Raises:
        InvalidCurrencyCodeError: if the code is not three letters.
    """
    try:
        return _currency_adapter.validate_python(raw)
    except ValidationError:
        raise InvalidCurrencyCodeError(f"Invalid currency code: {raw}") from None


def validate_currency_code(raw: str) -> str | None:
    """Validate and normalize a currency code. Returns the code or None if invalid."""
    try:
        return parse_currency_code(raw)
    except InvalidCurrencyCodeError:
        return None


def parse_amount(raw: str) -> float:
    """
    Parse a non-negative amount.

    Raises:
        InvalidAmountError: if the text is not a finite number or is negative.
    """
    text = raw.strip()
    if not _AMOUNT_RE.fullmatch(text):
        raise InvalidAmountError(INVALID_NUMBER_MESSAGE)

    value = float(text)

    if not math.isfinite(value):
        raise InvalidAmountError(INVALID_NUMBER_MESSAGE)
    if value < 0:
        raise InvalidAmountError(NEGATIVE_AMOUNT_MESSAGE)
    return value


class InputReader:
    """
    Line-oriented prompts that keep asking until the answer is valid.

    Reads from stdin by default, or from ``stream`` when given. End of
    input raises EOFError.
    """

    def __init__(self, console: Console, stream: TextIO | None = None):
        self.console = console
        self.stream = stream

    def _ask(self, prompt: str) -> str:
        answer = self.console.input(prompt, markup=False, stream=self.stream)
        if self.stream is not None and answer == "":
            raise EOFError("input stream exhausted")
        return answer.rstrip("\r\n")

    def read_currency(self, prompt: str) -> str:
        """Prompt until a 3-letter code is entered. Returns it upper-cased."""
        while True:
            code = validate_currency_code(self._ask(prompt))
            if code is not None:
                return code
            logger.debug("Rejected currency code input")
            self.console.print(INVALID_CODE_MESSAGE, markup=False)

    def read_amount(self, prompt: str) -> float:
        """Prompt until a non-negative number is entered."""
        while True:
            try:
                return parse_amount(self._ask(prompt))
            except InvalidAmountError as e:
                self.console.print(str(e), markup=False)

    def read_request(self) -> ConversionRequest:
        """Collect base currency, target currency and amount."""
        base = self.read_currency(CURRENCY_PROMPT.format(role="base"))
        target = self.read_currency(CURRENCY_PROMPT.format(role="target"))
        amount = self.read_amount(AMOUNT_PROMPT.format(currency=base))
        return ConversionRequest(base=base, target=target, amount=amount)

    def confirm_continue(self) -> bool:
        """Ask whether to run another conversion. Only yes/y continue."""
        choice = self._ask(CONTINUE_PROMPT).strip().lower()
        return choice in CONTINUE_ANSWERS
