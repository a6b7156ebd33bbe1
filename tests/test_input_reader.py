"""Tests for currency code and amount input."""

import io

import pytest
from pydantic import ValidationError

from fxgrade.converter.input_reader import (
    INVALID_CODE_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    NEGATIVE_AMOUNT_MESSAGE,
    InputReader,
    parse_amount,
    parse_currency_code,
    validate_currency_code,
)
from fxgrade.exceptions import InvalidAmountError, InvalidCurrencyCodeError


class TestValidateCurrencyCode:
    """Tests for the validate_currency_code function."""

    def test_lowercase_is_normalized(self):
        """Lowercase code is upper-cased."""
        assert validate_currency_code("usd") == "USD"

    def test_whitespace_is_trimmed(self):
        """Surrounding whitespace is ignored."""
        assert validate_currency_code("  eur \n") == "EUR"

    def test_digit_rejected(self):
        """Codes containing digits are rejected."""
        assert validate_currency_code("us1") is None

    def test_too_short_rejected(self):
        """Two-letter codes are rejected."""
        assert validate_currency_code("US") is None

    def test_too_long_rejected(self):
        """Four-letter codes are rejected."""
        assert validate_currency_code("USDT") is None

    def test_empty_rejected(self):
        """Empty string is rejected."""
        assert validate_currency_code("") is None

    def test_non_ascii_letters_rejected(self):
        """Only A-Z letters are accepted."""
        assert validate_currency_code("ÜSD") is None


class TestParseAmount:
    """Tests for the parse_amount function."""

    def test_integer(self):
        """Whole numbers parse."""
        assert parse_amount("100") == 100.0

    def test_decimal(self):
        """Decimal numbers parse."""
        assert parse_amount(" 50.75 ") == 50.75

    def test_zero_allowed(self):
        """Zero is a valid amount."""
        assert parse_amount("0") == 0.0

    def test_negative_rejected(self):
        """Negative amounts are rejected with their own message."""
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            parse_amount("-5")

    def test_text_rejected(self):
        """Non-numeric text is rejected."""
        with pytest.raises(InvalidAmountError) as exc_info:
            parse_amount("ten")
        assert str(exc_info.value) == INVALID_NUMBER_MESSAGE

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "1e999"])
    def test_non_finite_rejected(self, raw):
        """NaN and infinities are not amounts."""
        with pytest.raises(InvalidAmountError):
            parse_amount(raw)

    @pytest.mark.parametrize("raw", ["1_000", "0x10", "١٢", "1,000"])
    def test_python_only_forms_rejected(self, raw):
        """Only plain decimal notation is accepted."""
        with pytest.raises(InvalidAmountError, match="Please enter a number"):
            parse_amount(raw)

    @pytest.mark.parametrize("raw, expected", [(".5", 0.5), ("+2", 2.0), ("1e3", 1000.0), ("2.5E-1", 0.25), ("5.", 5.0)])
    def test_decimal_notation_forms(self, raw, expected):
        """Leading dot, explicit sign and exponents are plain decimal forms."""
        assert parse_amount(raw) == expected


class TestParseCurrencyCode:
    """Tests for the parse_currency_code function."""

    def test_valid_code(self):
        """Valid codes are normalized."""
        assert parse_currency_code(" gbp ") == "GBP"

    def test_invalid_code_raises(self):
        """Invalid codes raise InvalidCurrencyCodeError naming the input."""
        with pytest.raises(InvalidCurrencyCodeError, match="Invalid currency code: us1"):
            parse_currency_code("us1")


class TestInputReader:
    """Tests for the InputReader prompts."""

    def _reader(self, console, text: str) -> InputReader:
        return InputReader(console, stream=io.StringIO(text))

    def test_read_currency_reprompts_until_valid(self, console):
        """Invalid codes produce a message and another prompt."""
        reader = self._reader(console, "us1\nusdollar\nusd\n")

        assert reader.read_currency("Code: ") == "USD"

        output = console.file.getvalue()
        assert output.count("Code: ") == 3
        assert output.count(INVALID_CODE_MESSAGE) == 2

    def test_read_amount_reprompts_until_valid(self, console):
        """Bad and negative amounts are reported and asked again."""
        reader = self._reader(console, "abc\n-3\n12.5\n")

        assert reader.read_amount("Amount: ") == 12.5

        output = console.file.getvalue()
        assert INVALID_NUMBER_MESSAGE in output
        assert NEGATIVE_AMOUNT_MESSAGE in output

    def test_read_request(self, console):
        """A full request is assembled from three answers."""
        reader = self._reader(console, "usd\njpy\n250\n")

        request = reader.read_request()

        assert request.base == "USD"
        assert request.target == "JPY"
        assert request.amount == 250.0
        assert "Enter the amount in USD: " in console.file.getvalue()

    def test_request_is_immutable(self, console):
        """Built requests cannot be modified."""
        request = self._reader(console, "usd\njpy\n1\n").read_request()

        with pytest.raises(ValidationError):
            request.amount = 5

    @pytest.mark.parametrize("answer", ["yes", "y", "YES", " Y "])
    def test_confirm_continue_accepts_yes(self, console, answer):
        """yes and y continue, in any case."""
        assert self._reader(console, f"{answer}\n").confirm_continue() is True

    @pytest.mark.parametrize("answer", ["no", "n", "", "sure"])
    def test_confirm_continue_rejects_anything_else(self, console, answer):
        """Anything other than yes/y ends the session."""
        assert self._reader(console, f"{answer}\n").confirm_continue() is False

    def test_end_of_input_raises_eof(self, console):
        """Exhausted input raises EOFError instead of looping."""
        reader = self._reader(console, "us1\n")

        with pytest.raises(EOFError):
            reader.read_currency("Code: ")
