"""Currency conversion against a live exchange rate service."""

from .calculator import convert, convert_amount, lookup_rate
from .extractor import extract_rate, parse_rates_document
from .fetcher import build_client, fetch_rates_payload
from .input_reader import InputReader, parse_amount, parse_currency_code, validate_currency_code
from .models import ConversionRequest, ConversionResult, ExchangeRateResult, RatesDocument

__all__ = [
    "convert",
    "convert_amount",
    "lookup_rate",
    "extract_rate",
    "parse_rates_document",
    "build_client",
    "fetch_rates_payload",
    "InputReader",
    "parse_amount",
    "parse_currency_code",
    "validate_currency_code",
    "ConversionRequest",
    "ConversionResult",
    "ExchangeRateResult",
    "RatesDocument",
]
