"""Rate lookup and amount conversion."""

import httpx

from ..config import API_BASE_URL
from .extractor import extract_rate
from .fetcher import fetch_rates_payload
from .models import ConversionRequest, ConversionResult, ExchangeRateResult


def convert_amount(amount: float, rate: float) -> float:
    """Multiply amount by rate. Rounding is left to display."""
    return amount * rate


async def lookup_rate(
    base: str,
    target: str,
    client: httpx.AsyncClient,
    api_url: str = API_BASE_URL,
) -> ExchangeRateResult:
    """Fetch and extract the rate for one pair. Raises RateServiceError on connectivity failure."""
    payload = await fetch_rates_payload(base, target, client, api_url)
    return ExchangeRateResult(base=base, target=target, rate=extract_rate(payload, target))


async def convert(
    request: ConversionRequest,
    client: httpx.AsyncClient,
    api_url: str = API_BASE_URL,
) -> ConversionResult | None:
    """
    Convert a request using the live rate.

    Returns:
        ConversionResult, or None when no rate was found for the pair.

    Raises:
        RateServiceError: if the rate service could not be reached.
    """
    result = await lookup_rate(request.base, request.target, client, api_url)
    if not result.found:
        return None

    return ConversionResult(
        request=request,
        rate=result.rate,
        converted=convert_amount(request.amount, result.rate),
    )
