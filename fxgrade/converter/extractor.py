"""Rate extraction from the endpoint payload."""

import logging

from pydantic import ValidationError

from ..config import RATE_NOT_FOUND
from .models import RatesDocument

logger = logging.getLogger(__name__)


def parse_rates_document(payload: str) -> RatesDocument | None:
    """Parse the payload into a RatesDocument. Returns None if it is malformed."""
    try:
        return RatesDocument.model_validate_json(payload)
    except ValidationError as e:
        logger.warning("Error parsing API response (%d validation errors)", e.error_count())
        return None


def extract_rate(payload: str, target: str) -> float:
    """
    Look up the rate for ``target`` in the payload's ``rates`` map.

    Returns:
        The rate, or RATE_NOT_FOUND (-1.0) if the payload cannot be parsed
        or has no entry for the target currency.
    """
    document = parse_rates_document(payload)
    if document is None:
        return RATE_NOT_FOUND

    rate = document.rates.get(target.upper())
    if rate is None:
        logger.debug("No rate for %s in response", target)
        return RATE_NOT_FOUND
    return rate
