"""Exchange rate endpoint client."""

import logging

import httpx

from ..config import API_BASE_URL, HTTP_TIMEOUT, USER_AGENT
from ..exceptions import RateServiceError

logger = logging.getLogger(__name__)


def build_client() -> httpx.AsyncClient:
    """Create the HTTP client used for one converter session."""
    return httpx.AsyncClient(
        timeout=HTTP_TIMEOUT,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )


async def fetch_rates_payload(
    base: str,
    target: str,
    client: httpx.AsyncClient,
    api_url: str = API_BASE_URL,
) -> str:
    """
    Request the rate for one currency pair.

    Issues exactly one GET to ``api_url`` with ``from`` and ``to`` query
    parameters. No retries.

    Returns:
        Raw response body.

    Raises:
        RateServiceError: on network errors or a non-200 status.
    """
    logger.debug("Fetching rate %s -> %s from %s", base, target, api_url)
    try:
        response = await client.get(api_url, params={"from": base, "to": target})
    except httpx.HTTPError as e:
        logger.warning("Rate request failed: %s", e)
        raise RateServiceError(f"Could not reach rate service: {e}") from e

    if response.status_code != 200:
        logger.warning("Rate service answered %s", response.status_code)
        raise RateServiceError(f"API request failed with status code: {response.status_code}")

    return response.text
