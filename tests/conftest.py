"""Pytest configuration and fixtures."""

import io
import json

import pytest
from rich.console import Console

from fxgrade.config import API_BASE_URL


@pytest.fixture
def rates_payload():
    """Build a response body in the rate service's format."""

    def _payload(base: str = "USD", rates: dict | None = None) -> str:
        return json.dumps({
            "amount": 1.0,
            "base": base,
            "date": "2024-05-01",
            "rates": rates if rates is not None else {"EUR": 0.92},
        })

    return _payload


@pytest.fixture
def rate_url():
    """URL the fetcher requests for a currency pair."""

    def _url(base: str, target: str) -> str:
        return f"{API_BASE_URL}?from={base}&to={target}"

    return _url


@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def err_console():
    """Error console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120)
