"""Data models for currency conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..config import RATE_NOT_FOUND


def _normalize_code(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError("currency must be a string")
    return value.strip().upper()


CurrencyCode = Annotated[
    str,
    BeforeValidator(_normalize_code),
    Field(pattern=r"^[A-Z]{3}$", min_length=3, max_length=3),
]

NonNegativeAmount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class ConversionRequest(BaseModel):
    """One conversion asked for by the user."""

    model_config = ConfigDict(frozen=True)

    base: CurrencyCode
    target: CurrencyCode
    amount: NonNegativeAmount


class RatesDocument(BaseModel):
    """
    Payload returned by the rate endpoint.

    Example: {"amount":1.0,"base":"USD","date":"2024-05-01","rates":{"JPY":149.62}}
    """

    amount: float = 1.0
    base: str | None = None
    date: str | None = None
    rates: dict[str, Annotated[float, Field(ge=0, allow_inf_nan=False)]]


@dataclass(frozen=True)
class ExchangeRateResult:
    """Rate for a currency pair, or the not-found sentinel."""

    base: str
    target: str
    rate: float

    @property
    def found(self) -> bool:
        return self.rate != RATE_NOT_FOUND


@dataclass(frozen=True)
class ConversionResult:
    """Converted amount for a request."""

    request: ConversionRequest
    rate: float
    converted: float

    def to_dict(self) -> dict:
        return {
            "base": self.request.base,
            "target": self.request.target,
            "amount": self.request.amount,
            "rate": self.rate,
            "converted": self.converted,
        }
