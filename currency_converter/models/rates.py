from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

from .constants import CURRENCY_CODE_LENGTH, CURRENCY_CODE_RE


def validate_currency_code(v: str) -> str:
    if not CURRENCY_CODE_RE.fullmatch(v):
        raise ValueError(f"currency must be {CURRENCY_CODE_LENGTH} letters")
    return v.upper()


class RateEdgeIn(BaseModel):
    from_currency: str = Field(..., description="Source currency (e.g. USD)")
    to_currency: str = Field(..., description="Destination currency (e.g. CAD)")
    rate: float = Field(
        ..., gt=0, description="Units of to_currency per 1 unit of from_currency"
    )

    @field_validator("from_currency", "to_currency")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        return validate_currency_code(v)

    def as_tuple(self) -> Tuple[str, str, float]:
        return (self.from_currency, self.to_currency, self.rate)


class RateEdgeOut(BaseModel):
    from_currency: str
    to_currency: str
    rate: float


class RatesUpdatePayload(BaseModel):
    rates: List[RateEdgeIn] = Field(..., min_length=1)


class RatesUpdateResult(BaseModel):
    status: str = "ok"
    updated: int
