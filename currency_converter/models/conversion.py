from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from currency_converter.services.rates import ConversionResult

from .rates import validate_currency_code


class ConvertIn(BaseModel):
    from_currency: str = Field(..., description="Currency the amount is in")
    to_currency: str = Field(..., description="Currency to convert into")
    amount: float = Field(..., gt=0)

    @field_validator("from_currency", "to_currency")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        return validate_currency_code(v)


class ConvertOut(BaseModel):
    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    rate: float
    path: List[str]

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConvertOut":
        return cls(
            from_currency=result.from_currency,
            to_currency=result.to_currency,
            amount=result.amount,
            converted_amount=result.converted_amount,
            rate=result.rate,
            path=list(result.path),
        )
