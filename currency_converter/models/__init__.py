"""Pydantic request/response models for the HTTP layer."""

from .constants import CURRENCY_CODE_LENGTH  # re-export
from .conversion import ConvertIn, ConvertOut
from .rates import RateEdgeIn, RateEdgeOut, RatesUpdatePayload, RatesUpdateResult

__all__ = [
    "CURRENCY_CODE_LENGTH",
    "ConvertIn",
    "ConvertOut",
    "RateEdgeIn",
    "RateEdgeOut",
    "RatesUpdatePayload",
    "RatesUpdateResult",
]
