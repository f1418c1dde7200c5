"""Rate graph: store, path converter and the service that ties them together."""

from .base import RateEdge
from .converter import ConversionResult, PathConverter
from .errors import ConversionError, NoConversionPathError
from .service import CurrencyConverterService
from .store import RateStore

__all__ = [
    "RateEdge",
    "ConversionResult",
    "PathConverter",
    "ConversionError",
    "NoConversionPathError",
    "CurrencyConverterService",
    "RateStore",
]
