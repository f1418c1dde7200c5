from __future__ import annotations

import logging
from typing import Iterable, List

from .base import RateEdge
from .converter import ConversionResult, PathConverter
from .seed import DEFAULT_RATES, seed_default_rates
from .store import EdgeInput, RateStore

"""Converter service: the in-process contract hosts talk to.

Owns exactly one RateStore and one PathConverter reading from it. The app
factory builds one instance per application and hands it to routers via
dependency injection; tests build their own.
"""

logger = logging.getLogger("currency_converter.rates.service")


class CurrencyConverterService:
    def __init__(self, store: RateStore | None = None, seed_defaults: bool = False):
        self.store = store if store is not None else RateStore()
        self.converter = PathConverter(self.store)
        if seed_defaults:
            seed_default_rates(self.store)

    def clear_configuration(self) -> None:
        """Clears any prior configuration."""
        self.store.clear()

    def update_configuration(self, edges: Iterable[EdgeInput]) -> int:
        """Updates the configuration. Rates are inserted or replaced internally."""
        applied = self.store.update_rates(edges)
        logger.info("rate configuration updated (%d edges)", applied)
        return applied

    def reset_to_defaults(self) -> int:
        # Single swap under the store lock; conversions never see an empty graph
        return self.store.replace(DEFAULT_RATES)

    def list_rates(self) -> List[RateEdge]:
        return self.store.edges()

    def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
        """Converts the specified amount to the desired currency."""
        return self.converter.convert(from_currency, to_currency, amount)

    def convert_detailed(
        self, from_currency: str, to_currency: str, amount: float
    ) -> ConversionResult:
        result = self.converter.find_path(from_currency, to_currency, amount)
        logger.debug(
            "converted %s %s -> %s via %s",
            amount,
            result.from_currency,
            result.to_currency,
            "->".join(result.path),
        )
        return result
