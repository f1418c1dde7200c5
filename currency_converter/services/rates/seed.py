"""Default rate set used to pre-populate a fresh store.

A single deliberate chain USD -> CAD -> GBP -> EUR, closed back to USD, so
that converting USD to EUR needs three hops.
"""

from __future__ import annotations

from typing import Tuple

from .base import RateEdge
from .store import RateStore

DEFAULT_RATES: Tuple[RateEdge, ...] = (
    RateEdge("USD", "CAD", 1.34),
    RateEdge("CAD", "GBP", 0.58),
    RateEdge("GBP", "EUR", 0.43),
    RateEdge("EUR", "USD", 1.16),
)


def seed_default_rates(store: RateStore) -> int:
    # Existing edges for other pairs are left untouched
    return store.update_rates(DEFAULT_RATES)
