from __future__ import annotations

import logging
import math
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from .base import RateEdge, normalize_code

"""Thread-safe in-memory rate graph.

Design:
    - One plain nested dict ``{source: {destination: rate}}`` guarded by a single
      lock. Writers (update/clear) and readers (edge lookups) all take the lock,
      so every operation is atomic with respect to the others.
    - Currency codes are upper-cased on the way in, which makes every lookup
      case-insensitive.
    - Readers get copies, never the live inner dicts, so a conversion iterating
      a source's edges cannot observe a concurrent update mid-iteration.
"""

logger = logging.getLogger("currency_converter.rates.store")

EdgeInput = Tuple[str, str, float]


class RateStore:
    """Mapping of currency -> outgoing edges (destination -> rate)."""

    def __init__(self, edges: Iterable[EdgeInput] | None = None):
        self._lock = threading.Lock()
        self._graph: Dict[str, Dict[str, float]] = {}
        if edges is not None:
            self.update_rates(edges)

    # Writers -----------------------------------------------------
    def clear(self) -> None:
        with self._lock:
            removed = self._count_locked()
            self._graph.clear()
        logger.info("rate graph cleared (%d edges removed)", removed)

    def update_rates(self, edges: Iterable[EdgeInput]) -> int:
        """Insert or replace each ``(from, to, rate)`` edge, in the order given.

        The batch is validated up front: if any rate is not a positive finite
        number a ValueError is raised and no edge is applied. Returns the number
        of edges applied.
        """
        batch = [_coerce_edge(e) for e in edges]
        with self._lock:
            self._apply_locked(batch)
        logger.debug("applied %d rate edges", len(batch))
        return len(batch)

    def replace(self, edges: Iterable[EdgeInput]) -> int:
        """Swap the whole graph for ``edges`` in one step.

        Readers see either the old graph or the new one, never the empty graph
        in between. Validation is the same as update_rates.
        """
        batch = [_coerce_edge(e) for e in edges]
        with self._lock:
            removed = self._count_locked()
            self._graph.clear()
            self._apply_locked(batch)
        logger.info("rate graph replaced (%d edges removed, %d applied)", removed, len(batch))
        return len(batch)

    def _apply_locked(self, batch: List[RateEdge]) -> None:
        for edge in batch:
            destinations = self._graph.get(edge.from_currency)
            if destinations is None:
                self._graph[edge.from_currency] = {edge.to_currency: edge.rate}
            else:
                destinations[edge.to_currency] = edge.rate

    # Readers -----------------------------------------------------
    def get_edges(self, currency: str) -> Optional[Dict[str, float]]:
        """Return a copy of ``currency``'s outgoing edges, or None if it has none."""
        with self._lock:
            destinations = self._graph.get(normalize_code(currency))
            return dict(destinations) if destinations is not None else None

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        with self._lock:
            return {src: dict(dests) for src, dests in self._graph.items()}

    def edges(self) -> List[RateEdge]:
        graph = self.snapshot()
        return [
            RateEdge(src, dst, rate)
            for src in sorted(graph)
            for dst, rate in sorted(graph[src].items())
        ]

    def _count_locked(self) -> int:
        return sum(len(dests) for dests in self._graph.values())

    def __len__(self) -> int:
        with self._lock:
            return self._count_locked()

    def __contains__(self, currency: object) -> bool:
        if not isinstance(currency, str):
            return False
        with self._lock:
            return normalize_code(currency) in self._graph

    def __repr__(self) -> str:
        return f"RateStore(edges={len(self)})"


def _coerce_edge(edge: EdgeInput) -> RateEdge:
    from_currency, to_currency, rate = edge
    rate = float(rate)
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(
            f"rate for {from_currency}->{to_currency} must be positive, got {rate}"
        )
    return RateEdge(normalize_code(from_currency), normalize_code(to_currency), rate)
