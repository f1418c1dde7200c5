from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional, Set, Tuple

from .base import SupportsEdgeLookup, normalize_code
from .errors import NoConversionPathError

"""Breadth-first path search over the rate graph.

The converter never mutates the store. It asks for one source's edges at a
time (each lookup is a snapshot copy) and composes rates along the first path
BFS finds, which is always a minimum-hop path.

Cumulative amounts are first-writer-wins: a currency keeps the amount of the
first edge that discovered it, even if another node in the same BFS layer
also has an edge to it. That keeps the returned amount consistent with the
reported path.
"""


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    rate: float
    path: Tuple[str, ...]

    @property
    def hops(self) -> int:
        return len(self.path) - 1


class PathConverter:
    def __init__(self, store: SupportsEdgeLookup):
        self._store = store

    def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
        return self.find_path(from_currency, to_currency, amount).converted_amount

    def find_path(
        self, from_currency: str, to_currency: str, amount: float
    ) -> ConversionResult:
        """Find a path from ``from_currency`` to ``to_currency`` and convert ``amount``.

        Raises NoConversionPathError when the target is unreachable.
        """
        source = normalize_code(from_currency)
        target = normalize_code(to_currency)
        if source == target:
            return ConversionResult(source, target, amount, amount, 1.0, (source,))

        queue: Deque[str] = deque([source])
        visited: Set[str] = set()
        amounts: Dict[str, float] = {source: amount}
        rates: Dict[str, float] = {source: 1.0}
        parents: Dict[str, Optional[str]] = {source: None}

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)

            if current == target:
                return ConversionResult(
                    from_currency=source,
                    to_currency=target,
                    amount=amount,
                    converted_amount=amounts[current],
                    rate=rates[current],
                    path=_walk_back(parents, current),
                )

            for next_currency, rate in (self._store.get_edges(current) or {}).items():
                queue.append(next_currency)
                if next_currency not in amounts:
                    amounts[next_currency] = amounts[current] * rate
                    rates[next_currency] = rates[current] * rate
                    parents[next_currency] = current

        raise NoConversionPathError(source, target)


def _walk_back(parents: Dict[str, Optional[str]], currency: str) -> Tuple[str, ...]:
    path = []
    node: Optional[str] = currency
    while node is not None:
        path.append(node)
        node = parents[node]
    return tuple(reversed(path))
