from __future__ import annotations

"""Read-side interface the converter needs from a rate store.

Anything exposing ``get_edges`` can back a PathConverter, which keeps the
traversal testable against a plain mapping.
"""
from typing import Dict, NamedTuple, Optional, Protocol


class RateEdge(NamedTuple):
    from_currency: str
    to_currency: str
    rate: float


class SupportsEdgeLookup(Protocol):
    def get_edges(self, currency: str) -> Optional[Dict[str, float]]: ...


def normalize_code(code: str) -> str:
    return code.strip().upper()
