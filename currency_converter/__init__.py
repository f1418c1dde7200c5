"""In-memory currency converter over a graph of pairwise exchange rates."""

__version__ = "0.1.0"
