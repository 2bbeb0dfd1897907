"""Exceptions raised for graph misuse.

Expected failures (unknown keys, no-op mutations) are reported as ``None`` or
``False`` by the graph contracts; these exceptions only signal caller bugs.
"""


class GraphError(Exception):
    """Base exception for graph operations."""


class StaleViewError(GraphError, RuntimeError):
    """Raised when an edge view is used after its graph was mutated."""


class NegativeWeightError(GraphError, ValueError):
    """Raised when a shortest-path search meets an edge weight below zero."""


class WeightTypeError(GraphError, TypeError):
    """Raised when edge weights cannot be compared or added to the graph's zero weight."""
