"""
Weighted extension of the Graph contract.

Edges carry a weight of type W. Unweighted graphs use the NoWeight sentinel
as W, so one storage engine serves both.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Tuple, TypeVar

from graph import Graph, K, V, _BorrowedEdges

W = TypeVar("W")


class NoWeight:
    """
    Zero-size "no weight" marker.

    Every NoWeight equals every other, compares as equal under ordering,
    is its own additive identity and always tests as zero.
    """

    __slots__ = ()

    @classmethod
    def zero(cls) -> "NoWeight":
        return NO_WEIGHT

    def is_zero(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NoWeight):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return 0

    def __lt__(self, other: object) -> bool:
        if isinstance(other, NoWeight):
            return False
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, NoWeight):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, NoWeight):
            return True
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, NoWeight):
            return True
        return NotImplemented

    def __add__(self, other: object) -> "NoWeight":
        if isinstance(other, NoWeight):
            return self
        return NotImplemented

    def __radd__(self, other: object) -> "NoWeight":
        # sum() starts from the integer 0
        if isinstance(other, NoWeight) or (type(other) is int and other == 0):
            return self
        return NotImplemented

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_WEIGHT"


NO_WEIGHT = NoWeight()


class WeightedEdgeView(_BorrowedEdges[Tuple[K, W]]):
    """(destination, weight) pairs of one node's outgoing edges, in insertion order."""

    __slots__ = ()

    def _item(self, edge: Tuple[Any, Any]) -> Tuple[K, W]:
        return edge[0], edge[1]


class WeightedGraph(Graph[K, V]):
    """
    Graph whose edges carry weights.

    add_connection() on a weighted graph records zero_weight; the weighted
    views list edges in exactly the same order as get_edges().
    """

    @property
    @abstractmethod
    def zero_weight(self) -> Any:
        """Additive zero of the weight type, used for unweighted edges."""
        raise NotImplementedError

    @abstractmethod
    def add_weighted_connection(self, source: K, destination: K, weight: Any) -> bool:
        """
        Add a directed edge source -> destination carrying weight.

        Returns False (and changes nothing) if source is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def get_weighted(self, key: K) -> Optional[Tuple[V, WeightedEdgeView[K, Any]]]:
        """Value and weighted outgoing edges of a node, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_weighted_edges(self, key: K) -> Optional[WeightedEdgeView[K, Any]]:
        raise NotImplementedError
