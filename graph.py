"""
Directed graph contract.

Nodes are addressed by opaque keys handed out by insert().
Edges are directed: source -> destination, kept in insertion order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar, overload

from exceptions import StaleViewError

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class _BorrowedEdges(Sequence[T]):
    """
    Read-only window onto one node's stored edge list.

    The list is shared with the graph, not copied. A view is only valid until
    the next mutation of the graph that produced it.
    """

    __slots__ = ("_edges", "_owner", "_version")

    def __init__(self, edges: List[Tuple[Any, Any]], owner: "Graph[Any, Any]") -> None:
        self._edges = edges
        self._owner = owner
        self._version = owner.mutation_count

    def _check(self) -> None:
        if self._owner.mutation_count != self._version:
            raise StaleViewError("graph was mutated while an edge view was alive")

    def _item(self, edge: Tuple[Any, Any]) -> T:
        raise NotImplementedError

    def __len__(self) -> int:
        self._check()
        return len(self._edges)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        self._check()
        if isinstance(index, slice):
            return [self._item(edge) for edge in self._edges[index]]
        return self._item(self._edges[index])

    def __iter__(self) -> Iterator[T]:
        self._check()
        for edge in self._edges:
            yield self._item(edge)
            self._check()

    def __reversed__(self) -> Iterator[T]:
        self._check()
        for edge in reversed(self._edges):
            yield self._item(edge)
            self._check()

    def __repr__(self) -> str:
        if self._owner.mutation_count != self._version:
            return f"{type(self).__name__}(<stale>)"
        return f"{type(self).__name__}({list(self)!r})"


class EdgeView(_BorrowedEdges[K]):
    """Destination keys of one node's outgoing edges, in insertion order."""

    __slots__ = ()

    def _item(self, edge: Tuple[Any, Any]) -> K:
        return edge[0]


class Graph(ABC, Generic[K, V]):
    """Directed graph over values of type V addressed by keys of type K."""

    @property
    def mutation_count(self) -> int:
        """
        Number of structural mutations so far.

        Views compare against this to detect use after mutation. Graphs that
        never report mutations never invalidate their views.
        """
        return 0

    @abstractmethod
    def insert(self, value: V) -> K:
        """Add a node and return the key it was stored under."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: K) -> Optional[V]:
        """
        Remove a node and its outgoing edges.

        Returns the removed value, or None if key is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def add_connection(self, source: K, destination: K) -> bool:
        """
        Add a directed edge source -> destination.

        Returns False (and changes nothing) if source is not in the graph.
        The destination is not checked.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_connection(self, source: K, destination: K) -> bool:
        """
        Remove the first edge source -> destination.

        Returns False if source is unknown or has no such edge.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, key: K) -> Optional[Tuple[V, EdgeView[K]]]:
        """Value and outgoing edges of a node, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_value(self, key: K) -> Optional[V]:
        raise NotImplementedError

    @abstractmethod
    def get_edges(self, key: K) -> Optional[EdgeView[K]]:
        """
        Outgoing edge destinations of a node, or None if not found.

        The view iterates in insertion order and supports reversed().
        """
        raise NotImplementedError

    # --- Derived helpers ----------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return self.get_edges(key) is not None  # type: ignore[arg-type]

    def has_connection(self, source: K, destination: K) -> bool:
        """True if source has at least one edge to destination."""
        edges = self.get_edges(source)
        return edges is not None and destination in edges
