"""
Concrete directed, weighted graph implementation.

Implements the Graph, WeightedGraph and searchable interfaces using a dense
adjacency-list representation: node values in one list and, in a parallel
list, one edge list per node.

Key caveat: keys are positions. remove() compacts both lists, so every key
above the removed one now names the node that used to sit one slot higher.
Edges held by other nodes are not rewritten. Callers that need stable keys
across removals should not hold on to keys past a remove().
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple
import logging

import numpy as np

from graph import EdgeView, K, V
from index_key import IndexKey, to_index
from searchable_graph import WeightedSearchableGraph
from weighted_graph import NO_WEIGHT, NoWeight, WeightedEdgeView

logger = logging.getLogger(__name__)


class AdjacencyListGraph(WeightedSearchableGraph[K, V]):
    """
    Directed graph backed by a node list plus one (destination, weight) list per node.

    Args:
        nodes: initial node values; they receive keys 0..len(nodes)-1.
        default_weight: weight recorded by add_connection(). Defaults to
            NO_WEIGHT, which makes this an unweighted graph.
        key_type: builds a key from an array index. Keys passed in are
            converted back with ``__index__``.

    Complexity:
        O(1) node lookup, O(out-degree) edge iteration and edge removal,
        O(n) node removal.
    """

    def __init__(
        self,
        nodes: Iterable[V] = (),
        default_weight: Any = NO_WEIGHT,
        key_type: Callable[[int], IndexKey] = int,
    ) -> None:
        self._nodes: List[V] = list(nodes)
        self._edges: List[List[Tuple[K, Any]]] = [[] for _ in self._nodes]
        self._default_weight = default_weight
        self._key_type = key_type
        self._mutations = 0

    def _index(self, key: IndexKey) -> Optional[int]:
        index = to_index(key)
        if index is None or not 0 <= index < len(self._nodes):
            return None
        return index

    def _mutated(self) -> None:
        self._mutations += 1

    @property
    def mutation_count(self) -> int:
        return self._mutations

    @property
    def zero_weight(self) -> Any:
        return self._default_weight

    # --- Mutation API -------------------------------------------------------

    def insert(self, value: V) -> K:
        self._nodes.append(value)
        self._edges.append([])
        self._mutated()
        return self._key_type(len(self._nodes) - 1)

    def remove(self, key: K) -> Optional[V]:
        """
        Remove a node and its outgoing edges, shifting higher keys down by one.
        """
        index = self._index(key)
        if index is None:
            return None

        del self._edges[index]
        value = self._nodes.pop(index)
        self._mutated()
        if index < len(self._nodes):
            logger.debug(
                "removed node %d; keys %d..%d shifted down by one",
                index, index + 1, len(self._nodes),
            )
        return value

    def add_connection(self, source: K, destination: K) -> bool:
        return self.add_weighted_connection(source, destination, self._default_weight)

    def add_weighted_connection(self, source: K, destination: K, weight: Any) -> bool:
        index = self._index(source)
        if index is None:
            return False
        self._edges[index].append((destination, weight))
        self._mutated()
        return True

    def remove_connection(self, source: K, destination: K) -> bool:
        """
        Remove the lowest-positioned edge source -> destination, whatever its weight.
        """
        index = self._index(source)
        if index is None:
            return False

        edges = self._edges[index]
        for position, (dest, _) in enumerate(edges):
            if dest == destination:
                del edges[position]
                self._mutated()
                return True
        return False

    # --- Graph interface ----------------------------------------------------

    def get(self, key: K) -> Optional[Tuple[V, EdgeView[K]]]:
        index = self._index(key)
        if index is None:
            return None
        return self._nodes[index], EdgeView(self._edges[index], self)

    def get_value(self, key: K) -> Optional[V]:
        index = self._index(key)
        if index is None:
            return None
        return self._nodes[index]

    def get_edges(self, key: K) -> Optional[EdgeView[K]]:
        index = self._index(key)
        if index is None:
            return None
        return EdgeView(self._edges[index], self)

    # --- WeightedGraph interface --------------------------------------------

    def get_weighted(self, key: K) -> Optional[Tuple[V, WeightedEdgeView[K, Any]]]:
        index = self._index(key)
        if index is None:
            return None
        return self._nodes[index], WeightedEdgeView(self._edges[index], self)

    def get_weighted_edges(self, key: K) -> Optional[WeightedEdgeView[K, Any]]:
        index = self._index(key)
        if index is None:
            return None
        return WeightedEdgeView(self._edges[index], self)

    # --- Container helpers --------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return self._index(key) is not None  # type: ignore[arg-type]

    def keys(self) -> Iterator[K]:
        """Keys of all nodes, in index order."""
        return (self._key_type(i) for i in range(len(self._nodes)))

    def values(self) -> Iterator[V]:
        return iter(self._nodes)

    def edge_count(self) -> int:
        """Total number of stored edges, dangling ones included."""
        return sum(len(edges) for edges in self._edges)

    def adjacency_matrix(self, dtype: Any = float) -> np.ndarray:
        """
        Dense n x n matrix of edge weights.

        Entry [i, j] sums the weights of all edges i -> j. Edges weighted with
        NO_WEIGHT count as 1 each. Edges whose destination is not a node of
        this graph are left out. Sums are taken in float64 and cast to dtype
        once, so fractional parallel weights are not truncated one by one.
        """
        n = len(self._nodes)
        matrix = np.zeros((n, n), dtype=np.float64)
        for i, edges in enumerate(self._edges):
            for dest, weight in edges:
                j = self._index(dest)
                if j is None:
                    continue
                matrix[i, j] += 1 if isinstance(weight, NoWeight) else weight
        return matrix.astype(dtype)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={len(self._nodes)}, "
            f"edges={self.edge_count()}, default_weight={self._default_weight!r})"
        )
