"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any graph
that satisfies the WeightedGraph interface. Only get_weighted_edges() and
zero_weight are read, so any storage engine works.
"""

from typing import Any, Dict, Hashable, List, Tuple
import heapq
import itertools
import logging

from algorithms import DijkstraEngine
from exceptions import NegativeWeightError, WeightTypeError
from weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Heap entries are (cost, sequence, key). The sequence number breaks cost
    ties in discovery order, so keys never need to be orderable and graphs
    weighted with NO_WEIGHT are explored first-in first-out.

    Complexity:
        O(E log V) over the keys reachable from the source.
    """

    def shortest_path_costs(self, graph: WeightedGraph, source: Hashable) -> Dict[Any, Any]:
        """
        Compute only the cost map for all reachable keys from source.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: WeightedGraph, source: Hashable
    ) -> tuple[Dict[Any, Any], Dict[Any, Any]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Returns the distance map (dest -> cost from source) plus a predecessor
        map that walks back from any reachable key to the source. The source
        itself has no entry in the predecessor map. Edges to keys that are not
        in the graph are reachable leaves: they get a cost but never expand.

        Raises NegativeWeightError for a weight below zero_weight and
        WeightTypeError when a weight cannot be compared or added to it, e.g.
        a numeric weight stored on a graph whose zero weight is NO_WEIGHT.
        """
        zero = graph.zero_weight
        dist: Dict[Any, Any] = {source: zero}
        prev: Dict[Any, Any] = {}
        settled = set()
        counter = itertools.count()
        pq: List[Tuple[Any, int, Any]] = [(zero, next(counter), source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)
            # Skip outdated entries
            if u in settled:
                continue
            settled.add(u)

            edges = graph.get_weighted_edges(u)
            if edges is None:
                continue

            for v, w in edges:
                try:
                    if w < zero:
                        raise NegativeWeightError(f"edge {u!r} -> {v!r} has negative weight {w!r}")
                    if v in settled:
                        continue
                    alt = d_u + w
                    if v not in dist or alt < dist[v]:
                        dist[v] = alt
                        prev[v] = u
                        heapq.heappush(pq, (alt, next(counter), v))
                except TypeError as exc:
                    raise WeightTypeError(
                        f"edge {u!r} -> {v!r} weight {w!r} does not combine with zero weight {zero!r}"
                    ) from exc

        logger.debug("dijkstra from %r settled %d keys", source, len(settled))
        return dist, prev
