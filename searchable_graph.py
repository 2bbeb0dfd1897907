"""
Path search over the Graph contract.

The search functions only call get_edges(), so any Graph implementation can
be searched. SearchableGraph and WeightedSearchableGraph expose them as
methods for engines that mix them in.

DFS and BFS deliberately track visited keys differently:

* DFS marks a key when it is popped. A key may sit on the stack several
  times; duplicates are dropped as they come off.
* BFS marks a key when it is enqueued, so each key is queued at most once.
  The source itself is not marked up front.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Hashable, List, Optional, Set, Tuple

from algorithms import DijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph import Graph, K, V
from path_chain import PathChain
from weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


def find_path_dfs(graph: Graph, source: Hashable, destination: Hashable) -> Optional[List[Any]]:
    """
    First path from source to destination found by depth-first search.

    Edges are expanded in insertion order: they are pushed in reverse so the
    first-added edge is popped first. The result is a path, not necessarily
    the shortest one. Returns None if destination is unreachable.
    """
    chain: PathChain = PathChain()
    visited: Set[Any] = set()
    stack: List[int] = [chain.add(source)]

    while stack:
        slot = stack.pop()
        key = chain.key(slot)
        if key in visited:
            continue
        visited.add(key)

        if key == destination:
            return chain.path_to(slot)

        edges = graph.get_edges(key)
        if edges is None:
            continue
        for edge in reversed(edges):
            stack.append(chain.add(edge, slot))

    logger.debug("dfs: no path %r -> %r (%d keys visited)", source, destination, len(visited))
    return None


def find_path_bfs(graph: Graph, source: Hashable, destination: Hashable) -> Optional[List[Any]]:
    """
    Path with the fewest edges from source to destination, by breadth-first search.

    Returns None if destination is unreachable.
    """
    chain: PathChain = PathChain()
    visited: Set[Any] = set()
    queue: Deque[int] = deque([chain.add(source)])

    while queue:
        slot = queue.popleft()
        key = chain.key(slot)

        if key == destination:
            return chain.path_to(slot)

        edges = graph.get_edges(key)
        if edges is None:
            continue
        for edge in edges:
            if edge not in visited:
                visited.add(edge)
                queue.append(chain.add(edge, slot))

    logger.debug("bfs: no path %r -> %r (%d keys queued)", source, destination, len(chain))
    return None


class SearchableGraph(Graph[K, V]):
    """
    Graph with path search built on get_edges().

    Adds no state; any Graph subclass can mix this in.
    """

    def find_path_dfs(self, source: K, destination: K) -> Optional[List[K]]:
        """Depth-first path from source to destination, or None."""
        return find_path_dfs(self, source, destination)

    def find_path_bfs(self, source: K, destination: K) -> Optional[List[K]]:
        """Fewest-edges path from source to destination, or None."""
        return find_path_bfs(self, source, destination)


class WeightedSearchableGraph(SearchableGraph[K, V], WeightedGraph[K, V]):
    """
    Searchable weighted graph with cheapest-path search.

    The DijkstraEngine can be swapped per instance by assigning
    ``dijkstra_engine``; the class default is a SimpleDijkstraEngine.
    """

    dijkstra_engine: DijkstraEngine = SimpleDijkstraEngine()

    def shortest_path_costs(self, source: K) -> dict:
        """Cheapest cost from source to every reachable key."""
        return self.dijkstra_engine.shortest_path_costs(self, source)

    def find_path_dijkstra(self, source: K, destination: K) -> Optional[Tuple[List[K], Any]]:
        """
        Cheapest path from source to destination and its total weight.

        Returns None if destination is unreachable.
        """
        dist, prev = self.dijkstra_engine.shortest_paths(self, source)
        if destination not in dist:
            return None

        path: List[K] = [destination]
        while path[-1] != source:
            path.append(prev[path[-1]])
        path.reverse()
        return path, dist[destination]
