"""
Algorithm interfaces for weighted path search.

Shortest-path engines only see a graph through the WeightedGraph contract,
so storage engines and search strategies can vary independently.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable

from weighted_graph import WeightedGraph


class DijkstraEngine(ABC):
    """
    Interface for single-source cheapest-path computation over edge weights.

    Costs are accumulated with ``+`` starting from ``graph.zero_weight``, so
    any ordered weight type with an additive zero works, NO_WEIGHT included.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: WeightedGraph, source: Hashable) -> Dict[Any, Any]:
        """
        Cheapest cost from source to every key it can reach.

        Returns:
            Mapping key -> total weight of the cheapest source -> key path.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: WeightedGraph, source: Hashable
    ) -> tuple[Dict[Any, Any], Dict[Any, Any]]:
        """
        Cheapest costs plus the predecessor of each reached key.

        Returns:
            (dist, prev): dist as in shortest_path_costs(), prev maps every
            reached key except source to the key it was reached from.
        """
        raise NotImplementedError
