"""All-pairs topology statistics built on repeated Dijkstra runs."""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from algorithms.dijkstra import DijkstraSSSP
from model.graph import WeightedGraph

__all__ = ['TopologyStats']


class TopologyStats:
    """Shortest-path distance and hop matrices of a graph.

    Row ``i`` / column ``j`` refer to ``order[i]`` / ``order[j]`` (vertex
    handles in insertion order).  Unreachable pairs hold ``inf`` in both
    matrices and are left out of every statistic.
    """

    def __init__(self, graph: WeightedGraph, directed: bool = True):
        self.order: List[int] = graph.vertices()
        self.index: Dict[int, int] = {v: i for i, v in enumerate(self.order)}
        n = len(self.order)
        self.dist = np.full((n, n), np.inf)
        self.hops = np.full((n, n), np.inf)
        self.solvers: Dict[int, DijkstraSSSP] = {}
        for i, u in enumerate(self.order):
            sssp = DijkstraSSSP(graph, u, directed=directed)
            self.solvers[u] = sssp
            for j, v in enumerate(self.order):
                path = sssp.path_to(v)
                if path is not None:
                    self.dist[i, j] = path.length
                    self.hops[i, j] = path.hops

    # ------------------------------------------------------------------
    def _pair_mask(self) -> np.ndarray:
        mask = np.isfinite(self.dist)
        np.fill_diagonal(mask, False)
        return mask

    def diameter(self) -> float:
        """Longest shortest-path length over all reachable pairs."""
        mask = self._pair_mask()
        return float(self.dist[mask].max()) if mask.any() else 0.0

    def diameter_hops(self) -> int:
        mask = self._pair_mask()
        return int(self.hops[mask].max()) if mask.any() else 0

    def average_path_length(self) -> float:
        mask = self._pair_mask()
        return float(self.dist[mask].mean()) if mask.any() else 0.0

    def average_hops(self) -> float:
        mask = self._pair_mask()
        return float(self.hops[mask].mean()) if mask.any() else 0.0
