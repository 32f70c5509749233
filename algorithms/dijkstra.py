"""Single-source shortest paths (Dijkstra).

Adapted from a dictionary-of-dictionaries heap search to the arena graph.
The relaxation phase runs once per source; any number of destinations can
then be queried with :meth:`DijkstraSSSP.path_to`.
"""

from __future__ import annotations

import heapq
import math
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from model.errors import VertexNotFoundError
from model.graph import WeightedGraph

__all__ = ['Path', 'DijkstraSSSP']


class Path(NamedTuple):
    vertices: List[int]
    edges: List[int]
    length: float

    @property
    def hops(self) -> int:
        return len(self.edges)


class DijkstraSSSP:
    """Shortest paths from ``source`` over non-negative link weights.

    With ``directed=True`` (the default) only outgoing edges are relaxed,
    i.e. edges whose *from* endpoint is the vertex being settled.
    """

    def __init__(self, graph: WeightedGraph, source: int, directed: bool = True):
        if not graph.has_vertex(source):
            raise VertexNotFoundError(source)
        self.graph = graph
        self.source = source
        self.directed = directed
        self.distance: Dict[int, float] = {v: math.inf for v in graph.vertices()}
        self.predecessor: Dict[int, Optional[int]] = {v: None for v in graph.vertices()}
        self._via: Dict[int, int] = {}
        self._run()

    # ------------------------------------------------------------------
    def _neighbours(self, u: int) -> List[Tuple[int, int]]:
        G = self.graph
        edges = G.outgoing_edges(u) if self.directed else G.incident_edges(u)
        return [(e, G.opposite(u, e)) for e in edges]

    def _run(self) -> None:
        self.distance[self.source] = 0.0
        pq: List[Tuple[float, int]] = [(0.0, self.source)]
        visited: Set[int] = set()
        while pq:
            cost, u = heapq.heappop(pq)
            if u in visited:
                continue
            visited.add(u)
            for e, v in self._neighbours(u):
                if v in visited:
                    continue
                alt = cost + self.graph.weight(e)
                if alt < self.distance[v]:
                    self.distance[v] = alt
                    self.predecessor[v] = u
                    self._via[v] = e
                    heapq.heappush(pq, (alt, v))

    # ------------------------------------------------------------------
    def reachable(self, destination: int) -> bool:
        return math.isfinite(self.distance.get(destination, math.inf))

    def distance_to(self, destination: int) -> float:
        return self.distance.get(destination, math.inf)

    def path_to(self, destination: int) -> Optional[Path]:
        """Shortest path to ``destination``, or ``None`` if it is unreachable."""
        if not self.reachable(destination):
            return None
        vertices = [destination]
        edges: List[int] = []
        v = destination
        while v != self.source:
            edges.append(self._via[v])
            v = self.predecessor[v]
            vertices.append(v)
        vertices.reverse()
        edges.reverse()
        return Path(vertices, edges, self.distance[destination])
