from __future__ import annotations

import heapq
from typing import List, Optional, Set, Tuple

from model.elements import Link
from model.graph import WeightedGraph

__all__ = ['PrimMST']


class PrimMST:
    """Prim's minimum spanning tree over the undirected adjacency.

    Exposes the same results as :class:`algorithms.kruskal.KruskalMST`
    (``mst``, ``tree_edges``, ``weight``, ``is_spanning_tree``).  When the
    graph is disconnected the search restarts from the next unvisited vertex,
    producing a spanning forest.
    """

    def __init__(self, graph: WeightedGraph, root: Optional[int] = None):
        self.graph = graph
        self.mst = WeightedGraph()
        self.tree_edges: List[int] = []
        self.weight = 0.0
        for _, node in graph.iter_vertices():
            self.mst.insert_vertex(node)

        visited: Set[int] = set()
        starts = graph.vertices()
        if root is not None and graph.has_vertex(root):
            starts.remove(root)
            starts.insert(0, root)
        for s in starts:
            if s not in visited:
                self._grow(s, visited)

    def _grow(self, root: int, visited: Set[int]) -> None:
        G = self.graph
        visited.add(root)
        pq: List[Tuple[float, int, int]] = []
        for e in G.incident_edges(root):
            heapq.heappush(pq, (G.weight(e), e, G.opposite(root, e)))
        while pq:
            w, e, v = heapq.heappop(pq)
            if v in visited:
                continue
            visited.add(v)
            self._accept(e)
            for f in G.incident_edges(v):
                nbr = G.opposite(v, f)
                if nbr not in visited:
                    heapq.heappush(pq, (G.weight(f), f, nbr))

    def _accept(self, e: int) -> None:
        G = self.graph
        u, v = G.end_vertices(e)
        edge = G.edge(e)
        self.mst.insert_edge(
            self.mst.find_vertex(G.vertex(u).name),
            self.mst.find_vertex(G.vertex(v).name),
            Link(edge.name),
        )
        self.tree_edges.append(e)
        self.weight += edge.weight

    @property
    def is_spanning_tree(self) -> bool:
        return len(self.tree_edges) == max(self.graph.num_vertices - 1, 0)
