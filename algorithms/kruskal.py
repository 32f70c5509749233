"""Kruskal's minimum spanning tree (Cormen et al., 3rd ed., p. 631).

Edges are taken in non-decreasing weight order; an edge is kept when its two
endpoints lie in different trees of the growing forest, and the two trees are
merged by moving the members of the smaller one into the larger one.
"""

from __future__ import annotations

from typing import Dict, List, Set

from model.elements import Link
from model.graph import WeightedGraph
from .quicksort import quicksort

__all__ = ['KruskalMST']


class KruskalMST:
    """Minimum spanning tree (forest, if disconnected) of a weighted graph.

    Attributes
    ----------
    mst:
        New :class:`WeightedGraph` with every vertex of the input (same
        insertion order, hence the same handles for a graph without removed
        vertices) and one fresh link per accepted edge, oriented like the
        input edge.
    tree_edges:
        Handles of the accepted input edges, in acceptance order.
    weight:
        Total weight of the accepted edges.
    """

    def __init__(self, graph: WeightedGraph):
        self.graph = graph
        self.mst = WeightedGraph()
        self.tree_edges: List[int] = []
        self.weight = 0.0
        self._run()

    # ------------------------------------------------------------------
    def _run(self) -> None:
        G = self.graph
        forests: List[Set[int]] = []
        forest_of: Dict[int, int] = {}
        for v, node in G.iter_vertices():
            forest_of[v] = len(forests)
            forests.append({v})
            self.mst.insert_vertex(node)

        # ties are broken by insertion order
        ordered = quicksort(G.edges(), key=lambda e: (G.weight(e), e))
        for e in ordered:
            u, v = G.end_vertices(e)
            i, j = forest_of[u], forest_of[v]
            if i == j:
                continue
            if len(forests[j]) <= len(forests[i]):
                small, large = j, i
            else:
                small, large = i, j
            for x in forests[small]:
                forest_of[x] = large
            forests[large] |= forests[small]
            forests[small] = set()

            edge = G.edge(e)
            self.mst.insert_edge(
                self.mst.find_vertex(G.vertex(u).name),
                self.mst.find_vertex(G.vertex(v).name),
                Link(edge.name),
            )
            self.tree_edges.append(e)
            self.weight += edge.weight

    # ------------------------------------------------------------------
    @property
    def is_spanning_tree(self) -> bool:
        """True when the input was connected (exactly |V| - 1 edges kept)."""
        return len(self.tree_edges) == max(self.graph.num_vertices - 1, 0)
