from __future__ import annotations

from typing import Set

from model.graph import Graph

__all__ = ['ApproxVertexCover']


class ApproxVertexCover:
    """2-approximate vertex cover (Cormen et al., 3rd ed., p. 1109).

    Repeatedly picks a remaining edge, adds both endpoints to the cover and
    discards every edge touching either of them.  The picked edges form a
    maximal matching, exposed as ``matching``.
    """

    def __init__(self, graph: Graph):
        self.cover: Set[int] = set()
        self.matching: Set[int] = set()
        remaining = set(graph.edges())
        for e in graph.edges():
            if e not in remaining:
                continue
            u, v = graph.end_vertices(e)
            self.cover.update((u, v))
            self.matching.add(e)
            remaining.difference_update(graph.incident_edges(u))
            remaining.difference_update(graph.incident_edges(v))
