"""Arena-backed graph containers.

Vertices and edges are stored in flat lists owned by the graph and are
addressed by integer handles (their slot index).  Removing an element
leaves a tombstone so handles of the remaining elements never change.

Edges are undirected for adjacency purposes, but the first endpoint given
to :meth:`Graph.insert_edge` is remembered as the edge's *from* vertex.
Algorithms that need a direction (backbone expansion, shortest paths,
antenna coverage) read it through :meth:`Graph.outgoing_edges` and
:meth:`Graph.find_edge`.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .elements import Link, Node

__all__ = ['Graph', 'WeightedGraph']


class Graph:
    """A minimal graph of :class:`Node` vertices and :class:`Link` edges."""

    def __init__(self) -> None:
        self._vertices: List[Optional[Node]] = []
        self._incident: List[Optional[List[int]]] = []
        self._edges: List[Optional[Link]] = []
        self._ends: List[Optional[Tuple[int, int]]] = []
        self._by_name: Dict[str, int] = {}
        self._edge_slots: Dict[Link, int] = {}

    # ------------------------------------------------------------------
    # Element access
    def vertices(self) -> List[int]:
        """Handles of all live vertices, in insertion order."""
        return [i for i, v in enumerate(self._vertices) if v is not None]

    def edges(self) -> List[int]:
        """Handles of all live edges, in insertion order."""
        return [i for i, e in enumerate(self._edges) if e is not None]

    def vertex(self, v: int) -> Optional[Node]:
        return self._vertices[v] if self.has_vertex(v) else None

    def edge(self, e: int) -> Optional[Link]:
        return self._edges[e] if self.has_edge(e) else None

    def iter_vertices(self) -> Iterator[Tuple[int, Node]]:
        for i, v in enumerate(self._vertices):
            if v is not None:
                yield i, v

    def iter_edges(self) -> Iterator[Tuple[int, Link]]:
        for i, e in enumerate(self._edges):
            if e is not None:
                yield i, e

    def has_vertex(self, v: Optional[int]) -> bool:
        return v is not None and 0 <= v < len(self._vertices) and self._vertices[v] is not None

    def has_edge(self, e: Optional[int]) -> bool:
        return e is not None and 0 <= e < len(self._edges) and self._edges[e] is not None

    def find_vertex(self, name: str) -> Optional[int]:
        return self._by_name.get(name)

    @property
    def num_vertices(self) -> int:
        return len(self._by_name)

    @property
    def num_edges(self) -> int:
        return len(self._edge_slots)

    # ------------------------------------------------------------------
    # Adjacency queries
    def incident_edges(self, v: int) -> List[int]:
        if not self.has_vertex(v):
            return []
        return list(self._incident[v])

    def outgoing_edges(self, v: int) -> List[int]:
        """Incident edges whose *from* endpoint is ``v``."""
        if not self.has_vertex(v):
            return []
        return [e for e in self._incident[v] if self._ends[e][0] == v]

    def end_vertices(self, e: int) -> Optional[Tuple[int, int]]:
        """``(from, to)`` handles of edge ``e``."""
        if not self.has_edge(e):
            return None
        return self._ends[e]

    def opposite(self, v: int, e: int) -> Optional[int]:
        if not self.has_vertex(v) or not self.has_edge(e):
            return None
        a, b = self._ends[e]
        if v == a:
            return b
        if v == b:
            return a
        return None

    def are_adjacent(self, u: int, v: int) -> bool:
        if not self.has_vertex(u) or not self.has_vertex(v):
            return False
        # scan the shorter incidence list
        if len(self._incident[u]) > len(self._incident[v]):
            u, v = v, u
        return any(self.opposite(u, e) == v for e in self._incident[u])

    def find_edge(self, u: int, v: int) -> Optional[int]:
        """Handle of an edge directed ``u -> v``, or ``None``."""
        if not self.has_vertex(u) or not self.has_vertex(v):
            return None
        for e in self._incident[u]:
            if self._ends[e] == (u, v):
                return e
        return None

    # ------------------------------------------------------------------
    # Mutation
    def insert_vertex(self, vertex: Node) -> int:
        """Insert ``vertex`` unless a vertex of the same name exists.

        Returns the handle of the inserted or already present vertex.
        """
        existing = self._by_name.get(vertex.name)
        if existing is not None:
            return existing
        self._vertices.append(vertex)
        self._incident.append([])
        handle = len(self._vertices) - 1
        self._by_name[vertex.name] = handle
        return handle

    def insert_edge(self, u: int, v: int, edge: Optional[Link] = None) -> Optional[int]:
        """Insert ``edge`` directed ``u -> v``.

        Returns ``None`` if either endpoint is not a vertex of this graph (or
        both are the same vertex).  Re-inserting a link already present
        returns its existing handle.
        """
        if edge is not None and edge in self._edge_slots:
            return self._edge_slots[edge]
        if not self.has_vertex(u) or not self.has_vertex(v) or u == v:
            return None
        if edge is None:
            edge = Link(self._vertices[u].name + self._vertices[v].name)
        self._edges.append(edge)
        self._ends.append((u, v))
        handle = len(self._edges) - 1
        self._edge_slots[edge] = handle
        self._incident[u].append(handle)
        self._incident[v].append(handle)
        self._on_edge_inserted(handle)
        return handle

    def _on_edge_inserted(self, e: int) -> None:
        pass

    def remove_edge(self, e: int) -> Optional[Link]:
        if not self.has_edge(e):
            return None
        edge = self._edges[e]
        for v in self._ends[e]:
            self._incident[v].remove(e)
        self._edges[e] = None
        self._ends[e] = None
        del self._edge_slots[edge]
        return edge

    def remove_vertex(self, v: int) -> Optional[Node]:
        if not self.has_vertex(v):
            return None
        for e in list(self._incident[v]):
            self.remove_edge(e)
        vertex = self._vertices[v]
        self._vertices[v] = None
        self._incident[v] = None
        del self._by_name[vertex.name]
        return vertex

    def clear_edges(self) -> None:
        for e in self.edges():
            self.remove_edge(e)

    def retain_edges(self, keep: Callable[[int], bool]) -> int:
        """Remove every edge for which ``keep(handle)`` is false.

        Returns the number of removed edges.
        """
        doomed = [e for e in self.edges() if not keep(e)]
        for e in doomed:
            self.remove_edge(e)
        return len(doomed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.num_vertices}, edges={self.num_edges})"


class WeightedGraph(Graph):
    """Graph whose link weights are the Euclidean length of the link.

    The weight is assigned once, when the link is inserted.
    """

    def _on_edge_inserted(self, e: int) -> None:
        u, v = self._ends[e]
        self._edges[e].weight = self._vertices[u].distance_to(self._vertices[v])

    def weight(self, e: int) -> float:
        return self._edges[e].weight if self.has_edge(e) else 0.0

    def total_weight(self) -> float:
        return sum(edge.weight for _, edge in self.iter_edges())
