"""Logical (backbone) network of sensors derived from a physical network.

The backbone is the minimum spanning tree of the physical network.  Every
tree edge becomes a pair of links ``u -> v`` and ``v -> u`` so that both
endpoints cover each other.  After construction the network is *oriented*:
every sensor receives a range, and directional sensors a beam angle and
direction covering all of their outgoing links.

Changing the range regrows the link set from geometry (every ordered pair
within range is linked) and reorients all sensors from scratch.
"""

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Union

from algorithms.kruskal import KruskalMST
from algorithms.prim import PrimMST
from model.elements import AntennaType, Link, Node
from model.errors import VertexNotFoundError
from model.graph import WeightedGraph
from utils.angles import ring_angle_distance_deg
from .config import NetworkConfig
from .orientation import AntennaStats, covering_beam, neighbour_angles
from .stats import TopologyStats

__all__ = ['Route', 'LogicalNetwork', 'build_backbone']

Backbone = Union[KruskalMST, PrimMST]

_ANGLE_EPS = 1e-9


class Route(NamedTuple):
    names: List[str]
    length: float
    hops: int


def build_backbone(physical: WeightedGraph, config: Optional[NetworkConfig] = None) -> Backbone:
    cfg = (config or NetworkConfig()).validate()
    if cfg.mst_algorithm == 'prim':
        return PrimMST(physical)
    return KruskalMST(physical)


class LogicalNetwork:
    """Sensor network with one antenna type, built on the physical MST."""

    def __init__(
        self,
        physical: WeightedGraph,
        antenna_type: AntennaType = AntennaType.DIRECTIONAL,
        config: Optional[NetworkConfig] = None,
        logger: Optional[logging.Logger] = None,
        backbone: Optional[Backbone] = None,
    ):
        self.physical = physical
        self.antenna_type = antenna_type
        self.cfg = (config or NetworkConfig()).validate()
        self.log = logger or logging.getLogger(__name__)
        self.backbone = backbone if backbone is not None else build_backbone(physical, self.cfg)
        self.graph = WeightedGraph()
        self.stats = AntennaStats()
        self.range = 0.0
        self._topology: Optional[TopologyStats] = None

        longest = max((e.weight for _, e in self.backbone.mst.iter_edges()), default=0.0)
        self.default_range = longest if self.cfg.initial_range is None else float(self.cfg.initial_range)
        self.reset()

    # ------------------------------------------------------------------
    # Construction
    def _build_from_backbone(self) -> None:
        mst = self.backbone.mst
        self.graph = WeightedGraph()
        handles: Dict[int, int] = {}
        for v, node in mst.iter_vertices():
            handles[v] = self.graph.insert_vertex(node.to_sensor(self.antenna_type))
        for e, link in mst.iter_edges():
            a, b = mst.end_vertices(e)
            u, v = handles[a], handles[b]
            self._link(u, v)
            self._link(v, u)

    def _link(self, u: int, v: int) -> Optional[int]:
        G = self.graph
        return G.insert_edge(u, v, Link(G.vertex(u).name + G.vertex(v).name))

    def reset(self) -> None:
        """Return to the MST backbone with the default range."""
        self._build_from_backbone()
        self.range = self.default_range
        self.log.info(
            "%s network reset: %d sensors, %d links, range %.3f",
            self.antenna_type.value, self.graph.num_vertices, self.graph.num_edges, self.range,
        )
        self.orient()

    # ------------------------------------------------------------------
    # Range updates
    def update_range(self, new_range: float) -> None:
        """Relink every ordered sensor pair within ``new_range`` and reorient."""
        if new_range < 0:
            raise ValueError(f"range must be non-negative: {new_range}")
        self.range = float(new_range)
        if self.antenna_type is AntennaType.OMNIDIRECTIONAL:
            self._rebuild_links()
        else:
            self._adjust_links()
        self.log.info(
            "%s network range set to %.3f: %d links",
            self.antenna_type.value, self.range, self.graph.num_edges,
        )
        self.orient()

    def _in_range(self, u: int, v: int) -> bool:
        G = self.graph
        return u != v and G.vertex(u).distance_to(G.vertex(v)) <= self.range

    def _rebuild_links(self) -> None:
        G = self.graph
        G.clear_edges()
        sensors = G.vertices()
        for u in sensors:
            for v in sensors:
                if self._in_range(u, v):
                    self._link(u, v)

    def _adjust_links(self) -> None:
        G = self.graph
        G.retain_edges(lambda e: self._in_range(*G.end_vertices(e)))
        sensors = G.vertices()
        for u in sensors:
            for v in sensors:
                if self._in_range(u, v) and G.find_edge(u, v) is None:
                    self._link(u, v)

    # ------------------------------------------------------------------
    # Orientation
    def covered_neighbours(self, v: int) -> List[int]:
        G = self.graph
        return [G.opposite(v, e) for e in G.outgoing_edges(v)]

    def orient(self) -> None:
        """Recompute range, angle and direction of every sensor."""
        G = self.graph
        self.stats.reset()
        self._topology = None
        for v, sensor in G.iter_vertices():
            neighbours = [G.vertex(u) for u in self.covered_neighbours(v)]
            self._orient_sensor(sensor, neighbours)
            self.stats.add(sensor.antenna)
            self.log.debug("oriented %s: %r", sensor.name, sensor.antenna)

    def _sensor_range(self, sensor: Node, neighbours: List[Node]) -> float:
        if not neighbours:
            return 0.0
        if self.cfg.tight_ranges:
            return max(sensor.distance_to(n) for n in neighbours)
        return self.range

    def _orient_sensor(self, sensor: Node, neighbours: List[Node]) -> None:
        antenna = sensor.antenna
        antenna.type = self.antenna_type
        antenna.range = self._sensor_range(sensor, neighbours)
        if self.antenna_type is AntennaType.DIRECTIONAL:
            angle, direction = covering_beam(
                neighbour_angles(sensor, neighbours), self.cfg.min_beam_angle
            )
            antenna.angle = angle
            antenna.direction = direction

    # ------------------------------------------------------------------
    # Coverage
    def beam_covers(self, v: int, u: int) -> bool:
        """True if sensor ``u`` lies inside the antenna sector of sensor ``v``."""
        G = self.graph
        if not G.has_vertex(v) or not G.has_vertex(u) or u == v:
            return False
        src, dst = G.vertex(v), G.vertex(u)
        antenna = src.antenna
        if src.distance_to(dst) > antenna.range:
            return False
        if antenna.type is AntennaType.OMNIDIRECTIONAL:
            return True
        offset = ring_angle_distance_deg(antenna.direction, src.direction_to(dst))
        # sector edges pass exactly through covered neighbours
        return offset <= antenna.angle / 2.0 + _ANGLE_EPS

    def coverage_graph(self) -> WeightedGraph:
        """Links ``v -> u`` for every sensor ``u`` within ``v``'s sector.

        Besides the oriented links this picks up sensors that happen to fall
        inside a beam without being targeted by it.
        """
        G = self.graph
        out = WeightedGraph()
        handles: Dict[int, int] = {}
        for v, sensor in G.iter_vertices():
            handles[v] = out.insert_vertex(Node(sensor.name, sensor.x, sensor.y))
        for v in handles:
            for u in handles:
                if self.beam_covers(v, u):
                    out.insert_edge(handles[v], handles[u], Link(G.vertex(v).name + G.vertex(u).name))
        return out

    # ------------------------------------------------------------------
    # Statistics
    @property
    def average_angle(self) -> float:
        return self.stats.average_angle

    @property
    def average_range(self) -> float:
        return self.stats.average_range

    @property
    def total_energy(self) -> float:
        return self.stats.total_energy

    def topology(self) -> TopologyStats:
        if self._topology is None:
            self._topology = TopologyStats(self.graph)
        return self._topology

    def diameter(self) -> float:
        return self.topology().diameter()

    def diameter_hops(self) -> int:
        return self.topology().diameter_hops()

    def average_path_length(self) -> float:
        return self.topology().average_path_length()

    def average_hops(self) -> float:
        return self.topology().average_hops()

    # ------------------------------------------------------------------
    # Name based queries
    def sensor_handle(self, name: str) -> int:
        v = self.graph.find_vertex(name)
        if v is None:
            raise VertexNotFoundError(name)
        return v

    def sensor(self, name: str) -> Node:
        return self.graph.vertex(self.sensor_handle(name))

    def shortest_route(self, from_name: str, to_name: str) -> Optional[Route]:
        """Shortest route between two named sensors, ``None`` if unreachable."""
        u = self.sensor_handle(from_name)
        v = self.sensor_handle(to_name)
        path = self.topology().solvers[u].path_to(v)
        if path is None:
            return None
        names = [self.graph.vertex(x).name for x in path.vertices]
        return Route(names, path.length, path.hops)

    def summary(self) -> dict:
        out = {
            'antenna_type': self.antenna_type.value,
            'range': self.range,
            'sensors': self.graph.num_vertices,
            'links': self.graph.num_edges,
            'diameter': self.diameter(),
            'diameter_hops': self.diameter_hops(),
            'average_path_length': self.average_path_length(),
            'average_hops': self.average_hops(),
        }
        out.update(self.stats.as_dict())
        return out
