"""Graph algorithms used to build and query the sensor backbone."""

from .quicksort import quicksort
from .kruskal import KruskalMST
from .prim import PrimMST
from .dijkstra import Path, DijkstraSSSP
from .vertex_cover import ApproxVertexCover

__all__ = [
    'quicksort',
    'KruskalMST',
    'PrimMST',
    'Path',
    'DijkstraSSSP',
    'ApproxVertexCover',
]
