"""Graph model of the wireless sensor network."""

from .elements import AntennaType, Antenna, Node, Link
from .errors import VertexNotFoundError
from .graph import Graph, WeightedGraph
from .parser import parse_graph_description, load_graph

__all__ = [
    'AntennaType',
    'Antenna',
    'Node',
    'Link',
    'VertexNotFoundError',
    'Graph',
    'WeightedGraph',
    'parse_graph_description',
    'load_graph',
]
