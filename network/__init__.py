"""Logical sensor network: backbone, antenna orientation and statistics."""

from .config import NetworkConfig
from .orientation import (
    neighbour_angles,
    largest_gap,
    beam_direction,
    covering_beam,
    AntennaStats,
)
from .stats import TopologyStats
from .logical import Route, LogicalNetwork, build_backbone
from .antenna import AntennaOrientation

__all__ = [
    'NetworkConfig',
    'neighbour_angles',
    'largest_gap',
    'beam_direction',
    'covering_beam',
    'AntennaStats',
    'TopologyStats',
    'Route',
    'LogicalNetwork',
    'build_backbone',
    'AntennaOrientation',
]
