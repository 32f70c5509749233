"""Antenna orientation sweep.

For a sensor with covered neighbours, the polar directions towards them are
sorted and walked cyclically.  The widest gap between two consecutive
directions is the arc the antenna may leave uncovered: the beam width is
``360 - gap`` and the beam points at the middle of the covered arc.

Example: neighbours at 45 and 270 degrees leave gaps of 135 (270 -> 45) and
225 (45 -> 270).  The widest gap is the second one, so the beam is 135
degrees wide and centred on ``(45 + 270) / 2 + 180 = 337.5``.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from model.elements import Antenna, Node
from utils.angles import ccw_gap_deg

__all__ = [
    'neighbour_angles',
    'largest_gap',
    'beam_direction',
    'covering_beam',
    'AntennaStats',
]


def neighbour_angles(sensor: Node, neighbours: Iterable[Node]) -> List[float]:
    """Polar directions (degrees) from ``sensor`` towards each neighbour."""
    return [sensor.direction_to(n) for n in neighbours]


def largest_gap(angles: Sequence[float]) -> Tuple[float, int]:
    """Widest cyclic gap of sorted ``angles``.

    The gap at index ``i`` runs from ``angles[i - 1]`` to ``angles[i]``
    (index 0 wraps around from the last angle).  The first maximum wins.
    """
    best, best_idx = -1.0, -1
    n = len(angles)
    for i in range(n):
        gap = ccw_gap_deg(angles[(i - 1) % n], angles[i])
        if gap > best:
            best, best_idx = gap, i
    return best, best_idx


def beam_direction(start: float, end: float) -> float:
    """Centre of the covered arc, given the bounds of the uncovered one.

    ``start`` and ``end`` bound the largest gap.  Their midpoint lies inside
    the gap unless the gap crosses 0 degrees, so it is flipped by 180 in the
    non-wrapping case.
    """
    direction = (start + end) / 2.0
    if end > start:
        direction += 180.0
    return direction % 360.0


def covering_beam(angles: Iterable[float], min_angle: float = 15.0) -> Tuple[float, float]:
    """``(beam angle, direction)`` covering every direction in ``angles``."""
    ordered = sorted(angles)
    if not ordered:
        return 0.0, 0.0
    gap, idx = largest_gap(ordered)
    # a zero gap means every neighbour lies in one direction
    angle = min_angle if gap == 0.0 else 360.0 - gap
    direction = beam_direction(ordered[idx - 1], ordered[idx])
    return angle, direction


class AntennaStats:
    """Running averages of antenna angle and range, and total energy."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.count = 0
        self.average_angle = 0.0
        self.average_range = 0.0
        self.total_energy = 0.0

    def add(self, antenna: Antenna) -> None:
        n = self.count
        self.average_angle = self.average_angle * n / (n + 1) + antenna.angle * 1 / (n + 1)
        self.average_range = self.average_range * n / (n + 1) + antenna.range * 1 / (n + 1)
        self.total_energy += antenna.sector_area()
        self.count += 1

    def as_dict(self) -> dict:
        return {
            'average_angle': self.average_angle,
            'average_range': self.average_range,
            'total_energy': self.total_energy,
        }
