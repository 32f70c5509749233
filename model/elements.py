"""Vertices, links and antenna state of a wireless sensor network.

A physical :class:`Node` is a named point in the plane.  A *sensor* is the
same kind of vertex carrying an :class:`Antenna`; the antenna is a field of
the node rather than a subclass so that physical and logical graphs never
share vertex objects (see :meth:`Node.to_sensor`).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from utils.angles import normalize_deg, polar_direction_deg

__all__ = ['AntennaType', 'Antenna', 'Node', 'Link']


class AntennaType(Enum):
    OMNIDIRECTIONAL = 'omnidirectional'
    DIRECTIONAL = 'directional'


class Antenna:
    """Antenna configuration of a sensor.

    ``angle`` is the beam width in degrees centred on ``direction`` (polar
    degrees).  Both are fixed for an omnidirectional antenna: assignments are
    ignored while the type is :attr:`AntennaType.OMNIDIRECTIONAL`.
    """

    def __init__(self, antenna_type: AntennaType = AntennaType.OMNIDIRECTIONAL, antenna_range: float = 0.0) -> None:
        self._type = antenna_type
        self.range = float(antenna_range)
        self._angle = 360.0
        self._direction = 0.0

    @property
    def type(self) -> AntennaType:
        return self._type

    @type.setter
    def type(self, value: AntennaType) -> None:
        self._type = value
        if value is AntennaType.OMNIDIRECTIONAL:
            self._angle = 360.0
            self._direction = 0.0

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        if self._type is AntennaType.DIRECTIONAL:
            self._angle = float(value)

    @property
    def direction(self) -> float:
        return self._direction

    @direction.setter
    def direction(self, value: float) -> None:
        if self._type is AntennaType.DIRECTIONAL:
            self._direction = normalize_deg(float(value))

    def sector_area(self) -> float:
        """Area of the covered circular sector, the energy proxy of the antenna."""
        return 0.5 * self.range ** 2 * math.radians(self._angle)

    def __repr__(self) -> str:
        return (
            f"Antenna(type={self._type.value}, range={self.range:.3f}, "
            f"angle={self._angle:.3f}, direction={self._direction:.3f})"
        )


@dataclass
class Node:
    """A named vertex in the plane, optionally equipped with an antenna."""

    name: str
    x: float
    y: float
    antenna: Optional[Antenna] = field(default=None, compare=False)

    @property
    def is_sensor(self) -> bool:
        return self.antenna is not None

    def distance_to(self, other: 'Node') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def direction_to(self, other: 'Node') -> float:
        """Polar direction (degrees, [0, 360)) of ``other`` seen from this node."""
        return polar_direction_deg(other.x - self.x, other.y - self.y)

    def to_sensor(self, antenna_type: AntennaType = AntennaType.OMNIDIRECTIONAL) -> 'Node':
        return Node(self.name, self.x, self.y, Antenna(antenna_type))

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Link:
    """A communication link.  Links compare and hash by identity."""

    name: str = ''
    weight: float = 0.0

    def __str__(self) -> str:
        return self.name
