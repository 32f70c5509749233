from __future__ import annotations

from typing import NamedTuple, Optional

__all__ = ['NetworkConfig', 'MST_ALGORITHMS']

MST_ALGORITHMS = ('kruskal', 'prim')


class NetworkConfig(NamedTuple):
    """Tunables of the logical network.

    ``min_beam_angle`` is the beam width given to a directional sensor whose
    covered neighbours all lie in one direction.  ``initial_range`` overrides
    the default range (longest backbone link).  With ``tight_ranges`` each
    sensor only reaches as far as its farthest covered neighbour instead of
    using the network-wide range.
    """

    min_beam_angle: float = 15.0
    mst_algorithm: str = 'kruskal'
    tight_ranges: bool = False
    initial_range: Optional[float] = None

    def validate(self) -> 'NetworkConfig':
        if self.mst_algorithm not in MST_ALGORITHMS:
            raise ValueError(f"unknown mst_algorithm: {self.mst_algorithm}")
        if not 0.0 <= self.min_beam_angle <= 360.0:
            raise ValueError(f"min_beam_angle out of range: {self.min_beam_angle}")
        if self.initial_range is not None and self.initial_range < 0:
            raise ValueError(f"initial_range must be non-negative: {self.initial_range}")
        return self
