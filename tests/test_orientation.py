import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from model import Antenna, AntennaType
from network import AntennaStats, beam_direction, covering_beam, largest_gap


def test_largest_gap_wraps_around():
    gap, idx = largest_gap([40.0, 270.0])
    assert gap == pytest.approx(230.0)
    assert idx == 1
    gap, idx = largest_gap([10.0, 100.0, 350.0])
    assert gap == pytest.approx(250.0)
    assert idx == 2


def test_largest_gap_single_direction_is_zero():
    assert largest_gap([90.0]) == (0.0, 0)


def test_beam_direction_flips_unless_gap_crosses_zero():
    # gap 45 -> 270 does not cross zero; covered arc is centred on 337.5
    assert beam_direction(45.0, 270.0) == pytest.approx(337.5)
    # gap 270 -> 45 crosses zero; covered arc is centred on 157.5
    assert beam_direction(270.0, 45.0) == pytest.approx(157.5)


def test_covering_beam_two_neighbours():
    angle, direction = covering_beam([270.0, 45.0])
    assert angle == pytest.approx(135.0)
    assert direction == pytest.approx(337.5)


def test_covering_beam_single_neighbour_uses_floor():
    assert covering_beam([270.0]) == (15.0, 270.0)
    assert covering_beam([90.0, 90.0], min_angle=10.0) == (10.0, 90.0)


def test_covering_beam_without_neighbours():
    assert covering_beam([]) == (0.0, 0.0)


@pytest.mark.parametrize('angles', [
    [0.0, 120.0, 240.0],
    [10.0, 20.0, 30.0, 200.0],
    [359.0, 1.0],
    [5.0, 95.0, 185.0, 275.0],
])
def test_covering_beam_bounds(angles):
    angle, direction = covering_beam(angles)
    assert 0.0 < angle <= 360.0
    assert 0.0 <= direction < 360.0
    for a in angles:
        offset = abs((a - direction + 180.0) % 360.0 - 180.0)
        assert offset <= angle / 2.0 + 1e-9


def test_running_stats_match_plain_mean():
    stats = AntennaStats()
    values = [(15.0, 5.0), (143.13, 5.0), (106.26, 5.0), (15.0, 5.0)]
    for angle, rng in values:
        ant = Antenna(AntennaType.DIRECTIONAL, rng)
        ant.angle = angle
        stats.add(ant)
    assert stats.count == 4
    assert stats.average_angle == pytest.approx(sum(a for a, _ in values) / 4)
    assert stats.average_range == pytest.approx(5.0)
    assert stats.total_energy == pytest.approx(0.5 * 25.0 * math.radians(sum(a for a, _ in values)))
    stats.reset()
    assert stats.as_dict() == {'average_angle': 0.0, 'average_range': 0.0, 'total_energy': 0.0}
