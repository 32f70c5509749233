"""Utility modules for the sensor network model."""

from .angles import (
    rad2deg,
    normalize_deg,
    polar_direction_deg,
    ccw_gap_deg,
    ring_angle_distance_deg,
)

__all__ = [
    "rad2deg",
    "normalize_deg",
    "polar_direction_deg",
    "ccw_gap_deg",
    "ring_angle_distance_deg",
]
