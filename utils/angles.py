import math

__all__ = [
    'rad2deg',
    'normalize_deg',
    'polar_direction_deg',
    'ccw_gap_deg',
    'ring_angle_distance_deg',
]

def rad2deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / math.pi

def normalize_deg(deg: float) -> float:
    """Reduce an angle in degrees to the range [0, 360)."""
    deg = deg % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if deg >= 360.0 else deg

def polar_direction_deg(dx: float, dy: float) -> float:
    """Polar angle of the vector (dx, dy) in degrees, in [0, 360).

    ``atan2`` yields (-pi, pi]; negative results are shifted by a full turn.
    """
    direction = math.atan2(dy, dx)
    if direction < 0:
        direction += 2 * math.pi
    return normalize_deg(rad2deg(direction))

def ccw_gap_deg(start: float, end: float) -> float:
    """Counter-clockwise sweep from ``start`` to ``end``, in [0, 360)."""
    return (end - start + 360.0) % 360.0

def ring_angle_distance_deg(x: float, y: float) -> float:
    """Return the minimal distance between two angles on a ring [0, 360)."""
    diff = abs(x - y) % 360.0
    return min(diff, 360.0 - diff)
