"""Angle wrapping helpers.

Both helpers take the truncated remainder (sign of the dividend) and apply a
single shift, so results land in (-180, 180] and (-pi, pi] respectively.
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def normalize_degrees(deg: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    d = math.fmod(deg, 360.0)
    if d > 180.0:
        d -= 360.0
    if d <= -180.0:
        d += 360.0
    return d


def normalize_radians(rad: float) -> float:
    """Wrap an angle in radians into (-pi, pi]."""
    r = math.fmod(rad, TWO_PI)
    if r > math.pi:
        r -= TWO_PI
    if r <= -math.pi:
        r += TWO_PI
    return r
