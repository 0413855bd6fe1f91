"""Unit vector → geographic coordinates.

:class:`AxisProjection` is a ready-made ``project`` callable for
:func:`~worldgrid.metrics.compute_metrics`.  The planet spins about +Y,
optionally tilted about +X; latitude is measured from the equator and
longitude from the +Z meridian, both in radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .geometry import angle_between, normalize, rotate, rotation_matrix
from .models import Vec3

_NEARLY_ZERO = 1e-9


@dataclass(frozen=True)
class AxisProjection:
    """Latitude / longitude relative to a (possibly tilted) rotation axis.

    Attributes
    ----------
    axial_tilt : float
        Tilt of the rotation axis away from +Y, about +X, in radians.
    """

    axial_tilt: float = 0.0
    axis: Vec3 = field(init=False)
    _to_body: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tilt = rotation_matrix((1.0, 0.0, 0.0), self.axial_tilt)
        object.__setattr__(self, "axis", normalize(rotate(tilt, (0.0, 1.0, 0.0))))
        object.__setattr__(self, "_to_body", tilt.T)

    def latitude(self, v: Vec3) -> float:
        return math.pi / 2 - angle_between(self.axis, v)

    def longitude(self, v: Vec3) -> float:
        x, _, z = rotate(self._to_body, v)
        if abs(x) < _NEARLY_ZERO and abs(z) < _NEARLY_ZERO:
            return 0.0
        return math.atan2(x, z)

    def __call__(self, v: Vec3) -> Tuple[float, float]:
        return self.latitude(v), self.longitude(v)


def lat_lon_to_vector(latitude: float, longitude: float) -> Vec3:
    """Inverse of an untilted :class:`AxisProjection`."""
    cos_lat = math.cos(latitude)
    return (cos_lat * math.sin(longitude), math.sin(latitude), cos_lat * math.cos(longitude))
