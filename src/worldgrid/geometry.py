"""Vector helpers used across the package.

Positions are plain ``(x, y, z)`` tuples; rotations are 3×3 numpy arrays.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .models import Vec3


def add(*vectors: Vec3) -> Vec3:
    return (
        sum(v[0] for v in vectors),
        sum(v[1] for v in vectors),
        sum(v[2] for v in vectors),
    )


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vec3, factor: float) -> Vec3:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def length(v: Vec3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vec3) -> Vec3:
    n = length(v)
    if n < 1e-15:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / n, v[1] / n, v[2] / n)


def normalized_sum(vectors: Iterable[Vec3]) -> Vec3:
    """Unit vector in the direction of the sum of *vectors*."""
    return normalize(add(*vectors))


def chord_distance(a: Vec3, b: Vec3) -> float:
    """Straight-line distance between two points."""
    return length(sub(a, b))


def angle_between(a: Vec3, b: Vec3) -> float:
    """Angle in radians between two non-zero vectors."""
    cos_a = dot(a, b) / (length(a) * length(b))
    return math.acos(max(-1.0, min(1.0, cos_a)))


# ═══════════════════════════════════════════════════════════════════
# Rotations
# ═══════════════════════════════════════════════════════════════════

def rotation_matrix(axis: Vec3, angle: float) -> np.ndarray:
    """Right-handed rotation of *angle* radians about *axis* (Rodrigues)."""
    ux, uy, uz = normalize(axis)
    k = np.array([
        [0.0, -uz, uy],
        [uz, 0.0, -ux],
        [-uy, ux, 0.0],
    ])
    return np.eye(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)


def rotate(matrix: np.ndarray, v: Vec3) -> Vec3:
    x, y, z = matrix @ np.asarray(v, dtype=float)
    return (float(x), float(y), float(z))
