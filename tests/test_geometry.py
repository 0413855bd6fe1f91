"""Tests for geometry.py."""

from __future__ import annotations

import math

import pytest

from worldgrid.geometry import (
    add,
    angle_between,
    chord_distance,
    dot,
    length,
    normalize,
    normalized_sum,
    rotate,
    rotation_matrix,
    scale,
    sub,
)


class TestVectors:
    def test_add_many(self):
        assert add((1.0, 2.0, 3.0), (1.0, 1.0, 1.0), (0.0, -3.0, 2.0)) == (2.0, 0.0, 6.0)

    def test_sub_and_scale(self):
        assert sub((3.0, 2.0, 1.0), (1.0, 1.0, 1.0)) == (2.0, 1.0, 0.0)
        assert scale((1.0, -2.0, 0.5), 2.0) == (2.0, -4.0, 1.0)

    def test_dot_and_length(self):
        assert dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == 32.0
        assert length((3.0, 4.0, 0.0)) == 5.0

    def test_normalize(self):
        assert normalize((0.0, 0.0, 2.0)) == (0.0, 0.0, 1.0)

    def test_normalize_zero_raises(self):
        with pytest.raises(ValueError):
            normalize((0.0, 0.0, 0.0))

    def test_normalized_sum(self):
        s = 1.0 / math.sqrt(2.0)
        assert normalized_sum([(1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]) == pytest.approx((s, s, 0.0))

    def test_chord_distance(self):
        assert chord_distance((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == pytest.approx(math.sqrt(2.0))

    def test_angle_between(self):
        assert angle_between((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(math.pi / 2)
        assert angle_between((1.0, 1.0, 0.0), (2.0, 2.0, 0.0)) == pytest.approx(0.0, abs=1e-7)


class TestRotation:
    def test_quarter_turn_about_x(self):
        m = rotation_matrix((1.0, 0.0, 0.0), math.pi / 2)
        assert rotate(m, (0.0, 1.0, 0.0)) == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_zero_angle_is_identity(self):
        m = rotation_matrix((0.3, -0.2, 0.9), 0.0)
        assert rotate(m, (0.1, 0.2, 0.3)) == pytest.approx((0.1, 0.2, 0.3))

    def test_preserves_length(self):
        m = rotation_matrix((1.0, 2.0, 3.0), 1.1)
        assert length(rotate(m, (0.5, -0.4, 0.2))) == pytest.approx(length((0.5, -0.4, 0.2)))

    def test_returns_plain_floats(self):
        m = rotation_matrix((0.0, 0.0, 1.0), 0.5)
        assert all(type(c) is float for c in rotate(m, (1.0, 0.0, 0.0)))
