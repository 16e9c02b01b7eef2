"""Tests for leaf geometry helpers."""

import numpy as np
import pytest

from tilesnap.utils.geometry import place_points, rotation_matrix, undirected_angle


def test_identity_rotation():
    assert np.array_equal(rotation_matrix(0), np.eye(2))


def test_quarter_turn_is_clockwise_on_screen():
    # +x maps to +y (downward on screen)
    out = place_points(np.array([[1.0, 0.0]]), 90, 0, 0)
    assert out[0] == pytest.approx([0.0, 1.0])


def test_translation():
    out = place_points(np.array([[1.0, 2.0]]), 0, 10, 20)
    assert out.tolist() == [[11.0, 22.0]]


@pytest.mark.parametrize(
    "dx, dy, expected",
    [(1, 0, 0), (-1, 0, 0), (0, 1, 90), (0, -1, 90), (1, 1, 45), (-1, -1, 45)],
)
def test_undirected_angle(dx, dy, expected):
    assert undirected_angle(dx, dy) == pytest.approx(expected)
