"""Tests for the shape catalog."""

import numpy as np
import pytest

from tilesnap.engine.catalog import CATALOG, shape_spec
from tilesnap.models.tile import ShapeKind


def test_every_kind_is_catalogued():
    assert set(CATALOG) == set(ShapeKind)


@pytest.mark.parametrize(
    "kind, count",
    [(ShapeKind.TRIANGLE, 3), (ShapeKind.SQUARE, 4), (ShapeKind.HEXAGON, 6), (ShapeKind.DIAMOND, 4)],
)
def test_vertex_counts(kind, count):
    assert shape_spec(kind).vertex_count == count


def test_triangle_dimensions():
    pts = shape_spec("triangle").local_points()
    assert np.ptp(pts[:, 0]) == 50.0
    assert np.ptp(pts[:, 1]) == 45.0


def test_hexagon_horizontal_extent():
    pts = shape_spec(ShapeKind.HEXAGON).local_points()
    assert np.ptp(pts[:, 0]) == 100.0


def test_edge_distances():
    assert shape_spec(ShapeKind.TRIANGLE).edge_distance == 20.0
    assert shape_spec(ShapeKind.SQUARE).edge_distance == 25.0
    assert shape_spec(ShapeKind.HEXAGON).edge_distance == 43.3
    assert shape_spec(ShapeKind.DIAMOND).edge_distance == 30.0


def test_local_points_is_a_copy():
    spec = shape_spec(ShapeKind.SQUARE)
    pts = spec.local_points()
    pts[0, 0] = 999.0
    assert spec.local_points()[0, 0] == -25.0


def test_svg_path_from_vertices():
    assert shape_spec(ShapeKind.DIAMOND).svg_path == "M 0 -30 L 30 0 L 0 30 L -30 0 Z"


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        shape_spec("pentagon")
