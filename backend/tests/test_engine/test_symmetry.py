"""Tests for symmetry mirror generation."""

from __future__ import annotations

import pytest

from tilesnap.engine.symmetry import Reflection, mirrors_of, reflect
from tilesnap.models.tile import Point, ShapeKind, SymmetryMode
from tests.conftest import make_tile


@pytest.fixture
def tile():
    return make_tile(ShapeKind.HEXAGON, 250, 250, rotation=30.0, color="#ec4899", id="p1")


def test_none_mode_is_empty(tile, center):
    assert mirrors_of(tile, SymmetryMode.NONE, center) == []


def test_horizontal(tile, center):
    (m,) = mirrors_of(tile, "horizontal", center)
    assert (m.x, m.y) == (350, 250)
    assert m.mirror_of == "p1"
    assert m.is_mirror
    assert (m.shape, m.rotation, m.color) == (tile.shape, tile.rotation, tile.color)


def test_vertical(tile, center):
    (m,) = mirrors_of(tile, SymmetryMode.VERTICAL, center)
    assert (m.x, m.y) == (250, 350)


def test_radial_order_and_positions(tile, center):
    mirrors = mirrors_of(tile, SymmetryMode.RADIAL, center)
    assert [(m.x, m.y) for m in mirrors] == [(350, 250), (250, 350), (350, 350)]


def test_fresh_unique_ids(tile, center):
    mirrors = mirrors_of(tile, SymmetryMode.RADIAL, center)
    ids = {m.id for m in mirrors} | {tile.id}
    assert len(ids) == 4


def test_idempotent_positions(center):
    odd = make_tile(ShapeKind.TRIANGLE, 123.456789, 487.1, rotation=17.0)
    first = mirrors_of(odd, SymmetryMode.RADIAL, center)
    second = mirrors_of(odd, SymmetryMode.RADIAL, center)
    assert [(m.x, m.y) for m in first] == [(m.x, m.y) for m in second]


@pytest.mark.parametrize("pos", [(250, 250), (301.5, 99.25), (300, 300), (47.0, 512.3)])
def test_radial_set_closed_under_reflection(pos, center):
    primary = make_tile(ShapeKind.SQUARE, *pos)
    members = [(primary.x, primary.y)] + [(m.x, m.y) for m in mirrors_of(primary, "radial", center)]
    for reflection in (Reflection.HORIZONTAL, Reflection.VERTICAL):
        for x, y in members:
            rx, ry = reflect(x, y, reflection, center)
            assert any(rx == pytest.approx(mx) and ry == pytest.approx(my) for mx, my in members)


def test_radial_always_three(center):
    assert len(mirrors_of(make_tile(ShapeKind.DIAMOND, 300, 300), "radial", center)) == 3


def test_mirrors_do_not_mirror(tile, center):
    (m,) = mirrors_of(tile, "horizontal", center)
    assert mirrors_of(m, "radial", center) == []


def test_primary_untouched(tile, center):
    before = tile.model_dump()
    mirrors_of(tile, "radial", center)
    assert tile.model_dump() == before


def test_custom_center(tile):
    (m,) = mirrors_of(tile, "horizontal", Point(100, 0))
    assert m.x == -50


def test_unknown_mode_rejected(tile, center):
    with pytest.raises(ValueError):
        mirrors_of(tile, "diagonal", center)


def test_regeneration_matches_fresh_reflection(tile, center):
    moved = tile.model_copy(update={"x": 280.0, "y": 120.0})
    (m,) = mirrors_of(moved, "vertical", center)
    assert (m.x, m.y) == reflect(280.0, 120.0, Reflection.VERTICAL, center)
