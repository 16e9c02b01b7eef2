"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tilesnap.models.tile import Point, ShapeKind, Tile

CANVAS_CENTER = Point(300.0, 300.0)

ROTATIONS = [0.0, 15.0, 30.0, 45.0, 60.0, 90.0, 137.5, 180.0, 270.0, 359.0, -45.0, 720.0]


def make_tile(shape: ShapeKind | str = ShapeKind.SQUARE, x: float = 300.0, y: float = 300.0, **kw) -> Tile:
    return Tile(shape=ShapeKind(shape), x=x, y=y, **kw)


@pytest.fixture
def square() -> Tile:
    return make_tile(ShapeKind.SQUARE, 300, 300, id="sq")


@pytest.fixture
def neighbour_square() -> Tile:
    return make_tile(ShapeKind.SQUARE, 360, 300, id="nb")


@pytest.fixture
def center() -> Point:
    return CANVAS_CENTER
