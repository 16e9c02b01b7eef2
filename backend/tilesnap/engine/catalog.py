"""Shape catalog: the single table of local-space polygons.

Vertices are listed clockwise in screen coordinates (y grows downward),
centred on the shape origin. Rendering paths are derived from the same
vertices, so no other module hard-codes coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tilesnap.models.tile import Point, ShapeKind


@dataclass(frozen=True)
class ShapeSpec:
    kind: ShapeKind
    name: str
    vertices: tuple[Point, ...]
    # Distance from the shape centre to the edge that faces a neighbour.
    edge_distance: float
    color: str

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def local_points(self) -> NDArray[np.float64]:
        """Nx2 array of local vertices (a fresh copy on every call)."""
        return np.array(self.vertices, dtype=np.float64)

    @property
    def svg_path(self) -> str:
        head, *rest = self.vertices
        parts = [f"M {_fmt(head.x)} {_fmt(head.y)}"]
        parts.extend(f"L {_fmt(p.x)} {_fmt(p.y)}" for p in rest)
        parts.append("Z")
        return " ".join(parts)


def _fmt(v: float) -> str:
    return f"{v:g}"


# Hexagon half-height: 50 * sin(60°) rounded to the drawing grid.
_HEX_H = 43.3

CATALOG: dict[ShapeKind, ShapeSpec] = {
    ShapeKind.TRIANGLE: ShapeSpec(
        kind=ShapeKind.TRIANGLE,
        name="Triangle",
        # apex up, base 50, height 45
        vertices=(Point(0, -30), Point(25, 15), Point(-25, 15)),
        edge_distance=20.0,
        color="#3b82f6",
    ),
    ShapeKind.SQUARE: ShapeSpec(
        kind=ShapeKind.SQUARE,
        name="Square",
        vertices=(Point(-25, -25), Point(25, -25), Point(25, 25), Point(-25, 25)),
        edge_distance=25.0,
        color="#ef4444",
    ),
    ShapeKind.HEXAGON: ShapeSpec(
        kind=ShapeKind.HEXAGON,
        name="Hexagon",
        # flat-top, vertices at 0°, 60°, ..., 300°
        vertices=(
            Point(50, 0),
            Point(25, _HEX_H),
            Point(-25, _HEX_H),
            Point(-50, 0),
            Point(-25, -_HEX_H),
            Point(25, -_HEX_H),
        ),
        edge_distance=_HEX_H,
        color="#10b981",
    ),
    ShapeKind.DIAMOND: ShapeSpec(
        kind=ShapeKind.DIAMOND,
        name="Diamond",
        # square rotated 45°, half-diagonal 30
        vertices=(Point(0, -30), Point(30, 0), Point(0, 30), Point(-30, 0)),
        edge_distance=30.0,
        color="#f59e0b",
    ),
}


def shape_spec(kind: ShapeKind | str) -> ShapeSpec:
    """Look up a catalog entry. Unknown kinds raise ValueError."""
    return CATALOG[ShapeKind(kind)]
