"""Edge extraction: world-space edges of a placed tile.

Edges are derived values: recomputed on every call, never cached, never
tied back to the tile they came from.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from tilesnap.engine.catalog import shape_spec
from tilesnap.models.tile import Point, Tile
from tilesnap.utils.geometry import dot, place_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    start: Point
    end: Point
    length: float
    midpoint: Point
    # Unit vector pointing away from the owning tile's centre
    normal: Point

    @property
    def direction(self) -> Point:
        """Unit vector from start to end."""
        return Point((self.end.x - self.start.x) / self.length, (self.end.y - self.start.y) / self.length)


def make_edge(start: Point, end: Point, center: Point) -> Edge | None:
    """Edge from a segment of a polygon around `center`.

    Returns None for a zero-length segment, whose normal is undefined.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        return None

    midpoint = Point((start.x + end.x) / 2, (start.y + end.y) / 2)
    normal = Point(dy / length, -dx / length)
    if dot(normal, (center.x - midpoint.x, center.y - midpoint.y)) > 0:
        normal = Point(-normal.x, -normal.y)

    return Edge(start=start, end=end, length=length, midpoint=midpoint, normal=normal)


def world_vertices(tile: Tile) -> list[Point]:
    """Catalog vertices of the tile's shape, rotated and moved into place."""
    spec = shape_spec(tile.shape)
    placed = place_points(spec.local_points(), tile.rotation, tile.x, tile.y)
    return [Point(float(px), float(py)) for px, py in placed]


def edges_of(tile: Tile) -> list[Edge]:
    """One edge per consecutive vertex pair, in catalog order (wrapping)."""
    vertices = world_vertices(tile)
    n = len(vertices)
    edges: list[Edge] = []
    for i in range(n):
        edge = make_edge(vertices[i], vertices[(i + 1) % n], tile.center)
        if edge is None:
            logger.debug("Skipping zero-length edge %d of tile %s", i, tile.id)
            continue
        edges.append(edge)
    return edges
