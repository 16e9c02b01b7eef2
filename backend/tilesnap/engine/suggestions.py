"""Suggestion synthesis: candidate placements along exposed edges.

Only primary tiles propose suggestions, and only from every other edge,
which keeps the overlay sparse. Suggested rotation is always 0; the
candidate is not turned to match the source edge.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tilesnap.engine.catalog import shape_spec
from tilesnap.engine.config import GeometryConfig
from tilesnap.engine.edges import Edge, edges_of
from tilesnap.models.tile import Point, ShapeKind, SuggestionPoint, Tile
from tilesnap.utils.geometry import distance, undirected_angle

logger = logging.getLogger(__name__)

_AXIS_ALIGNED = (ShapeKind.SQUARE, ShapeKind.HEXAGON)
_SIXTY_DEGREE = (ShapeKind.TRIANGLE, ShapeKind.HEXAGON)
_FALLBACK = (ShapeKind.TRIANGLE,)


def candidate_shapes(edge: Edge, band_tolerance: float) -> tuple[ShapeKind, ...]:
    """Shape kinds that sit naturally against an edge of this orientation."""
    angle = undirected_angle(edge.end.x - edge.start.x, edge.end.y - edge.start.y)

    def near(target: float) -> bool:
        return abs(angle - target) < band_tolerance

    if near(0) or near(180) or near(90):
        return _AXIS_ALIGNED
    if near(60) or near(120):
        return _SIXTY_DEGREE
    return _FALLBACK


def _is_free(point: Point, tiles: Sequence[Tile], clearance: float) -> bool:
    return not any(distance(t.center, point) < clearance for t in tiles)


def suggest(
    tiles: Sequence[Tile],
    enabled: bool = True,
    config: GeometryConfig | None = None,
) -> list[SuggestionPoint]:
    cfg = config or GeometryConfig()
    if not enabled or not tiles:
        return []

    out: list[SuggestionPoint] = []
    for tile in tiles:
        if tile.is_mirror:
            continue

        selected = edges_of(tile)[::2]
        for index, edge in enumerate(selected):
            options = candidate_shapes(edge, cfg.band_tolerance_deg)
            shape = options[index % len(options)]
            offset = shape_spec(shape).edge_distance
            point = Point(
                edge.midpoint.x + edge.normal.x * offset,
                edge.midpoint.y + edge.normal.y * offset,
            )

            if not cfg.in_suggestion_bounds(point.x, point.y):
                continue
            if not _is_free(point, tiles, cfg.occupancy_clearance):
                continue

            out.append(SuggestionPoint(x=point.x, y=point.y, shape=shape, rotation=0.0))

    logger.debug("Suggested %d placements from %d tiles", len(out), len(tiles))
    return out
