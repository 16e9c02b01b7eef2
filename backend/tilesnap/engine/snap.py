"""Snap resolution: pairwise and across a whole tile collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from tilesnap.engine.compatibility import compatible
from tilesnap.engine.config import GeometryConfig
from tilesnap.engine.edges import Edge, edges_of
from tilesnap.models.tile import Point, Tile
from tilesnap.utils.geometry import distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    can_snap: bool
    position: Point | None = None
    # Midpoint distance of the winning edge pair (pairwise) or the
    # tile's travel to the snap position (collection-wide).
    distance: float | None = None
    target_id: str | None = None


NO_SNAP = SnapResult(can_snap=False)


def best_edge_pair(
    moving: Tile,
    stationary: Tile,
    config: GeometryConfig | None = None,
) -> tuple[Edge, Edge, float] | None:
    """Closest compatible (moving edge, stationary edge) pair, or None.

    Ties keep the first pair in edge emission order.
    """
    cfg = config or GeometryConfig()
    best: tuple[Edge, Edge, float] | None = None
    stationary_edges = edges_of(stationary)
    for e1 in edges_of(moving):
        for e2 in stationary_edges:
            if not compatible(e1, e2, cfg):
                continue
            d = distance(e1.midpoint, e2.midpoint)
            if best is None or d < best[2]:
                best = (e1, e2, d)
    return best


def resolve_snap(
    moving: Tile,
    stationary: Tile,
    config: GeometryConfig | None = None,
) -> SnapResult:
    """Position that lays `moving` flush against `stationary`, if any.

    The moving tile's edge midpoint lands on the stationary edge midpoint,
    then backs off along the stationary edge's outward normal by the
    separation push so the two edges never coincide.
    """
    cfg = config or GeometryConfig()
    pair = best_edge_pair(moving, stationary, cfg)
    if pair is None:
        return NO_SNAP

    e1, e2, d = pair
    push = cfg.separation_push
    position = Point(
        moving.x + (e2.midpoint.x - e1.midpoint.x) + e2.normal.x * push,
        moving.y + (e2.midpoint.y - e1.midpoint.y) + e2.normal.y * push,
    )
    logger.debug("Snap %s -> %s at (%.2f, %.2f), edge gap %.2f", moving.id, stationary.id, position.x, position.y, d)
    return SnapResult(can_snap=True, position=position, distance=d, target_id=stationary.id)


def resolve_snap_among(
    moving: Tile,
    others: Iterable[Tile],
    config: GeometryConfig | None = None,
) -> SnapResult:
    """Nearest snap of `moving` against every other tile.

    Candidates are ranked by how far the moving tile would travel; a
    strictly shorter trip wins, so collection order breaks exact ties.
    """
    cfg = config or GeometryConfig()
    best = NO_SNAP
    for other in others:
        if other.id == moving.id:
            continue
        result = resolve_snap(moving, other, cfg)
        if not result.can_snap:
            continue
        travel = distance(moving.center, result.position)
        if best.distance is None or travel < best.distance:
            best = SnapResult(can_snap=True, position=result.position, distance=travel, target_id=other.id)
    return best
