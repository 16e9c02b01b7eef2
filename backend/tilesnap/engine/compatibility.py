"""Edge compatibility: can two edges fuse into a shared side?

Four gates, cheapest first, all must pass:
  1. lengths match within an absolute tolerance
  2. midpoints are close
  3. outward normals face each other
  4. the segments themselves are parallel (rejects corner-to-corner hits
     that a normal-cone test alone would accept)

Every gate is symmetric in its two arguments, so the predicate is too.
"""

from __future__ import annotations

from tilesnap.engine.config import GeometryConfig
from tilesnap.engine.edges import Edge
from tilesnap.utils.geometry import distance, dot


def compatible(a: Edge, b: Edge, config: GeometryConfig | None = None) -> bool:
    cfg = config or GeometryConfig()

    if abs(a.length - b.length) > cfg.max_length_delta:
        return False

    if distance(a.midpoint, b.midpoint) > cfg.max_edge_proximity:
        return False

    if dot(a.normal, b.normal) > cfg.min_antiparallel_cosine:
        return False

    if abs(dot(a.direction, b.direction)) < cfg.min_parallel_cosine:
        return False

    return True
