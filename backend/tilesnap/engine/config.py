"""Geometry configuration: every tolerance the engine consults."""

from __future__ import annotations

from dataclasses import dataclass

from tilesnap.engine import tolerances


@dataclass
class GeometryConfig:
    """Tunable thresholds for compatibility, snapping and suggestions."""

    # Edge compatibility gates
    max_length_delta: float = tolerances.MAX_LENGTH_DELTA
    max_edge_proximity: float = tolerances.MAX_EDGE_PROXIMITY
    min_antiparallel_cosine: float = tolerances.MIN_ANTIPARALLEL_COSINE
    min_parallel_cosine: float = tolerances.MIN_PARALLEL_COSINE

    # Snap
    separation_push: float = tolerances.SEPARATION_PUSH
    drag_bounds: tuple[float, float] = tolerances.DRAG_BOUNDS

    # Suggestions
    occupancy_clearance: float = tolerances.OCCUPANCY_CLEARANCE
    suggestion_bounds: tuple[float, float] = tolerances.SUGGESTION_BOUNDS
    band_tolerance_deg: float = tolerances.BAND_TOLERANCE_DEG

    def clamp_to_canvas(self, value: float) -> float:
        lo, hi = self.drag_bounds
        return max(lo, min(hi, value))

    def in_suggestion_bounds(self, x: float, y: float) -> bool:
        lo, hi = self.suggestion_bounds
        return lo < x < hi and lo < y < hi

