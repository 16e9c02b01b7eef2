"""FastAPI dependency injection."""

from __future__ import annotations

from tilesnap.config import settings
from tilesnap.models.tile import Point


def get_canvas_center() -> Point:
    return Point(settings.canvas_center_x, settings.canvas_center_y)
