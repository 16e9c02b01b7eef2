"""Tile data model: the placed, mutable instance of a catalog shape."""

from __future__ import annotations

import enum
import math
import uuid
from typing import NamedTuple

from pydantic import BaseModel, Field, field_validator


class ShapeKind(str, enum.Enum):
    TRIANGLE = "triangle"
    SQUARE = "square"
    HEXAGON = "hexagon"
    DIAMOND = "diamond"


class SymmetryMode(str, enum.Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    RADIAL = "radial"


class Point(NamedTuple):
    """Canvas coordinate or free vector, depending on the caller."""

    x: float
    y: float


DEFAULT_COLOR = "#3b82f6"


def new_tile_id() -> str:
    return uuid.uuid4().hex[:12]


class Tile(BaseModel):
    id: str = Field(default_factory=new_tile_id)
    shape: ShapeKind
    x: float
    y: float
    rotation: float = 0.0  # degrees, taken modulo 360
    color: str = DEFAULT_COLOR
    mirror_of: str | None = None  # id of the primary this tile reflects

    @field_validator("x", "y", "rotation")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("tile coordinates must be finite")
        return v

    @property
    def is_mirror(self) -> bool:
        return self.mirror_of is not None

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


class SuggestionPoint(BaseModel):
    x: float
    y: float
    shape: ShapeKind
    rotation: float = 0.0
