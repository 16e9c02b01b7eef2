"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tilesnap.models.tile import SuggestionPoint, Tile


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes: list[str] = Field(default_factory=list)


class ShapeInfo(BaseModel):
    name: str
    color: str
    vertex_count: int
    edge_distance: float
    path: str


class EdgeOut(BaseModel):
    start: tuple[float, float]
    end: tuple[float, float]
    length: float
    midpoint: tuple[float, float]
    normal: tuple[float, float]


class EdgesResponse(BaseModel):
    tile_id: str
    edges: list[EdgeOut] = Field(default_factory=list)


class CompatibleResponse(BaseModel):
    compatible: bool


class SnapResponse(BaseModel):
    can_snap: bool
    position: tuple[float, float] | None = None
    target_id: str | None = None
    distance: float | None = Field(default=None, description="How far the moving tile travels to reach position")


class MirrorResponse(BaseModel):
    mirrors: list[Tile] = Field(default_factory=list)


class SuggestResponse(BaseModel):
    suggestions: list[SuggestionPoint] = Field(default_factory=list)
