"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tilesnap.models.tile import SymmetryMode, Tile


class TileRequest(BaseModel):
    tile: Tile


class EdgeInput(BaseModel):
    start: tuple[float, float]
    end: tuple[float, float]


class CompatibleRequest(BaseModel):
    a: EdgeInput = Field(..., description="First edge (start/end; length, midpoint and normal are derived)")
    b: EdgeInput
    a_center: tuple[float, float] = Field(..., description="Centre of the tile owning edge a")
    b_center: tuple[float, float] = Field(..., description="Centre of the tile owning edge b")


class SnapRequest(BaseModel):
    moving: Tile
    stationary: list[Tile] = Field(..., min_length=1, description="One or more candidate neighbours")


class MirrorRequest(BaseModel):
    tile: Tile
    mode: SymmetryMode = SymmetryMode.NONE
    center: tuple[float, float] | None = Field(default=None, description="Defaults to the canvas centre")


class SuggestRequest(BaseModel):
    tiles: list[Tile] = Field(default_factory=list)
    enabled: bool = True
