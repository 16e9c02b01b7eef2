"""Pydantic models shared by the engine and the API."""

from tilesnap.models.tile import Point, ShapeKind, SuggestionPoint, SymmetryMode, Tile

__all__ = ["Point", "ShapeKind", "SuggestionPoint", "SymmetryMode", "Tile"]
