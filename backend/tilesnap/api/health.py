"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from tilesnap import __version__
from tilesnap.engine.catalog import CATALOG
from tilesnap.models.responses import HealthResponse, ShapeInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes=[kind.value for kind in CATALOG],
    )


@router.get("/shapes", response_model=dict[str, ShapeInfo])
async def shapes() -> dict[str, ShapeInfo]:
    """Display name, default colour and canonical SVG path of every catalog shape."""
    return {
        kind.value: ShapeInfo(
            name=spec.name,
            color=spec.color,
            vertex_count=spec.vertex_count,
            edge_distance=spec.edge_distance,
            path=spec.svg_path,
        )
        for kind, spec in CATALOG.items()
    }
