"""POST /api/{edges,compatible,snap,mirrors,suggestions}: stateless geometry queries."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tilesnap.dependencies import get_canvas_center
from tilesnap.engine.compatibility import compatible
from tilesnap.engine.edges import edges_of, make_edge
from tilesnap.engine.snap import resolve_snap_among
from tilesnap.engine.suggestions import suggest
from tilesnap.engine.symmetry import mirrors_of
from tilesnap.models.requests import (
    CompatibleRequest,
    MirrorRequest,
    SnapRequest,
    SuggestRequest,
    TileRequest,
)
from tilesnap.models.responses import (
    CompatibleResponse,
    EdgeOut,
    EdgesResponse,
    MirrorResponse,
    SnapResponse,
    SuggestResponse,
)
from tilesnap.models.tile import Point

router = APIRouter()


@router.post("/edges", response_model=EdgesResponse)
async def edges(req: TileRequest) -> EdgesResponse:
    return EdgesResponse(
        tile_id=req.tile.id,
        edges=[
            EdgeOut(start=e.start, end=e.end, length=e.length, midpoint=e.midpoint, normal=e.normal)
            for e in edges_of(req.tile)
        ],
    )


@router.post("/compatible", response_model=CompatibleResponse)
async def compatible_edges(req: CompatibleRequest) -> CompatibleResponse:
    a = make_edge(Point(*req.a.start), Point(*req.a.end), Point(*req.a_center))
    b = make_edge(Point(*req.b.start), Point(*req.b.end), Point(*req.b_center))
    if a is None or b is None:
        raise HTTPException(status_code=422, detail="Edges must have non-zero length")
    return CompatibleResponse(compatible=compatible(a, b))


@router.post("/snap", response_model=SnapResponse)
async def snap(req: SnapRequest) -> SnapResponse:
    result = resolve_snap_among(req.moving, req.stationary)
    return SnapResponse(
        can_snap=result.can_snap,
        position=result.position,
        target_id=result.target_id,
        distance=result.distance,
    )


@router.post("/mirrors", response_model=MirrorResponse)
async def mirrors(req: MirrorRequest, canvas_center: Point = Depends(get_canvas_center)) -> MirrorResponse:
    center = Point(*req.center) if req.center is not None else canvas_center
    return MirrorResponse(mirrors=mirrors_of(req.tile, req.mode, center))


@router.post("/suggestions", response_model=SuggestResponse)
async def suggestions(req: SuggestRequest) -> SuggestResponse:
    return SuggestResponse(suggestions=suggest(req.tiles, enabled=req.enabled))
