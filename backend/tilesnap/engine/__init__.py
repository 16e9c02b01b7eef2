"""TileSnap geometry engine."""

from tilesnap.engine.board import TileBoard
from tilesnap.engine.catalog import CATALOG, shape_spec
from tilesnap.engine.compatibility import compatible
from tilesnap.engine.config import GeometryConfig
from tilesnap.engine.edges import Edge, edges_of
from tilesnap.engine.snap import SnapResult, resolve_snap, resolve_snap_among
from tilesnap.engine.suggestions import suggest
from tilesnap.engine.symmetry import mirrors_of

__all__ = [
    "CATALOG",
    "shape_spec",
    "Edge",
    "edges_of",
    "compatible",
    "GeometryConfig",
    "SnapResult",
    "resolve_snap",
    "resolve_snap_among",
    "mirrors_of",
    "suggest",
    "TileBoard",
]
