"""TileSnap: edge-snapping tessellation geometry engine."""

__version__ = "0.1.0"
