"""TileBoard: the composing application's tile collection.

The board owns the one mutable tile list and calls the geometry engine as
pure functions. Each primary remembers the symmetry rule it was placed
under; any move or rotation of that primary throws away its mirrors and
regenerates them from the new pose under that rule.
"""

from __future__ import annotations

import logging

from tilesnap.config import settings
from tilesnap.engine.config import GeometryConfig
from tilesnap.engine.snap import NO_SNAP, SnapResult, resolve_snap_among
from tilesnap.engine.suggestions import suggest
from tilesnap.engine.symmetry import mirrors_of
from tilesnap.models.tile import DEFAULT_COLOR, Point, ShapeKind, SuggestionPoint, SymmetryMode, Tile, new_tile_id

logger = logging.getLogger(__name__)

ROTATION_STEP = 45.0
DUPLICATE_OFFSET = 60.0


class TileBoard:
    def __init__(
        self,
        center: Point | None = None,
        symmetry_mode: SymmetryMode | str = SymmetryMode.NONE,
        config: GeometryConfig | None = None,
    ) -> None:
        self.center = center or Point(settings.canvas_center_x, settings.canvas_center_y)
        self.symmetry_mode = SymmetryMode(symmetry_mode)
        self.config = config or GeometryConfig()
        self.color = DEFAULT_COLOR
        self.show_suggestions = False
        self._tiles: list[Tile] = []
        # primary id -> symmetry rule its mirrors follow
        self._rules: dict[str, SymmetryMode] = {}

    # ── Queries ──

    @property
    def tiles(self) -> list[Tile]:
        """Snapshot of the collection in z-order (bottom first)."""
        return list(self._tiles)

    def get(self, tile_id: str) -> Tile:
        return self._tiles[self._index(tile_id)]

    def mirrors_for(self, tile_id: str) -> list[Tile]:
        return [t for t in self._tiles if t.mirror_of == tile_id]

    def suggestions(self) -> list[SuggestionPoint]:
        return suggest(self._tiles, enabled=self.show_suggestions, config=self.config)

    # ── Mutations ──

    def add_shape(self, shape: ShapeKind | str, color: str | None = None) -> Tile:
        tile = Tile(shape=ShapeKind(shape), x=self.center.x, y=self.center.y, color=color or self.color)
        self._place_primary(tile)
        logger.info("Added %s %s (%s symmetry)", tile.shape.value, tile.id, self.symmetry_mode.value)
        return tile

    def rotate(self, tile_id: str, step: float = ROTATION_STEP) -> Tile:
        tile = self._primary(tile_id)
        rotated = tile.model_copy(update={"rotation": (tile.rotation + step) % 360})
        self._replace(rotated)
        self._regenerate_mirrors(rotated)
        return rotated

    def duplicate(self, tile_id: str) -> Tile:
        """Offset copy of any tile. The copy is a primary without mirrors."""
        original = self.get(tile_id)
        copy = original.model_copy(
            update={
                "id": new_tile_id(),
                "x": original.x + DUPLICATE_OFFSET,
                "y": original.y + DUPLICATE_OFFSET,
                "mirror_of": None,
            }
        )
        self._tiles.append(copy)
        self._rules[copy.id] = SymmetryMode.NONE
        return copy

    def delete(self, tile_id: str) -> None:
        """Remove a tile; removing a primary also removes its mirrors."""
        self._index(tile_id)
        before = len(self._tiles)
        self._tiles = [t for t in self._tiles if t.id != tile_id and t.mirror_of != tile_id]
        self._rules.pop(tile_id, None)
        logger.info("Deleted %s (%d tiles removed)", tile_id, before - len(self._tiles))

    def clear(self) -> None:
        self._tiles.clear()
        self._rules.clear()

    def move(self, tile_id: str, x: float, y: float) -> Tile:
        """Move a primary tile, clamped to the canvas, and rebuild its mirrors."""
        tile = self._primary(tile_id)
        moved = tile.model_copy(
            update={"x": self.config.clamp_to_canvas(x), "y": self.config.clamp_to_canvas(y)}
        )
        self._replace(moved)
        self._regenerate_mirrors(moved)
        return moved

    def nudge(self, tile_id: str, dx: float, dy: float) -> Tile:
        tile = self.get(tile_id)
        return self.move(tile_id, tile.x + dx, tile.y + dy)

    def release(self, tile_id: str) -> SnapResult:
        """Snap a dragged tile to its nearest compatible neighbour, if any."""
        tile = self.get(tile_id)
        if tile.is_mirror:
            return NO_SNAP
        result = resolve_snap_among(tile, self._tiles, self.config)
        if not result.can_snap:
            return result
        moved = self.move(tile_id, result.position.x, result.position.y)
        logger.debug("Released %s onto %s", tile_id, result.target_id)
        return SnapResult(
            can_snap=True,
            position=moved.center,
            distance=result.distance,
            target_id=result.target_id,
        )

    def fill_pattern(self) -> list[Tile]:
        """Commit every visible suggestion as a new primary tile."""
        added: list[Tile] = []
        for s in self.suggestions():
            tile = Tile(shape=s.shape, x=s.x, y=s.y, rotation=s.rotation, color=self.color)
            self._place_primary(tile)
            added.append(tile)
        self.show_suggestions = False
        logger.info("Filled %d suggested tiles", len(added))
        return added

    # ── Internals ──

    def _index(self, tile_id: str) -> int:
        for i, tile in enumerate(self._tiles):
            if tile.id == tile_id:
                return i
        raise KeyError(f"Unknown tile: {tile_id}")

    def _primary(self, tile_id: str) -> Tile:
        tile = self.get(tile_id)
        if tile.is_mirror:
            raise ValueError(f"Tile {tile_id} is a mirror of {tile.mirror_of}; change the primary instead")
        return tile

    def _place_primary(self, tile: Tile) -> None:
        self._tiles.append(tile)
        self._tiles.extend(mirrors_of(tile, self.symmetry_mode, self.center))
        self._rules[tile.id] = self.symmetry_mode

    def _replace(self, tile: Tile) -> None:
        self._tiles[self._index(tile.id)] = tile

    def _regenerate_mirrors(self, primary: Tile) -> None:
        rule = self._rules.get(primary.id, SymmetryMode.NONE)
        if rule is SymmetryMode.NONE:
            return
        kept = [t for t in self._tiles if t.mirror_of != primary.id]
        self._tiles = kept
        at = self._index(primary.id) + 1
        self._tiles[at:at] = mirrors_of(primary, rule, self.center)
