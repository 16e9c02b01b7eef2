"""Symmetry mirrors: reflected companions of a primary tile.

Mirrors are always regenerated from the primary, never nudged by a delta,
so a mirror's position depends only on the primary and the rule.
"""

from __future__ import annotations

import enum

from tilesnap.models.tile import Point, SymmetryMode, Tile, new_tile_id


class Reflection(enum.Enum):
    HORIZONTAL = "horizontal"  # x' = 2cx - x
    VERTICAL = "vertical"  # y' = 2cy - y
    POINT = "point"  # both


_REFLECTIONS: dict[SymmetryMode, tuple[Reflection, ...]] = {
    SymmetryMode.NONE: (),
    SymmetryMode.HORIZONTAL: (Reflection.HORIZONTAL,),
    SymmetryMode.VERTICAL: (Reflection.VERTICAL,),
    SymmetryMode.RADIAL: (Reflection.HORIZONTAL, Reflection.VERTICAL, Reflection.POINT),
}


def reflect(x: float, y: float, reflection: Reflection, center: Point) -> Point:
    if reflection is Reflection.HORIZONTAL:
        return Point(2 * center.x - x, y)
    if reflection is Reflection.VERTICAL:
        return Point(x, 2 * center.y - y)
    return Point(2 * center.x - x, 2 * center.y - y)


def reflections_for(mode: SymmetryMode | str) -> tuple[Reflection, ...]:
    return _REFLECTIONS[SymmetryMode(mode)]


def mirrors_of(tile: Tile, mode: SymmetryMode | str, center: Point) -> list[Tile]:
    """Fresh mirror tiles for `tile` under `mode`, in a fixed order.

    Mirror tiles never spawn mirrors of their own.
    """
    if tile.is_mirror:
        return []

    mirrors: list[Tile] = []
    for reflection in reflections_for(mode):
        x, y = reflect(tile.x, tile.y, reflection, center)
        mirrors.append(
            tile.model_copy(update={"id": new_tile_id(), "x": x, "y": y, "mirror_of": tile.id})
        )
    return mirrors
