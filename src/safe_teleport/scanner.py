"""Downward column scans over a voxel world."""

from __future__ import annotations

from safe_teleport.models import ColumnPosition, VoxelClass
from safe_teleport.world import VoxelQuery


def _is_skippable(world: VoxelQuery, column: ColumnPosition, skip_non_solid_cube: bool) -> bool:
    if world.classify(column.x, column.y, column.z) is VoxelClass.AIR:
        return True
    return skip_non_solid_cube and not world.is_full_cube(column.x, column.y, column.z)


def find_highest_occupied(world: VoxelQuery, column: ColumnPosition, skip_non_solid_cube: bool = False) -> int:
    """Return the Y of the highest occupied voxel in ``column``, or 0 if there is none.

    The cursor starts at the top of the world and moves down one voxel at a
    time while the cell is air (or, with ``skip_non_solid_cube``, while it is
    air or not a full cube). ``column.y`` is left at the returned value.
    """
    column.y = world.max_height()
    while column.y > 0 and _is_skippable(world, column, skip_non_solid_cube):
        column.move_down()
    return column.y
