"""Stand-and-breathe checks for a floor/body/head voxel stack."""

from __future__ import annotations

from safe_teleport.models import BlockPos, SafeSpot, VoxelClass
from safe_teleport.world import VoxelQuery


def is_safe(world: VoxelQuery, pos: BlockPos) -> bool:
    """Return True if an actor can stand with its feet in ``pos``.

    The floor below must be solid or fluid; the body and head cells must be
    neither.
    """
    x, y, z = pos
    floor = world.classify(x, y - 1, z)
    body = world.classify(x, y, z)
    head = world.classify(x, y + 1, z)

    floor_safe = floor is VoxelClass.SOLID or floor is VoxelClass.FLUID
    body_safe = body is VoxelClass.AIR
    head_safe = head is VoxelClass.AIR
    return floor_safe and body_safe and head_safe


def validate_spot(world: VoxelQuery, pos: BlockPos) -> SafeSpot | None:
    """Return a ``SafeSpot`` for ``pos`` if it passes ``is_safe``."""
    if not is_safe(world, pos):
        return None
    return SafeSpot(*pos)
