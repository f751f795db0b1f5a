"""Lift an actor out of world geometry after a teleport."""

from __future__ import annotations

from safe_teleport.errors import UnboundedAscentError
from safe_teleport.models import Vec3
from safe_teleport.world import Actor, VoxelQuery


def resolve_collision_by_lifting(world: VoxelQuery, actor: Actor, target: Vec3) -> Vec3:
    """Move ``actor`` to ``target``, then raise it one unit at a time until it is clear.

    Only the Y coordinate changes. Raises ``UnboundedAscentError`` once the
    actor's feet reach the layer above the world top and it still collides.
    """
    snapshot = actor.snapshot()
    ceiling = world.max_height() + 1
    position = target
    actor.teleport_to(position)

    while world.collides(snapshot.bounding_box(position)):
        if position.y >= ceiling:
            raise UnboundedAscentError(target, position)
        position = position.offset(dy=1.0)
        actor.teleport_to(position)

    return position
