"""Extended-reach aim rays built from an actor's eye position and look angles."""

from __future__ import annotations

import math

from safe_teleport.models import ActorSnapshot, AimRay, HitResult, Vec3
from safe_teleport.world import Actor, VoxelQuery


def look_direction(yaw: float, pitch: float) -> Vec3:
    """Unit forward vector for yaw/pitch in degrees.

    Yaw 0 faces +Z and grows clockwise seen from above (90 faces -X);
    positive pitch looks down.
    """
    yaw_angle = -math.radians(yaw) - math.pi
    pitch_angle = -math.radians(pitch)
    cos_pitch = -math.cos(pitch_angle)
    return Vec3(
        math.sin(yaw_angle) * cos_pitch,
        math.sin(pitch_angle),
        math.cos(yaw_angle) * cos_pitch,
    )


def effective_reach(snapshot: ActorSnapshot, base_reach: float, privileged_multiplier: float) -> float:
    if base_reach < 0:
        raise ValueError("base_reach must not be negative")
    if privileged_multiplier < 0:
        raise ValueError("privileged_multiplier must not be negative")
    return base_reach * (privileged_multiplier if snapshot.privileged_reach else 1)


def build_aim_ray(snapshot: ActorSnapshot, base_reach: float, privileged_multiplier: float) -> AimRay:
    return AimRay(
        origin=snapshot.eye_position,
        direction=look_direction(snapshot.yaw, snapshot.pitch),
        length=effective_reach(snapshot, base_reach, privileged_multiplier),
    )


def cast_reach(world: VoxelQuery, actor: Actor, base_reach: float, privileged_multiplier: float) -> HitResult:
    """Return the first solid block along the actor's extended aim ray.

    Fluids are ignored and the actor itself is excluded from the hit test.
    """
    ray = build_aim_ray(actor.snapshot(), base_reach, privileged_multiplier)
    return world.cast_ray(ray.origin, ray.end, ignore_fluids=True, ignore_entity=actor)
