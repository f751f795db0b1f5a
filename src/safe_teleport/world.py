"""Contracts the host world and actor implementations must satisfy."""

from __future__ import annotations

from typing import Any, Protocol

from safe_teleport.models import ActorSnapshot, BoundingBox, HitResult, Vec3, VoxelClass


class VoxelQuery(Protocol):
    """Read-only access to the voxel grid plus the host's geometry queries."""

    def classify(self, x: int, y: int, z: int) -> VoxelClass:
        """Classify one cell; raise ``OutOfBoundsError`` outside the world."""

    def is_full_cube(self, x: int, y: int, z: int) -> bool:
        """Return whether the cell's collision shape fills the whole voxel."""

    def max_height(self) -> int:
        """Return the topmost addressable layer."""

    def collides(self, box: BoundingBox) -> bool:
        """Return whether ``box`` intersects any world collision geometry."""

    def cast_ray(
        self,
        origin: Vec3,
        end: Vec3,
        *,
        ignore_fluids: bool = True,
        ignore_entity: Any = None,
    ) -> HitResult:
        """Return the first block hit on the segment ``origin``-``end``."""


class Actor(Protocol):
    """Host-owned actor that can be inspected and moved."""

    def snapshot(self) -> ActorSnapshot:
        """Return the current actor state."""

    def teleport_to(self, position: Vec3) -> None:
        """Move the actor to ``position``."""
