"""Recoverable failures raised by placement, escape and world access."""

from __future__ import annotations

from safe_teleport.models import Vec3


class TeleportError(RuntimeError):
    """Base class for failures the caller is expected to recover from."""


class NoSafeLocationError(TeleportError):
    """Raised when a bounded placement search runs out of attempts."""

    def __init__(self, attempts: int, fallback: Vec3 | None = None) -> None:
        super().__init__(f"No safe location found after {attempts} attempts")
        self.attempts = attempts
        self.fallback = fallback


class UnboundedAscentError(TeleportError):
    """Raised when lifting an actor reaches the top of the world without clearance."""

    def __init__(self, start: Vec3, last: Vec3) -> None:
        super().__init__(
            f"No clearance above ({start.x}, {start.y}, {start.z}); gave up at y={last.y}"
        )
        self.start = start
        self.last = last


class OutOfBoundsError(TeleportError, IndexError):
    """Raised by world accessors for coordinates outside the world."""

    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(f"Voxel ({x}, {y}, {z}) is outside the world")
        self.position = (x, y, z)
