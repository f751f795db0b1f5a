from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class VoxelClass(str, Enum):
    """Classification of a single grid cell."""

    SOLID = "solid"
    FLUID = "fluid"
    AIR = "air"


class BlockFace(str, Enum):
    DOWN = "down"
    UP = "up"
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class HitKind(str, Enum):
    MISS = "miss"
    BLOCK = "block"


BlockPos = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Vec3:
    """Continuous world position or direction."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Vec3:
        return Vec3(self.x + dx, self.y + dy, self.z + dz)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def to_block_pos(self) -> BlockPos:
        """Convert to integer block coordinates."""
        return (math.floor(self.x), math.floor(self.y), math.floor(self.z))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min: Vec3
    max: Vec3

    def intersects_block(self, x: int, y: int, z: int) -> bool:
        """Overlap test against the unit cube at ``(x, y, z)``; touching faces do not count."""
        return (
            self.min.x < x + 1
            and self.max.x > x
            and self.min.y < y + 1
            and self.max.y > y
            and self.min.z < z + 1
            and self.max.z > z
        )

    def block_range(self) -> tuple[BlockPos, BlockPos]:
        """Inclusive block coordinates the box may overlap."""
        return (
            (math.floor(self.min.x), math.floor(self.min.y), math.floor(self.min.z)),
            (math.ceil(self.max.x) - 1, math.ceil(self.max.y) - 1, math.ceil(self.max.z) - 1),
        )


@dataclass(slots=True)
class ColumnPosition:
    """Horizontal column with a vertical cursor owned by a single scan."""

    x: int
    z: int
    y: int = 0

    def move_down(self) -> None:
        self.y -= 1


@dataclass(frozen=True, slots=True)
class SafeSpot:
    """Body voxel of a floor/body/head stack that passed validation.

    Only ``safety.validate_spot`` builds these.
    """

    x: int
    y: int
    z: int

    @property
    def surface_y(self) -> int:
        return self.y - 1

    @property
    def landing(self) -> Vec3:
        """Block-centred target on top of the scanned surface voxel."""
        return Vec3(self.x + 0.5, float(self.surface_y), self.z + 0.5)


@dataclass(frozen=True, slots=True)
class AimRay:
    origin: Vec3
    direction: Vec3
    length: float

    @property
    def end(self) -> Vec3:
        return self.origin + self.direction.scaled(self.length)


@dataclass(frozen=True, slots=True)
class ActorSnapshot:
    """Read-only view of the actor state needed for one call."""

    position: Vec3
    yaw: float = 0.0
    pitch: float = 0.0
    eye_height: float = 1.62
    half_extents: Vec3 = Vec3(0.3, 0.9, 0.3)
    privileged_reach: bool = False

    @property
    def eye_position(self) -> Vec3:
        return self.position.offset(dy=self.eye_height)

    def bounding_box(self, at: Vec3 | None = None) -> BoundingBox:
        """Box with its bottom face at the feet of ``at`` (defaults to the current position)."""
        pos = at if at is not None else self.position
        half = self.half_extents
        return BoundingBox(
            min=Vec3(pos.x - half.x, pos.y, pos.z - half.z),
            max=Vec3(pos.x + half.x, pos.y + 2 * half.y, pos.z + half.z),
        )


@dataclass(frozen=True, slots=True)
class HitResult:
    kind: HitKind
    location: Vec3
    block: BlockPos | None = None
    face: BlockFace | None = None

    @classmethod
    def miss(cls, location: Vec3) -> HitResult:
        return cls(kind=HitKind.MISS, location=location)

    @classmethod
    def block_hit(cls, location: Vec3, block: BlockPos, face: BlockFace | None) -> HitResult:
        return cls(kind=HitKind.BLOCK, location=location, block=block, face=face)

    @property
    def is_hit(self) -> bool:
        return self.kind is HitKind.BLOCK


@dataclass(frozen=True, slots=True)
class Placement:
    """Accepted safe spot and how many candidates the search drew."""

    spot: SafeSpot
    attempts: int

    @property
    def landing(self) -> Vec3:
        return self.spot.landing


@dataclass(slots=True)
class TeleportOutcome:
    start: Vec3
    landing: Vec3
    final: Vec3
    attempts: int
    fallback_used: bool = False
