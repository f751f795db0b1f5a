"""Safe teleport placement and extended-reach targeting for voxel worlds."""

__version__ = "0.1.0"

from .errors import NoSafeLocationError, OutOfBoundsError, TeleportError, UnboundedAscentError
from .escape import resolve_collision_by_lifting
from .models import ActorSnapshot, AimRay, HitKind, HitResult, Placement, SafeSpot, Vec3, VoxelClass
from .reach import build_aim_ray, cast_reach
from .safety import is_safe
from .scanner import find_highest_occupied
from .search import RandomPlacementSearch
from .teleport import TeleportService

__all__ = [
    "ActorSnapshot",
    "AimRay",
    "HitKind",
    "HitResult",
    "NoSafeLocationError",
    "OutOfBoundsError",
    "Placement",
    "RandomPlacementSearch",
    "SafeSpot",
    "TeleportError",
    "TeleportService",
    "UnboundedAscentError",
    "Vec3",
    "VoxelClass",
    "build_aim_ray",
    "cast_reach",
    "find_highest_occupied",
    "is_safe",
    "resolve_collision_by_lifting",
]
