"""In-memory world and actor used by the CLI demo and tests.

These implement the ``VoxelQuery`` and ``Actor`` contracts so the placement and
reach code can run without a game host.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from safe_teleport.errors import OutOfBoundsError
from safe_teleport.models import ActorSnapshot, BlockFace, BlockPos, BoundingBox, HitResult, Vec3, VoxelClass

_ENTRY_FACES = {
    (0, 1): BlockFace.WEST,
    (0, -1): BlockFace.EAST,
    (1, 1): BlockFace.DOWN,
    (1, -1): BlockFace.UP,
    (2, 1): BlockFace.NORTH,
    (2, -1): BlockFace.SOUTH,
}


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


class GridWorld:
    """Sparse bounded voxel world; unset cells are air.

    Horizontal bounds are half-open ``(low, high)`` ranges. Valid Y layers are
    ``0`` through ``height - 1``.
    """

    def __init__(
        self,
        height: int = 64,
        *,
        x_bounds: tuple[int, int] = (-32, 32),
        z_bounds: tuple[int, int] = (-32, 32),
    ) -> None:
        if height < 1:
            raise ValueError("height must be positive")
        if x_bounds[0] >= x_bounds[1] or z_bounds[0] >= z_bounds[1]:
            raise ValueError("bounds must be non-empty (low, high) ranges")
        self.height = height
        self.x_bounds = x_bounds
        self.z_bounds = z_bounds
        self._cells: dict[BlockPos, VoxelClass] = {}
        self._partial: set[BlockPos] = set()

    def contains(self, x: int, y: int, z: int) -> bool:
        return (
            self.x_bounds[0] <= x < self.x_bounds[1]
            and 0 <= y < self.height
            and self.z_bounds[0] <= z < self.z_bounds[1]
        )

    def _check(self, x: int, y: int, z: int) -> None:
        if not self.contains(x, y, z):
            raise OutOfBoundsError(x, y, z)

    def set_block(self, x: int, y: int, z: int, kind: VoxelClass, *, full_cube: bool | None = None) -> None:
        """Set one cell. Solids are full cubes unless ``full_cube=False`` (slabs, fences)."""
        self._check(x, y, z)
        pos = (x, y, z)
        self._partial.discard(pos)
        if kind is VoxelClass.AIR:
            self._cells.pop(pos, None)
            return
        self._cells[pos] = kind
        if full_cube is False or (full_cube is None and kind is not VoxelClass.SOLID):
            self._partial.add(pos)

    def fill(self, start: BlockPos, end: BlockPos, kind: VoxelClass, *, full_cube: bool | None = None) -> None:
        """Set every cell in the inclusive box ``start``..``end``."""
        (x0, y0, z0), (x1, y1, z1) = start, end
        for x in range(min(x0, x1), max(x0, x1) + 1):
            for y in range(min(y0, y1), max(y0, y1) + 1):
                for z in range(min(z0, z1), max(z0, z1) + 1):
                    self.set_block(x, y, z, kind, full_cube=full_cube)

    def classify(self, x: int, y: int, z: int) -> VoxelClass:
        self._check(x, y, z)
        return self._cells.get((x, y, z), VoxelClass.AIR)

    def is_full_cube(self, x: int, y: int, z: int) -> bool:
        self._check(x, y, z)
        pos = (x, y, z)
        return pos in self._cells and pos not in self._partial

    def max_height(self) -> int:
        return self.height - 1

    def _blocks_movement(self, x: int, y: int, z: int) -> bool:
        return self._cells.get((x, y, z)) is VoxelClass.SOLID

    def collides(self, box: BoundingBox) -> bool:
        (x0, y0, z0), (x1, y1, z1) = box.block_range()
        for x in range(x0, x1 + 1):
            for y in range(y0, y1 + 1):
                for z in range(z0, z1 + 1):
                    if self._blocks_movement(x, y, z) and box.intersects_block(x, y, z):
                        return True
        return False

    def cast_ray(
        self,
        origin: Vec3,
        end: Vec3,
        *,
        ignore_fluids: bool = True,
        ignore_entity: Any = None,
    ) -> HitResult:
        """Walk the voxels on the segment with Amanatides & Woo's traversal.

        The grid holds no entities, so ``ignore_entity`` has nothing to exclude.
        Cells outside the world are passable.
        """
        delta = end - origin
        current = list(origin.to_block_pos())
        if self._stops_ray(*current, ignore_fluids=ignore_fluids):
            return HitResult.block_hit(origin, tuple(current), None)

        origin_axes = (origin.x, origin.y, origin.z)
        delta_axes = (delta.x, delta.y, delta.z)
        steps = [_sign(d) for d in delta_axes]
        t_max: list[float] = []
        t_delta: list[float] = []
        for o, d, step in zip(origin_axes, delta_axes, steps):
            if step == 0:
                t_max.append(math.inf)
                t_delta.append(math.inf)
                continue
            boundary = math.floor(o) + 1 if step > 0 else math.floor(o)
            t_max.append((boundary - o) / d)
            t_delta.append(abs(1.0 / d))

        while True:
            axis = min(range(3), key=t_max.__getitem__)
            t = t_max[axis]
            if t > 1.0:
                return HitResult.miss(end)
            current[axis] += steps[axis]
            t_max[axis] += t_delta[axis]
            if self._stops_ray(*current, ignore_fluids=ignore_fluids):
                location = origin + delta.scaled(t)
                return HitResult.block_hit(location, tuple(current), _ENTRY_FACES[(axis, steps[axis])])

    def _stops_ray(self, x: int, y: int, z: int, *, ignore_fluids: bool) -> bool:
        kind = self._cells.get((x, y, z))
        if kind is VoxelClass.SOLID:
            return True
        return kind is VoxelClass.FLUID and not ignore_fluids


@dataclass(slots=True)
class InMemoryActor:
    """Mutable actor record; ``history`` keeps every position it was moved to."""

    position: Vec3
    yaw: float = 0.0
    pitch: float = 0.0
    eye_height: float = 1.62
    half_extents: Vec3 = Vec3(0.3, 0.9, 0.3)
    privileged_reach: bool = False
    history: list[Vec3] = field(default_factory=list)

    def snapshot(self) -> ActorSnapshot:
        return ActorSnapshot(
            position=self.position,
            yaw=self.yaw,
            pitch=self.pitch,
            eye_height=self.eye_height,
            half_extents=self.half_extents,
            privileged_reach=self.privileged_reach,
        )

    def teleport_to(self, position: Vec3) -> None:
        self.position = position
        self.history.append(position)
