from __future__ import annotations

import pytest

from safe_teleport.adapters import GridWorld
from safe_teleport.errors import OutOfBoundsError
from safe_teleport.models import ColumnPosition, VoxelClass
from safe_teleport.scanner import find_highest_occupied


class CountingWorld:
    def __init__(self, inner: GridWorld) -> None:
        self.inner = inner
        self.visited: list[int] = []

    def classify(self, x: int, y: int, z: int) -> VoxelClass:
        self.visited.append(y)
        return self.inner.classify(x, y, z)

    def is_full_cube(self, x: int, y: int, z: int) -> bool:
        return self.inner.is_full_cube(x, y, z)

    def max_height(self) -> int:
        return self.inner.max_height()


@pytest.mark.parametrize("k", [0, 1, 17, 40, 62])
def test_returns_highest_solid_voxel(k: int) -> None:
    world = GridWorld(64)
    world.set_block(3, k, -2, VoxelClass.SOLID)
    if k > 2:
        world.set_block(3, k - 2, -2, VoxelClass.SOLID)

    assert find_highest_occupied(world, ColumnPosition(x=3, z=-2), skip_non_solid_cube=False) == k


def test_all_air_column_returns_zero() -> None:
    world = GridWorld(32)
    column = ColumnPosition(x=0, z=0)

    assert find_highest_occupied(world, column) == 0
    assert column.y == 0


def test_block_at_world_top_is_found_immediately() -> None:
    world = GridWorld(16)
    world.set_block(0, 15, 0, VoxelClass.SOLID)

    assert find_highest_occupied(world, ColumnPosition(x=0, z=0)) == 15


def test_fluid_counts_as_occupied_without_skip() -> None:
    world = GridWorld(32)
    world.fill((0, 0, 0), (0, 5, 0), VoxelClass.SOLID)
    world.set_block(0, 6, 0, VoxelClass.FLUID)

    assert find_highest_occupied(world, ColumnPosition(x=0, z=0), skip_non_solid_cube=False) == 6


def test_skip_non_solid_cube_passes_over_partial_blocks() -> None:
    world = GridWorld(32)
    world.fill((1, 0, 1), (1, 5, 1), VoxelClass.SOLID)
    world.set_block(1, 8, 1, VoxelClass.FLUID)
    world.set_block(1, 12, 1, VoxelClass.SOLID, full_cube=False)

    assert find_highest_occupied(world, ColumnPosition(x=1, z=1), skip_non_solid_cube=False) == 12
    assert find_highest_occupied(world, ColumnPosition(x=1, z=1), skip_non_solid_cube=True) == 5


def test_cursor_strictly_decreases_and_stops_at_zero() -> None:
    world = CountingWorld(GridWorld(24))

    assert find_highest_occupied(world, ColumnPosition(x=0, z=0)) == 0
    assert world.visited == list(range(23, 0, -1))


def test_out_of_bounds_column_is_rejected_by_world() -> None:
    world = GridWorld(16, x_bounds=(0, 4), z_bounds=(0, 4))

    with pytest.raises(OutOfBoundsError):
        find_highest_occupied(world, ColumnPosition(x=10, z=0))
