from __future__ import annotations

import pytest

from safe_teleport.adapters import GridWorld
from safe_teleport.errors import OutOfBoundsError
from safe_teleport.models import BlockFace, BoundingBox, HitKind, Vec3, VoxelClass


def test_unset_cells_are_air_and_bounds_are_enforced() -> None:
    world = GridWorld(8, x_bounds=(0, 4), z_bounds=(-2, 2))

    assert world.classify(0, 0, -2) is VoxelClass.AIR
    assert world.max_height() == 7
    for pos in [(4, 0, 0), (0, 8, 0), (0, -1, 0), (0, 0, 2)]:
        with pytest.raises(OutOfBoundsError):
            world.classify(*pos)
    with pytest.raises(IndexError):
        world.set_block(-1, 0, 0, VoxelClass.SOLID)


def test_full_cube_tracking() -> None:
    world = GridWorld(8)
    world.set_block(0, 0, 0, VoxelClass.SOLID)
    world.set_block(1, 0, 0, VoxelClass.SOLID, full_cube=False)
    world.set_block(2, 0, 0, VoxelClass.FLUID)

    assert world.is_full_cube(0, 0, 0) is True
    assert world.is_full_cube(1, 0, 0) is False
    assert world.is_full_cube(2, 0, 0) is False
    assert world.is_full_cube(3, 0, 0) is False

    world.set_block(1, 0, 0, VoxelClass.AIR)
    assert world.classify(1, 0, 0) is VoxelClass.AIR


def test_touching_faces_do_not_collide() -> None:
    world = GridWorld(8)
    world.set_block(0, 2, 0, VoxelClass.SOLID)

    resting = BoundingBox(min=Vec3(0.2, 3.0, 0.2), max=Vec3(0.8, 4.8, 0.8))
    sunk = BoundingBox(min=Vec3(0.2, 2.9, 0.2), max=Vec3(0.8, 4.7, 0.8))
    beside = BoundingBox(min=Vec3(1.0, 2.0, 0.0), max=Vec3(1.6, 3.8, 0.6))

    assert world.collides(resting) is False
    assert world.collides(sunk) is True
    assert world.collides(beside) is False


def test_ray_reports_face_entered() -> None:
    world = GridWorld(16)
    world.set_block(-4, 5, 0, VoxelClass.SOLID)

    hit = world.cast_ray(Vec3(0.5, 5.5, 0.5), Vec3(-9.5, 5.5, 0.5))

    assert hit.kind is HitKind.BLOCK
    assert hit.block == (-4, 5, 0)
    assert hit.face is BlockFace.EAST
    assert hit.location.x == pytest.approx(-3.0)


def test_ray_stops_at_fluid_when_not_ignored() -> None:
    world = GridWorld(16)
    world.set_block(0, 5, 3, VoxelClass.FLUID)
    world.set_block(0, 5, 6, VoxelClass.SOLID)

    start, end = Vec3(0.5, 5.5, 0.5), Vec3(0.5, 5.5, 9.5)

    assert world.cast_ray(start, end, ignore_fluids=False).block == (0, 5, 3)
    assert world.cast_ray(start, end, ignore_fluids=True).block == (0, 5, 6)


def test_ray_starting_inside_solid_hits_immediately() -> None:
    world = GridWorld(16)
    world.set_block(0, 5, 0, VoxelClass.SOLID)

    hit = world.cast_ray(Vec3(0.5, 5.5, 0.5), Vec3(0.5, 5.5, 4.5))

    assert hit.block == (0, 5, 0)
    assert hit.face is None


def test_ray_leaving_world_misses() -> None:
    world = GridWorld(8, x_bounds=(0, 2), z_bounds=(0, 2))

    hit = world.cast_ray(Vec3(1.5, 7.5, 1.5), Vec3(1.5, 20.0, 30.0))

    assert hit.kind is HitKind.MISS
    assert hit.location == Vec3(1.5, 20.0, 30.0)
