"""CLI entrypoint for safe-teleport demos."""

from __future__ import annotations

import logging
import random

import typer
from rich import print
from rich.logging import RichHandler

from safe_teleport.adapters import GridWorld, InMemoryActor
from safe_teleport.config import settings
from safe_teleport.effects import LoggingEffectsSink, NullEffectsSink
from safe_teleport.errors import TeleportError
from safe_teleport.models import Vec3, VoxelClass
from safe_teleport.teleport import TeleportService

app = typer.Typer(help="Safe teleport placement and extended reach demos")


@app.callback()
def _configure(log_level: str | None = typer.Option(None, help="Override SAFE_TELEPORT_LOG_LEVEL")) -> None:
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _build_demo_world(seed: int, radius: int, ground_y: int, height: int) -> GridWorld:
    """Flat stone terrain with scattered pillars, ponds and a few void holes."""
    world = GridWorld(height, x_bounds=(-radius, radius), z_bounds=(-radius, radius))
    world.fill((-radius, 0, -radius), (radius - 1, ground_y, radius - 1), VoxelClass.SOLID)

    rng = random.Random(seed)
    for _ in range(radius):
        x = rng.randrange(-radius, radius)
        z = rng.randrange(-radius, radius)
        feature = rng.random()
        if feature < 0.4:
            world.fill((x, ground_y + 1, z), (x, min(ground_y + 4, height - 1), z), VoxelClass.SOLID)
        elif feature < 0.8:
            world.set_block(x, ground_y, z, VoxelClass.FLUID)
        else:
            world.fill((x, 0, z), (x, ground_y, z), VoxelClass.AIR)
    return world


def _point(vec: Vec3) -> dict:
    return {"x": vec.x, "y": vec.y, "z": vec.z}


@app.command("show-settings")
def show_settings() -> None:
    """Show the effective runtime configuration."""
    print(settings.model_dump())


@app.command("random-teleport")
def random_teleport(
    x: float = typer.Option(0.5, help="Actor X"),
    z: float = typer.Option(0.5, help="Actor Z"),
    seed: int = typer.Option(0, help="Seed for terrain and placement"),
    radius: int = typer.Option(32, help="Half-width of the demo world"),
    ground_y: int = typer.Option(40, help="Top layer of the demo terrain"),
    height: int = typer.Option(64, help="Number of layers in the demo world"),
    max_distance: int | None = typer.Option(None, help="Override SAFE_TELEPORT_MAX_DISTANCE"),
) -> None:
    """Teleport a demo actor to a random safe column."""
    world = _build_demo_world(seed, radius, ground_y, height)
    actor = InMemoryActor(position=Vec3(x, ground_y + 1.0, z))
    config = settings if max_distance is None else settings.model_copy(update={"max_distance": max_distance})
    service = TeleportService(world, LoggingEffectsSink(), settings=config, rng=random.Random(seed))

    try:
        outcome = service.random_teleport(actor)
    except TeleportError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    print(
        {
            "start": _point(outcome.start),
            "landing": _point(outcome.landing),
            "final": _point(outcome.final),
            "attempts": outcome.attempts,
            "fallback_used": outcome.fallback_used,
        }
    )


@app.command()
def reach(
    yaw: float = typer.Option(0.0, help="Look yaw in degrees; 0 faces +Z"),
    pitch: float = typer.Option(0.0, help="Look pitch in degrees; positive looks down"),
    wall_distance: int = typer.Option(10, help="Z of a stone wall in front of the actor"),
    privileged: bool = typer.Option(False, help="Apply the privileged reach multiplier"),
) -> None:
    """Cast an extended-reach ray from a demo actor standing in front of a wall."""
    world = GridWorld(128, x_bounds=(-256, 256), z_bounds=(-256, 256))
    world.fill((-8, 64, wall_distance), (8, 80, wall_distance), VoxelClass.SOLID)
    actor = InMemoryActor(position=Vec3(0.5, 64.0, 0.5), yaw=yaw, pitch=pitch, privileged_reach=privileged)
    service = TeleportService(world, NullEffectsSink())

    hit = service.cast_reach(actor)
    print(
        {
            "kind": hit.kind.value,
            "location": _point(hit.location),
            "block": hit.block,
            "face": hit.face.value if hit.face else None,
        }
    )


if __name__ == "__main__":
    app()
