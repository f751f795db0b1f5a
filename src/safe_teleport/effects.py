"""Cosmetic teleport notifications: particle bursts and audio cues."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from safe_teleport.models import Vec3


class TeleportCue(str, Enum):
    """Audio cue variants a host can play after a teleport."""

    ENDERMAN_TELEPORT = "entity.enderman.teleport"
    NOSTALGIC = "nostalgic"


@dataclass(frozen=True, slots=True)
class ParticleBurst:
    """Explosion-style burst centred on an actor."""

    center: Vec3
    amount: int
    spread: Vec3
    velocity: float

    @classmethod
    def around(cls, center: Vec3, amount: int, rng: random.Random) -> ParticleBurst:
        velocity = rng.gauss(0.0, 1.0) / 8
        spread = Vec3(rng.gauss(0.0, 1.0) / 12, rng.gauss(0.0, 1.0) / 12, rng.gauss(0.0, 1.0) / 12)
        return cls(center=center, amount=amount, spread=spread, velocity=velocity)


class EffectsSink(Protocol):
    """One-way notifications to the host's particle and sound systems."""

    def spawn_burst(self, burst: ParticleBurst) -> None:
        """Spawn a cosmetic particle burst."""

    def play_teleport_cue(self, position: Vec3, cue: TeleportCue) -> None:
        """Play the teleport sound at ``position``."""


class NullEffectsSink:
    """Sink that drops every notification."""

    def spawn_burst(self, burst: ParticleBurst) -> None:
        return None

    def play_teleport_cue(self, position: Vec3, cue: TeleportCue) -> None:
        return None


class LoggingEffectsSink:
    """Sink that records notifications as log events, used by the CLI demo."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("safe_teleport.effects")

    def spawn_burst(self, burst: ParticleBurst) -> None:
        self._logger.info(
            "particle_burst",
            extra={
                "center": (burst.center.x, burst.center.y, burst.center.z),
                "amount": burst.amount,
                "burst_velocity": burst.velocity,
            },
        )

    def play_teleport_cue(self, position: Vec3, cue: TeleportCue) -> None:
        self._logger.info("teleport_cue", extra={"cue": cue.value, "center": (position.x, position.y, position.z)})
