"""Teleport execution pipeline and reach queries wired to runtime settings."""

from __future__ import annotations

import logging
import math
import random

from safe_teleport.config import Settings, settings as default_settings
from safe_teleport.effects import EffectsSink, ParticleBurst, TeleportCue
from safe_teleport.errors import NoSafeLocationError
from safe_teleport.escape import resolve_collision_by_lifting
from safe_teleport.models import HitResult, TeleportOutcome, Vec3
from safe_teleport.reach import cast_reach
from safe_teleport.search import RandomPlacementSearch
from safe_teleport.world import Actor, VoxelQuery


class TeleportService:
    """Runs random teleports and extended-reach queries against one world."""

    def __init__(
        self,
        world: VoxelQuery,
        effects: EffectsSink,
        *,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._world = world
        self._effects = effects
        self._settings = settings or default_settings
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger("safe_teleport.teleport")

    def random_teleport(self, actor: Actor) -> TeleportOutcome:
        """Teleport ``actor`` to a random safe column within ``max_distance``."""
        start = actor.snapshot().position
        search = RandomPlacementSearch(
            self._rng,
            max_attempts=self._settings.max_placement_attempts,
            logger=self._logger.getChild("search"),
        )
        try:
            placement = search.find_safe_location(
                self._world,
                math.floor(start.x),
                math.floor(start.z),
                self._settings.max_distance,
            )
        except NoSafeLocationError as exc:
            if not self._settings.fallback_to_origin_surface or exc.fallback is None:
                raise
            self._logger.warning(
                "random_teleport_fallback",
                extra={"attempts": exc.attempts, "fallback": (exc.fallback.x, exc.fallback.y, exc.fallback.z)},
            )
            final = self.teleport_actor(actor, exc.fallback)
            return TeleportOutcome(
                start=start,
                landing=exc.fallback,
                final=final,
                attempts=exc.attempts,
                fallback_used=True,
            )

        final = self.teleport_actor(actor, placement.landing)
        return TeleportOutcome(start=start, landing=placement.landing, final=final, attempts=placement.attempts)

    def teleport_actor(self, actor: Actor, target: Vec3, *, particle_amount: int | None = None) -> Vec3:
        """Move ``actor`` to ``target``, lift it clear of geometry and fire the cosmetic effects."""
        amount = self._settings.particle_amount if particle_amount is None else particle_amount

        self._spawn_burst(actor.snapshot().position, amount)
        final = resolve_collision_by_lifting(self._world, actor, target)
        self._spawn_burst(final, amount)
        self._play_cue(final)

        self._logger.info(
            "actor_teleported",
            extra={"target": (target.x, target.y, target.z), "final": (final.x, final.y, final.z)},
        )
        return final

    def cast_reach(self, actor: Actor) -> HitResult:
        return cast_reach(
            self._world,
            actor,
            self._settings.base_reach,
            self._settings.privileged_multiplier,
        )

    def _spawn_burst(self, center: Vec3, amount: int) -> None:
        burst = ParticleBurst.around(center, amount, self._rng)
        try:
            self._effects.spawn_burst(burst)
        except Exception:  # noqa: BLE001 - cosmetic effects never affect the teleport.
            self._logger.exception("particle_burst_failed")

    def _play_cue(self, position: Vec3) -> None:
        cue = TeleportCue.NOSTALGIC if self._settings.nostalgic_sounds else TeleportCue.ENDERMAN_TELEPORT
        x, y, z = position.to_block_pos()
        try:
            self._effects.play_teleport_cue(Vec3(x, y, z), cue)
        except Exception:  # noqa: BLE001 - cosmetic effects never affect the teleport.
            self._logger.exception("teleport_cue_failed", extra={"cue": cue.value})
