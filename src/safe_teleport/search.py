"""Random search for a safe landing column around an origin."""

from __future__ import annotations

import logging
import random

from safe_teleport.errors import NoSafeLocationError, OutOfBoundsError
from safe_teleport.models import ColumnPosition, Placement, SafeSpot, Vec3
from safe_teleport.safety import validate_spot
from safe_teleport.scanner import find_highest_occupied
from safe_teleport.world import VoxelQuery


class RandomPlacementSearch:
    """Samples random columns around an origin until one is safe to stand on.

    ``max_attempts=None`` searches without a bound and will not return if no
    column in range qualifies. With a bound, exhaustion raises
    ``NoSafeLocationError`` carrying the landing over the origin's own column
    as a fallback, or None when that column is not safe either.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        max_attempts: int | None = 1024,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be positive or None")
        self._rng = rng or random.Random()
        self._max_attempts = max_attempts
        self._logger = logger or logging.getLogger("safe_teleport.search")

    def find_safe_location(self, world: VoxelQuery, origin_x: int, origin_z: int, max_distance: int) -> Placement:
        if max_distance < 1:
            raise ValueError("max_distance must be at least 1")

        attempts = 0
        while self._max_attempts is None or attempts < self._max_attempts:
            attempts += 1
            x = origin_x + self._rng.randrange(max_distance * 2) - max_distance
            z = origin_z + self._rng.randrange(max_distance * 2) - max_distance

            spot = self._try_column(world, x, z)
            if spot is not None:
                self._logger.info(
                    "placement_found",
                    extra={"x": spot.x, "y": spot.surface_y, "z": spot.z, "attempts": attempts},
                )
                return Placement(spot=spot, attempts=attempts)

        fallback = self.origin_surface(world, origin_x, origin_z)
        self._logger.warning(
            "placement_exhausted",
            extra={
                "origin_x": origin_x,
                "origin_z": origin_z,
                "attempts": attempts,
                "max_attempts": self._max_attempts,
                "max_distance": max_distance,
            },
        )
        raise NoSafeLocationError(attempts, fallback=fallback)

    def _try_column(self, world: VoxelQuery, x: int, z: int) -> SafeSpot | None:
        column = ColumnPosition(x=x, z=z)
        try:
            surface_y = find_highest_occupied(world, column, skip_non_solid_cube=False)
            return validate_spot(world, (x, surface_y + 1, z))
        except OutOfBoundsError as exc:
            self._logger.debug("placement_candidate_out_of_bounds", extra={"position": exc.position})
            return None

    @staticmethod
    def origin_surface(world: VoxelQuery, origin_x: int, origin_z: int) -> Vec3 | None:
        """Landing over the origin's column surface.

        None when the column is outside the world or its top is not safe to
        stand on (void, or no head room below the world top).
        """
        column = ColumnPosition(x=origin_x, z=origin_z)
        try:
            surface_y = find_highest_occupied(world, column, skip_non_solid_cube=False)
            spot = validate_spot(world, (origin_x, surface_y + 1, origin_z))
        except OutOfBoundsError:
            return None
        return spot.landing if spot is not None else None
