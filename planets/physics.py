#!/usr/bin/env python3
"""
Core Physics Engine for Planets

Responsibilities
- Accumulate pairwise gravitational pulls into body velocities (direct O(N^2) summation).
- Advance bodies one tick with explicit Euler integration and record their trails.
- Cull bodies that have escaped past a distance from the origin.
- Compute the initial velocity that puts a satellite on a circular orbit.

Conventions
- World units are arbitrary; velocity is change in position per tick.
- Gravity uses a scaled constant (see constants.G). The pull on a body is
  G * other.mass / r^2 and ignores the body's own mass. This is a simplification kept
  on purpose: it is what gives the simulation its characteristic orbits.

Tick consistency
- Every body is snapshotted before any velocity changes, and all pulls are computed
  against the snapshot. The result of a tick therefore does not depend on body order.

Complexity
- N is small (single digits to low tens), so direct summation is enough. No spatial
  partitioning or Barnes-Hut approximation is used.
"""

import logging
import math
from typing import List, Optional

from pygame.math import Vector2

from .constants import CULL_DISTANCE, DISPLACEMENT_SCALE, G
from .data_models import Body
from .vector_utils import perpendicular, unit

logger = logging.getLogger(__name__)


def circular_orbit_velocity(satellite: Body, center: Body,
                            gravitational_constant: float = G,
                            max_speed: Optional[float] = None) -> Vector2:
    """
    Calculate the velocity that puts `satellite` on a circular orbit around `center`.

    Gravity provides exactly the centripetal force needed:
        v = sqrt(G * (M + m) / r)
    The speed is optionally clamped to `max_speed`, which keeps very close orbits from
    flinging satellites out. The direction is the radius vector rotated by +90 degrees,
    and the center's own velocity is added so orbits stay correct around a moving center.

    Args:
        satellite: Body to place in orbit (only position and mass are read)
        center: Body being orbited
        gravitational_constant: G in world units
        max_speed: Optional upper bound on the orbital speed

    Returns:
        Velocity vector for the satellite. If the two bodies coincide there is no
        orbit, and the center's velocity is returned unchanged.
    """
    radius = satellite.position - center.position
    distance = radius.length()
    if distance <= 0:
        return Vector2(center.velocity)

    speed = math.sqrt(gravitational_constant * (center.mass + satellite.mass) / distance)
    if max_speed is not None:
        speed = min(speed, max_speed)

    tangent = unit(perpendicular(radius))
    return tangent * speed + center.velocity


def accumulate_gravity(bodies: List[Body], gravitational_constant: float = G) -> None:
    """
    Add the pull of every other body to each body's velocity.

    Pulls are computed against snapshots taken before any velocity is touched, so
    processing order does not matter.
    """
    snapshot = [b.snapshot() for b in bodies]
    for i, body in enumerate(bodies):
        for j, other in enumerate(snapshot):
            if i == j:
                continue  # Skip self-interaction
            body.accumulate_gravity(other, gravitational_constant)


def cull_escaped(bodies: List[Body], cull_distance: float = CULL_DISTANCE) -> List[Body]:
    """Return the bodies whose distance from the origin does not exceed cull_distance."""
    kept = []
    for b in bodies:
        if b.distance_from_origin() > cull_distance:
            logger.info("Culled %s at distance %.1f", b.name, b.distance_from_origin())
            continue
        kept.append(b)
    return kept


def tick(bodies: List[Body], gravitational_constant: float = G,
         dt: float = DISPLACEMENT_SCALE, paused: bool = False,
         cull_distance: Optional[float] = None) -> List[Body]:
    """
    Advance the simulation by one tick.

    Workflow:
    1) Snapshot all bodies and accumulate pairwise gravity into velocities.
    2) Record each body's trail point and move it by velocity * dt.
    3) Optionally cull bodies beyond cull_distance.

    A paused tick does nothing and returns the bodies as they are. Nothing is drawn here.

    Args:
        bodies: Bodies to advance (velocities, positions and trails are updated in place).
        gravitational_constant: G in world units
        dt: Displacement scale applied to velocity when moving
        paused: Skip the whole tick when True
        cull_distance: Remove bodies farther than this from the origin (None disables)

    Returns:
        The list of surviving bodies. The input list itself is not resized.
    """
    if paused:
        return list(bodies)

    accumulate_gravity(bodies, gravitational_constant)
    for b in bodies:
        b.record_and_move(dt)

    if cull_distance is None:
        return list(bodies)
    return cull_escaped(bodies, cull_distance)


class GravityStepper:
    """
    Per-tick driver holding the gravity and culling settings.

    Keeps simple counters (ticks advanced, bodies culled) for the HUD and logs.
    """

    def __init__(self, gravitational_constant: float = G,
                 dt: float = DISPLACEMENT_SCALE,
                 cull_distance: Optional[float] = CULL_DISTANCE):
        self.gravitational_constant = float(gravitational_constant)
        self.dt = float(dt)
        self.cull_distance = cull_distance
        self.ticks = 0
        self.culled = 0

    def tick(self, bodies: List[Body], paused: bool = False) -> List[Body]:
        # A paused tick is not counted
        if paused:
            return list(bodies)
        survivors = tick(
            bodies,
            self.gravitational_constant,
            dt=self.dt,
            cull_distance=self.cull_distance,
        )
        self.ticks += 1
        self.culled += len(bodies) - len(survivors)
        logger.debug("Tick %d: %d bodies", self.ticks, len(survivors))
        return survivors

    def reset_counters(self) -> None:
        self.ticks = 0
        self.culled = 0
