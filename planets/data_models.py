#!/usr/bin/env python3
"""
Data models for Planets.

This module defines the Body entity moved by the physics step and the decorative Star.

Units and usage
- position and velocity are pygame Vector2s in world units; velocity is change in position per tick.
- mass is a positive scalar; it drives both gravity and the drawn radius (ln(mass)).
- trail stores past positions newest-first and is bounded by trail_length.
- Bodies are owned by SimulationController; the renderer only reads them.
"""
import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple

from pygame.math import Vector2

from .constants import DISPLACEMENT_SCALE, MIN_DISTANCE_SQUARED, MIN_RENDER_RADIUS, TRAIL_LENGTH

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


@dataclass
class Body:
    """
    A point mass (sun or planet) in the simulation.

    Fields:
    - position: world-space coordinates
    - velocity: change in position per tick
    - mass: strictly positive mass
    - color: RGBA tuple used for rendering
    - name: label used in log messages
    - trail_length: maximum number of stored trail points
    - trail: deque of past positions, most recent first
    """
    position: Vector2
    velocity: Vector2
    mass: float
    color: Color
    name: str = "Body"
    trail_length: int = TRAIL_LENGTH
    trail: Deque[Vector2] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.mass > 0:
            raise ValueError(f"Body mass must be positive, got {self.mass!r}")
        if self.trail_length < 0:
            raise ValueError(f"trail_length must be >= 0, got {self.trail_length!r}")
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)
        self.color = tuple(self.color)
        self.trail = deque(maxlen=self.trail_length)

    def record_and_move(self, displacement_scale: float = DISPLACEMENT_SCALE) -> None:
        """Push the current position onto the trail, then advance by velocity * displacement_scale."""
        # appendleft on a bounded deque drops the oldest point from the right
        self.trail.appendleft(Vector2(self.position))
        self.position = self.position + self.velocity * displacement_scale

    def accumulate_gravity(self, other: "Body", gravitational_constant: float) -> None:
        """
        Add the pull of `other` to this body's velocity.

        The acceleration is G * other.mass / r^2 and is not divided by self.mass, so every
        body responds to the other's mass alone. r^2 is floored at MIN_DISTANCE_SQUARED.
        """
        offset = other.position - self.position
        distance_squared = offset.length_squared()
        if distance_squared == 0:
            logger.debug("%s and %s coincide; no direction for gravity", self.name, other.name)
            return
        acceleration = gravitational_constant * other.mass / max(distance_squared, MIN_DISTANCE_SQUARED)
        self.velocity = self.velocity + offset.normalize() * acceleration

    def snapshot(self) -> "Body":
        """Copy with independent vectors and an empty trail, for read-only use within a tick."""
        return Body(
            position=self.position,
            velocity=self.velocity,
            mass=self.mass,
            color=self.color,
            name=self.name,
            trail_length=0,
        )

    def distance_from_origin(self) -> float:
        return self.position.length()

    def render_radius(self, scale: float = 1.0) -> float:
        """Display radius ln(mass) * scale, never below MIN_RENDER_RADIUS."""
        return max(math.log(self.mass) * scale, MIN_RENDER_RADIUS)

    def trail_oldest_first(self) -> List[Vector2]:
        return list(reversed(self.trail))


@dataclass(frozen=True)
class Star:
    """A background star: fixed position and brightness, never simulated."""
    position: Vector2
    magnitude: float
