#!/usr/bin/env python3
"""
Scenario builders for Planets.

- ScenarioGenerator: one heavy sun at the origin plus a random number of satellites on
  near-circular orbits, each nudged by a small random kick so orbits are not perfect circles.
- classic_scenario: the fixed four-body system (sun, earth, mun, mercury).
- generate_starfield: the decorative background stars.

All randomness comes from a random.Random passed in by the caller, so a seed reproduces
a scenario exactly.
"""
import logging
import random
from typing import List, Optional

from pygame.math import Vector2

from .config import SimulationConfig
from .constants import (
    CLASSIC_SUN_MASS,
    STAR_COUNT,
    STAR_MAGNITUDE_RANGE,
    SUN_COLOR,
)
from .data_models import Body, Star
from .physics import circular_orbit_velocity

logger = logging.getLogger(__name__)


class ScenarioGenerator:
    """
    Builds randomized star systems.

    Satellites are sampled uniformly in the square [-R, R] x [-R, R] around the sun, so
    their starting distance is at most R * sqrt(2). Samples closer than min_orbit_radius
    are drawn again, which keeps every satellite off the sun.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SimulationConfig()
        self.config.validate()
        self.rng = rng or random.Random()

    def make_sun(self) -> Body:
        return Body(
            name="Sun",
            position=(0.0, 0.0),
            velocity=(0.0, 0.0),
            mass=self.config.sun_mass,
            color=SUN_COLOR,
            trail_length=self.config.trail_length,
        )

    def sample_position(self) -> Vector2:
        r = self.config.max_orbit_radius
        while True:
            pos = Vector2(self.rng.uniform(-r, r), self.rng.uniform(-r, r))
            if pos.length() >= self.config.min_orbit_radius:
                return pos

    def sample_color(self):
        floor = self.config.color_floor
        return (
            self.rng.randint(floor, 255),
            self.rng.randint(floor, 255),
            self.rng.randint(floor, 255),
            255,
        )

    def make_satellite(self, sun: Body, index: int) -> Body:
        cfg = self.config
        sat = Body(
            name=f"Planet {index + 1}",
            position=self.sample_position(),
            velocity=(0.0, 0.0),
            mass=self.rng.uniform(*cfg.satellite_mass_range),
            color=self.sample_color(),
            trail_length=cfg.trail_length,
        )
        velocity = circular_orbit_velocity(sat, sun, cfg.gravitational_constant, cfg.max_orbit_speed)
        # Perturb one axis so the orbit is slightly elliptical
        velocity.x += self.rng.uniform(-cfg.orbit_ellipticity, cfg.orbit_ellipticity)
        sat.velocity = velocity
        return sat

    def generate(self) -> List[Body]:
        """
        Create a fresh system: satellites first, the sun appended last.

        Returns:
            List of 1 + N bodies, N uniform in satellite_count_range (inclusive).
        """
        sun = self.make_sun()
        count = self.rng.randint(*self.config.satellite_count_range)
        bodies = [self.make_satellite(sun, i) for i in range(count)]
        bodies.append(sun)
        logger.info("Generated random scenario with %d satellites", count)
        return bodies


def classic_scenario(config: Optional[SimulationConfig] = None) -> List[Body]:
    """
    The hand-built demo system: a light sun with three planets.

    Earth starts with a fixed velocity; mun and mercury get circular orbit velocities
    (no speed clamp).
    """
    config = config or SimulationConfig()
    g = config.gravitational_constant
    n = config.trail_length

    sun = Body(
        name="Sun",
        position=(0.0, 0.0),
        velocity=(0.0, 0.0),
        mass=CLASSIC_SUN_MASS,
        color=SUN_COLOR,
        trail_length=n,
    )
    earth = Body(
        name="Earth",
        position=(500.0, 0.0),
        velocity=(0.1, 0.3),
        mass=999.0,
        color=(129, 171, 84, 255),
        trail_length=n,
    )
    mun = Body(
        name="Mun",
        position=(450.0, -450.0),
        velocity=(0.0, 0.0),
        mass=35.0,
        color=(75, 109, 119, 255),
        trail_length=n,
    )
    mun.velocity = circular_orbit_velocity(mun, sun, g)
    mercury = Body(
        name="Mercury",
        position=(0.0, 300.0),
        velocity=(0.0, 0.0),
        mass=200.0,
        color=(201, 55, 55, 255),
        trail_length=n,
    )
    mercury.velocity = circular_orbit_velocity(mercury, sun, g)

    logger.info("Loaded classic scenario")
    return [sun, earth, mun, mercury]


def generate_starfield(rng: random.Random, width: float, height: float,
                       count: int = STAR_COUNT) -> List[Star]:
    """Scatter `count` stars over a width x height area centred on the origin."""
    w = width / 2.0
    h = height / 2.0
    lo, hi = STAR_MAGNITUDE_RANGE
    return [
        Star(
            position=Vector2(rng.uniform(-w, w), rng.uniform(-h, h)),
            magnitude=rng.uniform(lo, hi),
        )
        for _ in range(count)
    ]
