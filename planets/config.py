#!/usr/bin/env python3
"""
Simulation configuration for Planets.

SimulationConfig gathers the tunables (defaults from constants.py) that the scenario
generator, the physics stepper and the renderer read. validate() checks them up front
so a bad value fails at startup instead of producing NaNs mid-run.
"""
import logging
from dataclasses import dataclass
from typing import Tuple

from . import constants

logger = logging.getLogger(__name__)

SCENARIOS = ("random", "classic")


class ConfigurationError(Exception):
    """Raised when simulation settings are invalid or inconsistent."""
    pass


@dataclass
class SimulationConfig:
    """
    Tunable settings for one simulation run.

    Example:
        >>> config = SimulationConfig(trail_length=500)
        >>> config.validate()
    """
    gravitational_constant: float = constants.G
    displacement_scale: float = constants.DISPLACEMENT_SCALE
    trail_length: int = constants.TRAIL_LENGTH
    cull_distance: float = constants.CULL_DISTANCE
    sun_mass: float = constants.SUN_MASS
    max_orbit_radius: float = constants.MAX_ORBIT_RADIUS
    min_orbit_radius: float = constants.MIN_ORBIT_RADIUS
    orbit_ellipticity: float = constants.ORBIT_ELLIPTICITY
    max_orbit_speed: float = constants.MAX_ORBIT_SPEED
    satellite_count_range: Tuple[int, int] = constants.SATELLITE_COUNT_RANGE
    satellite_mass_range: Tuple[float, float] = constants.SATELLITE_MASS_RANGE
    color_floor: int = constants.COLOR_FLOOR
    star_count: int = constants.STAR_COUNT
    fps: int = constants.FPS
    scenario: str = "random"

    def validate(self) -> None:
        """
        Check every setting, raising ConfigurationError on the first problem found.

        Raises:
            ConfigurationError: If any setting is out of range or inconsistent.
        """
        if self.gravitational_constant <= 0:
            raise ConfigurationError("gravitational_constant must be positive.")
        if self.displacement_scale <= 0:
            raise ConfigurationError("displacement_scale must be positive.")
        if self.trail_length <= 0:
            raise ConfigurationError("trail_length must be positive.")
        if self.cull_distance <= 0:
            raise ConfigurationError("cull_distance must be positive.")
        if self.sun_mass <= 0:
            raise ConfigurationError("sun_mass must be positive.")
        if self.min_orbit_radius <= 0 or self.max_orbit_radius <= 0:
            raise ConfigurationError("Orbit radii must be positive.")
        if self.min_orbit_radius >= self.max_orbit_radius:
            raise ConfigurationError(
                f"min_orbit_radius ({self.min_orbit_radius}) must be smaller than "
                f"max_orbit_radius ({self.max_orbit_radius})."
            )
        if self.orbit_ellipticity < 0:
            raise ConfigurationError("orbit_ellipticity must be >= 0.")
        if self.max_orbit_speed <= 0:
            raise ConfigurationError("max_orbit_speed must be positive.")

        lo, hi = self.satellite_count_range
        if lo < 0 or lo > hi:
            raise ConfigurationError(f"Invalid satellite_count_range {self.satellite_count_range}.")
        m_lo, m_hi = self.satellite_mass_range
        # ln(mass) is the drawn radius, so masses below 1 would draw negative circles
        if m_lo < 1 or m_lo > m_hi:
            raise ConfigurationError(f"Invalid satellite_mass_range {self.satellite_mass_range}; need 1 <= min <= max.")
        if not 0 <= self.color_floor <= 255:
            raise ConfigurationError("color_floor must be within 0..255.")

        if self.star_count < 0:
            raise ConfigurationError("star_count must be >= 0.")
        if self.fps <= 0:
            raise ConfigurationError("fps must be positive.")
        if self.scenario not in SCENARIOS:
            raise ConfigurationError(f"Unknown scenario {self.scenario!r}; expected one of {SCENARIOS}.")

        logger.debug("Configuration validated successfully.")
