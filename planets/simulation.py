#!/usr/bin/env python3
"""
Simulation driver: owns the bodies, the starfield and the pause flag.

Everything runs on the frame loop's thread. step() advances physics one tick; the
renderer then reads bodies and stars without changing them.
"""
import logging
import random
from typing import List, Optional

from .config import ConfigurationError, SimulationConfig
from .constants import VIRTUAL_HEIGHT, VIRTUAL_WIDTH
from .data_models import Body, Star
from .physics import GravityStepper
from .scenarios import ScenarioGenerator, classic_scenario, generate_starfield

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Holds the current body collection and replaces it wholesale on reset.
    """
    def __init__(self, config: Optional[SimulationConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SimulationConfig()
        self.config.validate()
        self.rng = rng or random.Random()
        self.generator = ScenarioGenerator(self.config, self.rng)
        self.stepper = GravityStepper(
            self.config.gravitational_constant,
            dt=self.config.displacement_scale,
            cull_distance=self.config.cull_distance,
        )
        self.paused = False
        self.bodies: List[Body] = []
        self.stars: List[Star] = generate_starfield(
            self.rng, VIRTUAL_WIDTH, VIRTUAL_HEIGHT, self.config.star_count
        )
        self.reset()

    def build_scenario(self) -> List[Body]:
        if self.config.scenario == "random":
            return self.generator.generate()
        if self.config.scenario == "classic":
            return classic_scenario(self.config)
        raise ConfigurationError(f"Unknown scenario {self.config.scenario!r}")

    def reset(self) -> None:
        """Discard all bodies and build a fresh scenario."""
        self.bodies = self.build_scenario()
        self.stepper.reset_counters()
        logger.info("Reset: %d bodies (%s scenario)", len(self.bodies), self.config.scenario)

    def set_paused(self, paused: bool) -> None:
        paused = bool(paused)
        if paused != self.paused:
            logger.debug("Simulation %s", "paused" if paused else "resumed")
        self.paused = paused

    def toggle_paused(self) -> None:
        self.set_paused(not self.paused)

    def step(self) -> None:
        """Advance one tick unless paused."""
        self.bodies = self.stepper.tick(self.bodies, paused=self.paused)
