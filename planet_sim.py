#!/usr/bin/env python3
"""
Planets application entry point.

What this module does
- Parses command-line options into a SimulationConfig and validates it.
- Opens a resizable Pygame window and runs a single-threaded frame loop:
  input, one physics tick, then drawing.

Controls
- Hold Space: pause (the frozen state keeps being drawn)
- R: replace the system with a freshly generated one
- Esc or closing the window: quit

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python planet_sim.py --seed 42`
"""

import argparse
import logging
import random
import sys

import pygame

from planets.config import SCENARIOS, ConfigurationError, SimulationConfig
from planets.camera import VirtualCamera
from planets.constants import VIRTUAL_HEIGHT, VIRTUAL_WIDTH
from planets.renderer import PygameRenderer
from planets.simulation import SimulationController

logger = logging.getLogger("planet_sim")

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(module)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Real-time gravitational N-body toy simulator.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for scenario generation and star flicker (default: random).")
    parser.add_argument("--scenario", choices=SCENARIOS, default="random",
                        help="Initial system: random satellites or the fixed classic system.")
    parser.add_argument("--trail-length", type=int, default=SimulationConfig.trail_length,
                        help="Number of past positions kept per body.")
    parser.add_argument("--stars", type=int, default=SimulationConfig.star_count,
                        help="Number of background stars.")
    parser.add_argument("--fps", type=int, default=SimulationConfig.fps,
                        help="Frame rate cap; one physics tick runs per frame.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity.")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        trail_length=args.trail_length,
        star_count=args.stars,
        fps=args.fps,
        scenario=args.scenario,
    )


def run(sim: SimulationController, rng: random.Random) -> None:
    pygame.init()
    pygame.display.set_caption("Planets")
    surface = pygame.display.set_mode((VIRTUAL_WIDTH, VIRTUAL_HEIGHT), pygame.RESIZABLE)
    renderer = PygameRenderer(surface, VirtualCamera(surface.get_size()), rng)
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        sim.reset()
                elif event.type == pygame.VIDEORESIZE:
                    renderer.set_surface(pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE))

            sim.set_paused(pygame.key.get_pressed()[pygame.K_SPACE])
            sim.step()

            renderer.draw(sim.bodies, sim.stars, sim.paused)
            pygame.display.flip()
            clock.tick(sim.config.fps)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    config = config_from_args(args)
    rng = random.Random(args.seed)
    try:
        sim = SimulationController(config, rng)
    except ConfigurationError as e:
        logger.error(f"FATAL CONFIGURATION ERROR: {e}")
        return 2

    run(sim, rng)
    logger.info("Stopped after %d ticks", sim.stepper.ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
