"""
Planets: a small real-time gravitational N-body simulator.
"""
from .config import ConfigurationError, SimulationConfig
from .data_models import Body, Star
from .physics import GravityStepper, circular_orbit_velocity, cull_escaped, tick
from .scenarios import ScenarioGenerator, classic_scenario, generate_starfield
from .simulation import SimulationController

__all__ = [
    "Body",
    "ConfigurationError",
    "GravityStepper",
    "ScenarioGenerator",
    "SimulationConfig",
    "SimulationController",
    "Star",
    "circular_orbit_velocity",
    "classic_scenario",
    "cull_escaped",
    "generate_starfield",
    "tick",
]
