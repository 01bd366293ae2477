#!/usr/bin/env python3
"""
Shared constants for Planets (world units are arbitrary "virtual pixels").

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier. SimulationConfig takes its defaults from here.
"""

# Physics
SCALE_FACTOR = 10e6
G = 6.674e-11 * SCALE_FACTOR  # scaled so that orbits of a few hundred units take seconds
MIN_DISTANCE_SQUARED = 1e-6  # floor for r^2 in the gravity denominator
DISPLACEMENT_SCALE = 1.0  # position change per tick = velocity * this

# Body lifecycle
TRAIL_LENGTH = 1000
CULL_DISTANCE = 5000.0  # bodies farther than this from the origin are removed

# Random scenario
SUN_MASS = 1.5e6
MAX_ORBIT_RADIUS = 450.0  # half-width of the box satellites are sampled in
MIN_ORBIT_RADIUS = 20.0  # satellites closer than this to the sun are resampled
ORBIT_ELLIPTICITY = 0.3  # bound of the random kick added to vx
MAX_ORBIT_SPEED = 3.0
SATELLITE_COUNT_RANGE = (4, 12)  # inclusive
SATELLITE_MASS_RANGE = (10.0, 1000.0)
COLOR_FLOOR = 80  # minimum RGB channel value, keeps planets visible on black

# Classic scenario (hand-built system)
CLASSIC_SUN_MASS = 200000.0

# Starfield
STAR_COUNT = 500
STAR_MAGNITUDE_RANGE = (0.1, 1.1)
STAR_FLICKER_CHANCE = 0.05  # probability a star is skipped on a given frame

# Rendering (viewport)
VIRTUAL_WIDTH = 1920
VIRTUAL_HEIGHT = 1080
FPS = 60
MIN_RENDER_RADIUS = 1.0
TRAIL_WIDTH = 1
BACKGROUND_COLOR = (0, 0, 0)
STAR_COLOR = (255, 255, 255)
HUD_COLOR = (200, 200, 200)
SUN_COLOR = (249, 182, 17, 255)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
