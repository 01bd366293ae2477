import math
import random
import unittest

from planets.config import ConfigurationError, SimulationConfig
from planets.constants import STAR_MAGNITUDE_RANGE, SUN_COLOR
from planets.physics import circular_orbit_velocity
from planets.scenarios import ScenarioGenerator, classic_scenario, generate_starfield


class TestScenarioGenerator(unittest.TestCase):

    def setUp(self):
        self.config = SimulationConfig()

    def generate(self, seed, config=None):
        return ScenarioGenerator(config or self.config, random.Random(seed)).generate()

    def test_body_count_bounds(self):
        counts = set()
        for seed in range(200):
            bodies = self.generate(seed)
            self.assertGreaterEqual(len(bodies), 5)
            self.assertLessEqual(len(bodies), 13)
            counts.add(len(bodies))
        # Both ends of the inclusive range show up over many seeds
        self.assertIn(5, counts)
        self.assertIn(13, counts)

    def test_sun_is_last_and_still(self):
        bodies = self.generate(1)
        sun = bodies[-1]
        self.assertEqual(sun.name, "Sun")
        self.assertEqual(sun.mass, self.config.sun_mass)
        self.assertEqual(sun.color, SUN_COLOR)
        self.assertEqual(sun.position.length(), 0.0)
        self.assertEqual(sun.velocity.length(), 0.0)

    def test_satellite_bounds(self):
        lo, hi = self.config.satellite_mass_range
        max_distance = self.config.max_orbit_radius * math.sqrt(2)
        for seed in range(50):
            for sat in self.generate(seed)[:-1]:
                self.assertGreaterEqual(sat.mass, lo)
                self.assertLessEqual(sat.mass, hi)
                d = sat.position.length()
                self.assertGreaterEqual(d, self.config.min_orbit_radius)
                self.assertLessEqual(d, max_distance)
                self.assertLessEqual(abs(sat.position.x), self.config.max_orbit_radius)
                self.assertLessEqual(abs(sat.position.y), self.config.max_orbit_radius)

    def test_satellite_colors_visible(self):
        for sat in self.generate(3)[:-1]:
            r, g, b, a = sat.color
            for channel in (r, g, b):
                self.assertGreaterEqual(channel, self.config.color_floor)
                self.assertLessEqual(channel, 255)
            self.assertEqual(a, 255)

    def test_velocity_is_perturbed_circular_orbit(self):
        bodies = self.generate(7)
        sun = bodies[-1]
        for sat in bodies[:-1]:
            circular = circular_orbit_velocity(
                sat, sun, self.config.gravitational_constant, self.config.max_orbit_speed
            )
            self.assertAlmostEqual(sat.velocity.y, circular.y)
            self.assertLessEqual(abs(sat.velocity.x - circular.x), self.config.orbit_ellipticity)

    def test_no_perturbation(self):
        config = SimulationConfig(orbit_ellipticity=0.0)
        bodies = self.generate(11, config)
        sun = bodies[-1]
        for sat in bodies[:-1]:
            circular = circular_orbit_velocity(sat, sun, config.gravitational_constant, config.max_orbit_speed)
            self.assertAlmostEqual(sat.velocity.x, circular.x)
            self.assertLessEqual(sat.velocity.length(), config.max_orbit_speed + 1e-9)

    def test_seed_reproduces_scenario(self):
        a = self.generate(42)
        b = self.generate(42)
        self.assertEqual(len(a), len(b))
        for x, y in zip(a, b):
            self.assertEqual((x.position.x, x.position.y), (y.position.x, y.position.y))
            self.assertEqual(x.mass, y.mass)
            self.assertEqual(x.color, y.color)

    def test_custom_count_range(self):
        config = SimulationConfig(satellite_count_range=(2, 2))
        self.assertEqual(len(self.generate(0, config)), 3)

    def test_unreachable_min_radius_rejected(self):
        with self.assertRaises(ConfigurationError):
            ScenarioGenerator(SimulationConfig(min_orbit_radius=1000.0), random.Random(0))

    def test_trail_length_from_config(self):
        config = SimulationConfig(trail_length=7)
        for b in self.generate(0, config):
            self.assertEqual(b.trail.maxlen, 7)


class TestClassicScenario(unittest.TestCase):

    def test_sun_color(self):
        self.assertEqual(classic_scenario()[0].color, SUN_COLOR)

    def test_layout(self):
        bodies = classic_scenario()
        self.assertEqual([b.name for b in bodies], ["Sun", "Earth", "Mun", "Mercury"])
        sun, earth, mun, mercury = bodies
        self.assertEqual(sun.mass, 200000.0)
        self.assertAlmostEqual(earth.velocity.x, 0.1)
        self.assertAlmostEqual(earth.velocity.y, 0.3)

    def test_circular_orbits(self):
        sun, _, mun, mercury = classic_scenario()
        g = SimulationConfig().gravitational_constant
        for sat in (mun, mercury):
            d = sat.position.length()
            self.assertAlmostEqual(sat.velocity.length(), math.sqrt(g * (sun.mass + sat.mass) / d))
            self.assertAlmostEqual(sat.velocity.dot(sat.position), 0.0, places=6)


class TestStarfield(unittest.TestCase):

    def test_bounds_and_count(self):
        stars = generate_starfield(random.Random(5), 1920, 1080, count=300)
        self.assertEqual(len(stars), 300)
        lo, hi = STAR_MAGNITUDE_RANGE
        for s in stars:
            self.assertLessEqual(abs(s.position.x), 960)
            self.assertLessEqual(abs(s.position.y), 540)
            self.assertGreaterEqual(s.magnitude, lo)
            self.assertLessEqual(s.magnitude, hi)

    def test_empty(self):
        self.assertEqual(generate_starfield(random.Random(), 100, 100, count=0), [])


if __name__ == '__main__':
    unittest.main()
