#!/usr/bin/env python3
"""
Vector helper functions for 2D operations on pygame.math.Vector2.

These are small functions for vector math used by the physics code.
"""
from pygame.math import Vector2


def perpendicular(v: Vector2) -> Vector2:
    """Rotate v by +90 degrees: (x, y) -> (-y, x)."""
    return Vector2(-v.y, v.x)


def unit(v: Vector2) -> Vector2:
    """Return v scaled to length 1, or a zero vector when v has no length."""
    if v.length_squared() == 0:
        return Vector2(0.0, 0.0)
    return v.normalize()
