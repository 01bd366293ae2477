#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

The world is laid out for a VIRTUAL_WIDTH-wide screen with the origin at the centre.
Whatever the real window size, the camera scales so that VIRTUAL_WIDTH world units
span the window width.
"""
from typing import Tuple

from .constants import VIRTUAL_HEIGHT, VIRTUAL_WIDTH


class VirtualCamera:
    """
    Maps world coordinates (virtual pixels, origin at centre) to screen pixels.
    """

    def __init__(self, viewport_size=(VIRTUAL_WIDTH, VIRTUAL_HEIGHT)):
        self.viewport_size = (viewport_size[0], viewport_size[1])

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    @property
    def scale(self) -> float:
        return self.viewport_size[0] / VIRTUAL_WIDTH

    def world_to_screen(self, pos) -> Tuple[float, float]:
        scale = self.scale
        px = self.viewport_size[0] / 2 + pos[0] * scale
        py = self.viewport_size[1] / 2 + pos[1] * scale
        return (px, py)
