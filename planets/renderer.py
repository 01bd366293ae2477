#!/usr/bin/env python3
"""
Pygame drawing for Planets.

PygameRenderer draws one frame from the simulation state: the twinkling starfield,
each body's trail as a fading polyline, the bodies themselves and a small HUD.
It only reads bodies and stars; it never changes them.
"""
import random
from typing import List, Optional, Sequence, Tuple

import pygame

from .camera import VirtualCamera
from .constants import (
    BACKGROUND_COLOR,
    HUD_COLOR,
    SAFE_COORD_LIMIT,
    STAR_COLOR,
    STAR_FLICKER_CHANCE,
    TRAIL_WIDTH,
)
from .data_models import Body, Star

Segment = Tuple[pygame.math.Vector2, pygame.math.Vector2, float]


def trail_segments(body: Body) -> List[Segment]:
    """
    Consecutive trail point pairs, oldest first, with an alpha in (0, 1].

    Alpha grows linearly with recency; the segment touching the newest point is opaque.
    """
    points = body.trail_oldest_first()
    n = len(points) - 1
    if n <= 0:
        return []
    return [(points[i], points[i + 1], (i + 1) / n) for i in range(n)]


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameRenderer:
    """
    Draws bodies, trails and stars onto a pygame surface.

    The rng decides which stars flicker out on each frame.
    """
    def __init__(self, surface: pygame.Surface, camera: Optional[VirtualCamera] = None,
                 rng: Optional[random.Random] = None):
        self.surface = surface
        self.camera = camera or VirtualCamera(surface.get_size())
        self.rng = rng or random.Random()
        self._font = None

    def set_surface(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.camera.set_viewport_size(*surface.get_size())

    def draw_stars(self, stars: Sequence[Star]) -> None:
        scale = self.camera.scale
        for s in stars:
            if self.rng.random() < STAR_FLICKER_CHANCE:
                continue
            p = _safe_point(self.camera.world_to_screen(s.position))
            if p:
                pygame.draw.circle(self.surface, STAR_COLOR, p, max(1, round(s.magnitude * scale)))

    def draw_trails(self, bodies: Sequence[Body]) -> None:
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        for b in bodies:
            r, g, bl = b.color[:3]
            for a, c, alpha in trail_segments(b):
                start = _safe_point(self.camera.world_to_screen(a))
                end = _safe_point(self.camera.world_to_screen(c))
                if start and end:
                    pygame.draw.line(overlay, (r, g, bl, int(255 * alpha)), start, end, TRAIL_WIDTH)
        self.surface.blit(overlay, (0, 0))

    def draw_bodies(self, bodies: Sequence[Body]) -> None:
        scale = self.camera.scale
        for b in bodies:
            p = _safe_point(self.camera.world_to_screen(b.position))
            if p:
                pygame.draw.circle(self.surface, b.color[:3], p, b.render_radius(scale))

    def draw_text(self, text: str, x: int, y: int, color=HUD_COLOR) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        img = self._font.render(text, True, color)
        self.surface.blit(img, (x, y))

    def draw(self, bodies: Sequence[Body], stars: Sequence[Star], paused: bool = False) -> None:
        """Draw a full frame (without flipping the display)."""
        self.surface.fill(BACKGROUND_COLOR)
        self.draw_trails(bodies)
        self.draw_bodies(bodies)
        self.draw_stars(stars)
        state = "Paused" if paused else "Running"
        self.draw_text(f"Bodies: {len(bodies)}  [{state}]  Space: hold to pause | R: reset | Esc: quit",
                       10, 10)
