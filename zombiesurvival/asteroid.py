"""Falling rectangular asteroids."""

from __future__ import annotations

import pygame

from .geometry import Rect, Vec, shape_bounds

ASTEROID_SIZE: Vec = (20.0, 40.0)
ASTEROID_ORIGIN: Vec = (ASTEROID_SIZE[0] / 4.0, ASTEROID_SIZE[1] / 4.0)
ASTEROID_COLOR = (100, 100, 100)


class Asteroid:
    """A grey block that falls straight down at a fixed speed."""

    def __init__(self, position: Vec, speed: float) -> None:
        self.position: Vec = (float(position[0]), float(position[1]))
        self.speed = float(speed)

    def update(self, dt: float) -> None:
        """Fall for ``dt`` seconds."""
        self.position = (self.position[0], self.position[1] + self.speed * dt)

    def bounds(self) -> Rect:
        """World-space bounding box of the asteroid."""
        return shape_bounds(self.position, ASTEROID_SIZE, ASTEROID_ORIGIN)

    def draw(self, surface: pygame.Surface, camera: Vec) -> None:
        """Draw the asteroid; ``camera`` is the world point at the surface's top-left."""
        rect = self.bounds()
        pygame.draw.rect(
            surface,
            ASTEROID_COLOR,
            pygame.Rect(
                round(rect.left - camera[0]),
                round(rect.top - camera[1]),
                round(rect.width),
                round(rect.height),
            ),
        )