"""Projectiles fired by the player."""

from __future__ import annotations

import pygame

from .geometry import Rect, Vec, normalized, shape_bounds

BULLET_RADIUS = 5.0
BULLET_COLOR = (255, 255, 0)


class Bullet:
    """A round projectile travelling in a straight line at constant speed."""

    def __init__(self, position: Vec, direction: Vec, speed: float) -> None:
        self.position: Vec = (float(position[0]), float(position[1]))
        dx, dy = normalized(direction)
        self.velocity: Vec = (dx * speed, dy * speed)

    def update(self, dt: float) -> None:
        """Advance the bullet by ``dt`` seconds."""
        self.position = (
            self.position[0] + self.velocity[0] * dt,
            self.position[1] + self.velocity[1] * dt,
        )

    def bounds(self) -> Rect:
        """World-space bounding box of the bullet."""
        diameter = 2 * BULLET_RADIUS
        return shape_bounds(
            self.position, (diameter, diameter), (BULLET_RADIUS, BULLET_RADIUS)
        )

    def draw(self, surface: pygame.Surface, camera: Vec) -> None:
        """Draw the bullet; ``camera`` is the world point at the surface's top-left."""
        center = (
            round(self.position[0] - camera[0]),
            round(self.position[1] - camera[1]),
        )
        pygame.draw.circle(surface, BULLET_COLOR, center, BULLET_RADIUS)