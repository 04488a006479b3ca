"""The player-controlled survivor: movement, animation, shooting and health."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, MutableSequence, Optional

import pygame

from .bullet import Bullet
from .geometry import Rect, Vec, normalized, shape_bounds

FRAME_WIDTH = 20
FRAME_HEIGHT = 64
FRAME_COUNT = 6
SPRITE_SCALE = 1.5
START_POSITION: Vec = (400.0, 300.0)
TIME_PER_FRAME = 0.1
SHOOT_COOLDOWN = 0.25
BULLET_SPEED = 600.0
MAX_HEALTH = 50

HEALTH_BAR_SIZE: Vec = (100.0, 12.0)
HEALTH_BAR_ORIGIN: Vec = (50.0, 40.0)
HEALTH_BAR_LIFT = 60.0
HEALTH_BAR_BACK_COLOR = (60, 60, 60)
HEALTH_BAR_FRONT_COLOR = (0, 255, 0)

HITBOX_SIZE: Vec = (20.0, 50.0)
HITBOX_ORIGIN: Vec = (10.0, 25.0)


def movement_from_keys(pressed: Any) -> Vec:
    """Turn the WASD state of ``pressed`` (indexed by key code) into a raw movement vector."""
    x = y = 0.0
    if pressed[pygame.K_w]:
        y -= 1.0
    if pressed[pygame.K_s]:
        y += 1.0
    if pressed[pygame.K_a]:
        x -= 1.0
    if pressed[pygame.K_d]:
        x += 1.0
    return (x, y)


def _load_texture(path: str | Path) -> Optional[pygame.Surface]:
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"Error loading texture from: {path}", file=sys.stderr)
        return None
    print(f"Texture loaded: {texture.get_width()}x{texture.get_height()}")
    return texture


class Player:
    """The survivor, steered by a movement vector and firing towards a target."""

    def __init__(self, texture_path: str | Path | None = None, speed: float = 200.0) -> None:
        self.speed = float(speed)
        self.texture = _load_texture(texture_path) if texture_path is not None else None
        self.position: Vec = START_POSITION
        self.direction = 1
        self.facing = 1
        self.current_frame = 0
        self.frame_x = 0
        self.time_since_last_frame = 0.0
        self.time_since_last_shot = 0.0
        self.health = MAX_HEALTH
        self.max_health = MAX_HEALTH
        self._hitbox_position: Vec = (0.0, 0.0)
        self._frames: dict[tuple[int, int], pygame.Surface] = {}

    @property
    def health_fraction(self) -> float:
        return self.health / self.max_health

    @property
    def _sheet_width(self) -> int:
        if self.texture is None:
            return FRAME_WIDTH * FRAME_COUNT
        return self.texture.get_width()

    def update(self, dt: float, movement: Vec) -> None:
        """Move along ``movement`` (normalised) for ``dt`` seconds and animate."""
        self.time_since_last_shot += dt
        if movement[0] < 0:
            self.direction = -1
        elif movement[0] > 0:
            self.direction = 1

        dx, dy = normalized(movement)
        self.position = (
            self.position[0] + dx * self.speed * dt,
            self.position[1] + dy * self.speed * dt,
        )
        if dx != 0.0 or dy != 0.0:
            self._animate(dt)
        else:
            self.current_frame = 0
        self._hitbox_position = self.position

    def _animate(self, dt: float) -> None:
        self.time_since_last_frame += dt
        if self.time_since_last_frame < TIME_PER_FRAME:
            return
        self.current_frame = (self.current_frame + 1) % FRAME_COUNT
        texture_x = self.current_frame * FRAME_WIDTH
        if texture_x + FRAME_WIDTH > self._sheet_width:
            self.current_frame = 0
            texture_x = 0
        self.frame_x = texture_x
        self.facing = self.direction
        self.time_since_last_frame = 0.0

    def shoot(self, target: Vec, bullets: MutableSequence[Bullet]) -> bool:
        """Fire at ``target`` if the cooldown has passed; return whether a shot was fired."""
        if self.time_since_last_shot < SHOOT_COOLDOWN:
            return False
        direction = (target[0] - self.position[0], target[1] - self.position[1])
        bullets.append(Bullet(self.position, direction, BULLET_SPEED))
        self.time_since_last_shot = 0.0
        return True

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never dropping below zero."""
        self.health = max(self.health - amount, 0)

    def global_bounds(self) -> Rect:
        """Bounding box of the drawn sprite."""
        return shape_bounds(
            self.position,
            (float(FRAME_WIDTH), float(FRAME_HEIGHT)),
            (FRAME_WIDTH / 2.0, FRAME_HEIGHT / 2.0),
            (SPRITE_SCALE * self.facing, SPRITE_SCALE),
        )

    def hitbox_bounds(self) -> Rect:
        """Bounding box used for collisions, as placed by the last update."""
        return shape_bounds(self._hitbox_position, HITBOX_SIZE, HITBOX_ORIGIN)

    def _frame_image(self) -> Optional[pygame.Surface]:
        if self.texture is None:
            return None
        key = (self.frame_x, self.facing)
        image = self._frames.get(key)
        if image is None:
            rect = pygame.Rect(self.frame_x, 0, FRAME_WIDTH, FRAME_HEIGHT)
            rect = rect.clip(self.texture.get_rect())
            if rect.width == 0 or rect.height == 0:
                return None
            image = pygame.transform.scale(
                self.texture.subsurface(rect),
                (round(rect.width * SPRITE_SCALE), round(rect.height * SPRITE_SCALE)),
            )
            if self.facing < 0:
                image = pygame.transform.flip(image, True, False)
            self._frames[key] = image
        return image

    def draw(self, surface: pygame.Surface, camera: Vec) -> None:
        """Draw the sprite and health bar; ``camera`` is the view's top-left."""
        image = self._frame_image()
        if image is not None:
            sprite = self.global_bounds()
            surface.blit(image, (round(sprite.left - camera[0]), round(sprite.top - camera[1])))

        bar_left = round(self.position[0] - HEALTH_BAR_ORIGIN[0] - camera[0])
        bar_top = round(self.position[1] - HEALTH_BAR_LIFT - HEALTH_BAR_ORIGIN[1] - camera[1])
        bar_height = round(HEALTH_BAR_SIZE[1])
        pygame.draw.rect(
            surface,
            HEALTH_BAR_BACK_COLOR,
            pygame.Rect(bar_left, bar_top, round(HEALTH_BAR_SIZE[0]), bar_height),
        )
        front_width = round(HEALTH_BAR_SIZE[0] * self.health_fraction)
        if front_width > 0:
            pygame.draw.rect(
                surface,
                HEALTH_BAR_FRONT_COLOR,
                pygame.Rect(bar_left, bar_top, front_width, bar_height),
            )