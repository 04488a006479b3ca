"""Zombie enemies and the manager that spawns, moves and removes them."""

from __future__ import annotations

import math
import random
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

import pygame

from .bullet import Bullet
from .geometry import Rect, Vec, normalized, shape_bounds

FRAME_SIZE: Vec = (48.0, 80.0)
SPRITE_ORIGIN: Vec = (24.0, 24.0)
SPRITE_SCALE: Vec = (1.5, 1.5)

HEALTH_BAR_SIZE: Vec = (48.0, 6.0)
HEALTH_BAR_ORIGIN: Vec = (24.0, 60.0)
HEALTH_BAR_BACK_COLOR = (100, 100, 100)
HEALTH_BAR_FRONT_COLOR = (255, 0, 0)

HITBOX_SIZE: Vec = (30.0, 70.0)
HITBOX_ORIGIN: Vec = (15.0, 35.0)

MIN_DISTANCE_TO_PLAYER = 250.0
SPAWN_RANGE = 1600
SPAWN_ATTEMPTS = 100
FALLBACK_OFFSET: Vec = (300.0, 0.0)


class Enemy(ABC):
    """A zombie that walks towards the player and loses health when shot."""

    TINT: tuple[int, int, int] = (255, 255, 255)

    def __init__(
        self,
        texture: Optional[pygame.Surface],
        position: Vec,
        speed: float,
        health: int,
    ) -> None:
        self.texture = texture
        self.position: Vec = (float(position[0]), float(position[1]))
        self.speed = float(speed)
        self.health = health
        self.max_health = health
        self._hitbox_position: Vec = (0.0, 0.0)
        self._image = self._build_image()

    @property
    @abstractmethod
    def damage(self) -> int:
        """Damage dealt to the player per frame of contact."""

    @property
    @abstractmethod
    def points(self) -> int:
        """Score awarded for killing this enemy."""

    @property
    def health_fraction(self) -> float:
        """Remaining health as a fraction of the starting health."""
        return self.health / self.max_health

    def _build_image(self) -> Optional[pygame.Surface]:
        if self.texture is None:
            return None
        frame = pygame.Rect(0, 0, int(FRAME_SIZE[0]), int(FRAME_SIZE[1]))
        frame = frame.clip(self.texture.get_rect())
        if frame.width == 0 or frame.height == 0:
            return None
        region = self.texture.subsurface(frame).copy()
        image = pygame.transform.scale(
            region,
            (round(frame.width * SPRITE_SCALE[0]), round(frame.height * SPRITE_SCALE[1])),
        )
        image.fill((*self.TINT, 255), special_flags=pygame.BLEND_RGBA_MULT)
        return image

    def update(self, dt: float, player_pos: Vec) -> None:
        """Walk towards ``player_pos`` for ``dt`` seconds."""
        dx, dy = normalized(
            (player_pos[0] - self.position[0], player_pos[1] - self.position[1])
        )
        self.position = (
            self.position[0] + dx * self.speed * dt,
            self.position[1] + dy * self.speed * dt,
        )
        self._hitbox_position = self.position

    def check_collision(self, bullet: Bullet) -> bool:
        """Return True if ``bullet`` touches this enemy's hitbox."""
        return self.hitbox_bounds().intersects(bullet.bounds())

    def is_dead(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never dropping below zero."""
        self.health = max(self.health - amount, 0)

    def global_bounds(self) -> Rect:
        """Bounding box of the drawn sprite."""
        return shape_bounds(self.position, FRAME_SIZE, SPRITE_ORIGIN, SPRITE_SCALE)

    def hitbox_bounds(self) -> Rect:
        """Bounding box used for collisions, as placed by the last update."""
        return shape_bounds(self._hitbox_position, HITBOX_SIZE, HITBOX_ORIGIN)

    def draw(self, surface: pygame.Surface, camera: Vec) -> None:
        """Draw the sprite and its health bar; ``camera`` is the view's top-left."""
        sprite = self.global_bounds()
        sprite_topleft = (round(sprite.left - camera[0]), round(sprite.top - camera[1]))
        if self._image is not None:
            surface.blit(self._image, sprite_topleft)
        else:
            pygame.draw.rect(
                surface,
                self.TINT,
                pygame.Rect(sprite_topleft, (round(sprite.width), round(sprite.height))),
            )

        bar_left = round(self.position[0] - HEALTH_BAR_ORIGIN[0] - camera[0])
        bar_top = round(self.position[1] - HEALTH_BAR_ORIGIN[1] - camera[1])
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


class EnemyType1(Enemy):
    """Slow, tough zombie that hits hard."""

    BASE_SPEED = 50.0
    HEALTH = 10
    TINT = (200, 255, 200)

    def __init__(self, texture: Optional[pygame.Surface], position: Vec) -> None:
        super().__init__(texture, position, self.BASE_SPEED, self.HEALTH)

    @property
    def damage(self) -> int:
        return 2

    @property
    def points(self) -> int:
        return 10


class EnemyType2(Enemy):
    """Fast, fragile zombie worth more points."""

    BASE_SPEED = 200.0
    HEALTH = 5
    TINT = (255, 180, 180)

    def __init__(self, texture: Optional[pygame.Surface], position: Vec) -> None:
        super().__init__(texture, position, self.BASE_SPEED, self.HEALTH)

    @property
    def damage(self) -> int:
        return 1

    @property
    def points(self) -> int:
        return 25


class EnemyManager:
    """Owns the living enemies: spawning, moving, hit detection and removal."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.enemies: list[Enemy] = []
        self.texture1: Optional[pygame.Surface] = None
        self.texture2: Optional[pygame.Surface] = None

    def load_textures(self, assets_dir: str | Path = "Assets") -> None:
        """Load the zombie sprite sheets, reporting failures on stderr."""
        path = Path(assets_dir) / "Sprites" / "zombie3.png"
        self.texture1 = self._load(path, "zombie1")
        self.texture2 = self._load(path, "zombie2")

    @staticmethod
    def _load(path: Path, label: str) -> Optional[pygame.Surface]:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError):
            print(f"Failed to load {label} texture", file=sys.stderr)
            return None

    def spawn_enemy(self, player_pos: Vec) -> Enemy:
        """Spawn a random enemy away from the player and return it."""
        spawn_pos: Optional[Vec] = None
        for _ in range(SPAWN_ATTEMPTS):
            x = float(self.rng.randrange(SPAWN_RANGE) - SPAWN_RANGE // 2)
            y = float(self.rng.randrange(SPAWN_RANGE) - SPAWN_RANGE // 2)
            if math.hypot(x, y) >= MIN_DISTANCE_TO_PLAYER:
                spawn_pos = (player_pos[0] + x, player_pos[1] + y)
                break
        if spawn_pos is None:
            spawn_pos = (
                player_pos[0] + FALLBACK_OFFSET[0],
                player_pos[1] + FALLBACK_OFFSET[1],
            )

        enemy: Enemy
        if self.rng.randrange(2) == 0:
            enemy = EnemyType1(self.texture1, spawn_pos)
        else:
            enemy = EnemyType2(self.texture2, spawn_pos)
        self.enemies.append(enemy)
        return enemy

    def update(
        self,
        dt: float,
        player_pos: Vec,
        bullets: Iterable[Bullet],
        level3: bool = False,
    ) -> int:
        """Move enemies, apply bullet hits, remove the dead; return points earned."""
        bullets = list(bullets)
        multiplier = 2.0 if level3 else 1.0
        for enemy in self.enemies:
            base = EnemyType1.BASE_SPEED if enemy.damage == 2 else EnemyType2.BASE_SPEED
            enemy.speed = base * multiplier
            enemy.update(dt, player_pos)
            for bullet in bullets:
                if enemy.check_collision(bullet):
                    enemy.take_damage(1)

        points = sum(enemy.points for enemy in self.enemies if enemy.is_dead())
        self.enemies = [enemy for enemy in self.enemies if not enemy.is_dead()]
        return points

    def draw(self, surface: pygame.Surface, camera: Vec) -> None:
        for enemy in self.enemies:
            enemy.draw(surface, camera)