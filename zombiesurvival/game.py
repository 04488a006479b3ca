"""Game rules, the window loop and the command that starts the game."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .bullet import Bullet
from .enemy import EnemyManager
from .geometry import Rect, Vec, shape_bounds
from .player import Player, movement_from_keys
from .tilemap import TileMap

VIEW_WIDTH = 800.0
VIEW_HEIGHT = 600.0
PLAYER_SPEED = 200.0

SPAWN_INTERVAL = 2.0
ASTEROID_INTERVAL = 1.5
ASTEROID_SCORE = 100
LEVEL3_SCORE = 200
MESSAGE_DURATION = 3.0

ROCK_RADIUS = 12.0
ROCK_COLOR = (150, 150, 150)
ROCK_DAMAGE = 10
ROCK_BASE_SPEED = 150
ROCK_SPEED_RANGE = 100
ROCK_SPAWN_LIFT = 30.0
ROCK_DESPAWN_MARGIN = 50.0

TUTORIAL_LINES = (
    "Hello, survivor. I'm Commander B.",
    "",
    "Use WASD to move.",
    "Left click to shoot.",
    "Press P to pause.",
    "Avoid zombies and asteroids.",
    "",
    "Press ENTER to begin.",
)


@dataclass
class FallingRock:
    """A round rock dropping from above the view."""

    position: Vec
    speed: float

    def update(self, dt: float) -> None:
        self.position = (self.position[0], self.position[1] + self.speed * dt)

    def bounds(self) -> Rect:
        diameter = 2 * ROCK_RADIUS
        return shape_bounds(self.position, (diameter, diameter))


class GameState:
    """Everything that changes while playing, advanced one frame at a time."""

    def __init__(
        self,
        player: Optional[Player] = None,
        enemy_manager: Optional[EnemyManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = player if player is not None else Player(speed=PLAYER_SPEED)
        self.enemy_manager = (
            enemy_manager if enemy_manager is not None else EnemyManager(self.rng)
        )
        self.bullets: list[Bullet] = []
        self.rocks: list[FallingRock] = []
        self.score = 0
        self.paused = False
        self.level3 = False
        self.asteroids_enabled = False
        self.elapsed = 0.0
        self.spawn_timer = 0.0
        self.asteroid_timer = 0.0
        self.asteroid_message_start: Optional[float] = None
        self.level3_message_start: Optional[float] = None

    @property
    def game_over(self) -> bool:
        return self.player.health <= 0

    def _message_active(self, start: Optional[float]) -> bool:
        return start is not None and self.elapsed - start < MESSAGE_DURATION

    @property
    def show_asteroid_warning(self) -> bool:
        return self._message_active(self.asteroid_message_start)

    @property
    def show_level3_message(self) -> bool:
        return self._message_active(self.level3_message_start)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def step(self, dt: float, movement: Vec, mouse_pos: Vec, shooting: bool = False) -> None:
        """Advance the game by ``dt`` seconds with the given input."""
        self.elapsed += dt
        if self.paused or self.game_over:
            return

        player = self.player
        player.update(dt, movement)
        if shooting:
            player.shoot(mouse_pos, self.bullets)

        self.spawn_timer += dt
        if self.spawn_timer >= SPAWN_INTERVAL:
            self.enemy_manager.spawn_enemy(player.position)
            self.spawn_timer = 0.0

        for bullet in self.bullets:
            bullet.update(dt)

        if not self.level3 and self.score >= LEVEL3_SCORE:
            self.level3 = True
            self.level3_message_start = self.elapsed

        self.score += self.enemy_manager.update(
            dt, player.position, self.bullets, self.level3
        )

        if not self.asteroids_enabled and self.score >= ASTEROID_SCORE and not self.level3:
            self.asteroids_enabled = True
            self.asteroid_message_start = self.elapsed

        if self.asteroids_enabled:
            self._update_rocks(dt)

        player_bounds = player.global_bounds()
        for enemy in self.enemy_manager.enemies:
            if enemy.hitbox_bounds().intersects(player_bounds):
                player.take_damage(enemy.damage)

    def _update_rocks(self, dt: float) -> None:
        player = self.player
        self.asteroid_timer += dt
        if self.asteroid_timer >= ASTEROID_INTERVAL:
            x = float(self.rng.randrange(int(VIEW_WIDTH)))
            position = (
                player.position[0] - VIEW_WIDTH / 2.0 + x,
                player.position[1] - VIEW_HEIGHT / 2.0 - ROCK_SPAWN_LIFT,
            )
            speed = float(ROCK_BASE_SPEED + self.rng.randrange(ROCK_SPEED_RANGE))
            self.rocks.append(FallingRock(position, speed))
            self.asteroid_timer = 0.0

        for rock in self.rocks:
            rock.update(dt)

        player_bounds = player.global_bounds()
        for rock in self.rocks:
            if rock.bounds().intersects(player_bounds):
                player.take_damage(ROCK_DAMAGE)

        limit = player.position[1] + VIEW_HEIGHT / 2.0 + ROCK_DESPAWN_MARGIN
        self.rocks = [rock for rock in self.rocks if rock.position[1] <= limit]


def _camera(center: Vec) -> Vec:
    return (center[0] - VIEW_WIDTH / 2.0, center[1] - VIEW_HEIGHT / 2.0)


def _load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


class _Fonts:
    def __init__(self, path: Path) -> None:
        self.path: Optional[str] = str(path)
        try:
            pygame.font.Font(self.path, 24)
        except (pygame.error, OSError):
            print("Error loading font!", file=sys.stderr)
            self.path = None

    def render(self, text: str, size: int, color, bold: bool = False) -> pygame.Surface:
        font = pygame.font.Font(self.path, size)
        font.set_bold(bold)
        return font.render(text, True, color)


def _start_music(path: Path) -> None:
    try:
        pygame.mixer.music.load(str(path))
    except (pygame.error, OSError):
        print("Error loading soundtrack.ogg", file=sys.stderr)
        return
    pygame.mixer.music.set_volume(0.6)
    pygame.mixer.music.play(-1)


def _stop_music() -> None:
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()


def _run_tutorial(screen: pygame.Surface, clock, fonts: _Fonts, assets: Path) -> bool:
    """Show the briefing until ENTER; return False if the window was closed."""
    box = pygame.Rect(70, 130, int(VIEW_WIDTH - 160), 220)
    box_fill = pygame.Surface(box.size, pygame.SRCALPHA)
    box_fill.fill((30, 30, 30, 220))
    name = fonts.render("NPC: Commander B", 20, (0, 255, 255))
    lines = [fonts.render(line, 22, (255, 255, 255)) for line in TUTORIAL_LINES]
    line_height = pygame.font.Font(fonts.path, 22).get_linesize()
    prompt = fonts.render("Press ENTER to continue...", 18, (150, 150, 150))
    npc = _load_image(assets / "Sprites" / "brim.png")
    if npc is not None:
        npc = pygame.transform.scale(
            npc, (round(npc.get_width() * 0.25), round(npc.get_height() * 0.25))
        )

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return True
        screen.fill((0, 0, 0))
        screen.blit(box_fill, box.topleft)
        pygame.draw.rect(screen, (255, 255, 255), box.inflate(4, 4), 2)
        screen.blit(name, (80, 100))
        for index, line in enumerate(lines):
            screen.blit(line, (80, 140 + index * line_height))
        screen.blit(prompt, (int(VIEW_WIDTH / 2 - 140), 380))
        if npc is not None:
            screen.blit(npc, (box.right - 140, box.top + 10))
        pygame.display.flip()
        clock.tick(60)


def _show_game_over(screen: pygame.Surface, clock, image: Optional[pygame.Surface]) -> None:
    _stop_music()
    screen.fill((0, 0, 0))
    if image is not None:
        screen.blit(image, image.get_rect(center=(VIEW_WIDTH / 2, VIEW_HEIGHT / 2)))
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                return
        clock.tick(60)


def _draw_frame(screen, state: GameState, tile_map: TileMap, fonts: _Fonts, texts) -> None:
    camera = _camera(state.player.position)
    screen.fill((0, 0, 0))
    tile_map.draw(screen, camera, state.player.position)
    state.player.draw(screen, camera)
    for bullet in state.bullets:
        bullet.draw(screen, camera)
    state.enemy_manager.draw(screen, camera)
    for rock in state.rocks:
        center = (
            round(rock.position[0] + ROCK_RADIUS - camera[0]),
            round(rock.position[1] + ROCK_RADIUS - camera[1]),
        )
        pygame.draw.circle(screen, ROCK_COLOR, center, ROCK_RADIUS)

    screen.blit(fonts.render(f"Score: {state.score}", 24, (255, 255, 255)), (10, 10))
    warning, level3_text, paused_text = texts
    if state.show_asteroid_warning:
        screen.blit(warning, warning.get_rect(center=(VIEW_WIDTH / 2, 60)))
    if state.show_level3_message:
        screen.blit(level3_text, level3_text.get_rect(center=(VIEW_WIDTH / 2, 100)))
    if state.paused:
        screen.blit(paused_text, paused_text.get_rect(center=(VIEW_WIDTH / 2, VIEW_HEIGHT / 2)))
    pygame.display.flip()


def _run(assets: Path) -> int:
    screen = pygame.display.set_mode((int(VIEW_WIDTH), int(VIEW_HEIGHT)))
    pygame.display.set_caption("Zombie Game")
    clock = pygame.time.Clock()

    player = Player(assets / "Sprites" / "player5.png", PLAYER_SPEED)
    tile_map = TileMap(assets / "Sprites" / "floor3.png", 0, 0)
    state = GameState(player)
    state.enemy_manager.load_textures(assets)

    fonts = _Fonts(assets / "Fonts" / "arial.ttf")
    texts = (
        fonts.render("ASTEROIDS INCOMING!", 36, (255, 0, 0), bold=True),
        fonts.render("The enemies are faster now!!", 28, (255, 0, 255), bold=True),
        fonts.render("PAUSED", 40, (255, 255, 0), bold=True),
    )
    _start_music(assets / "Audio" / "soundtrack.ogg")

    if not _run_tutorial(screen, clock, fonts, assets):
        return 0

    game_over_image = _load_image(assets / "Sprites" / "gameover.png")
    if game_over_image is None:
        print("Error loading Game Over image!", file=sys.stderr)

    clock.tick()
    while True:
        dt = clock.tick(60) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                state.toggle_pause()

        if state.game_over:
            _show_game_over(screen, clock, game_over_image)
            return 0

        camera = _camera(player.position)
        mouse_x, mouse_y = pygame.mouse.get_pos()
        state.step(
            dt,
            movement_from_keys(pygame.key.get_pressed()),
            (camera[0] + mouse_x, camera[1] + mouse_y),
            bool(pygame.mouse.get_pressed()[0]),
        )
        _draw_frame(screen, state, tile_map, fonts, texts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(
        prog="zombiesurvival", description="Top-down zombie survival shooter."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("Assets"),
        help="directory holding the Sprites, Fonts and Audio folders",
    )
    args = parser.parse_args(argv)
    pygame.init()
    try:
        return _run(args.assets)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())