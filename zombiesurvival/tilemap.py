"""An endless floor made of one repeated tile from a tile sheet."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pygame

from .geometry import Vec

TILE_SIZE = 96
SOURCE_TILE_SIZE = 16
EXTRA_TILES = 5


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class TileMap:
    """Tiles the area around the player with the sheet tile at ``row``/``column``."""

    def __init__(
        self, tile_sheet: str | Path | None = None, row: int = 0, column: int = 0
    ) -> None:
        self.row = row
        self.column = column
        self.texture: Optional[pygame.Surface] = None
        if tile_sheet is not None:
            try:
                self.texture = pygame.image.load(str(tile_sheet))
            except (pygame.error, OSError):
                print(f"Error loading tile sheet: {tile_sheet}", file=sys.stderr)
            else:
                print(f"Map texture loaded: {tile_sheet}")
        self._tile_image: Optional[pygame.Surface] = None

    def visible_tiles(self, view_size: Vec, player_pos: Vec) -> list[Vec]:
        """World positions of the top-left corners of the tiles to draw."""
        tiles_x = int(view_size[0] / TILE_SIZE) + EXTRA_TILES
        tiles_y = int(view_size[1] / TILE_SIZE) + EXTRA_TILES
        start_x = _trunc_div(int(player_pos[0]), TILE_SIZE) - tiles_x // 2
        start_y = _trunc_div(int(player_pos[1]), TILE_SIZE) - tiles_y // 2
        return [
            (float((start_x + x) * TILE_SIZE), float((start_y + y) * TILE_SIZE))
            for x in range(tiles_x)
            for y in range(tiles_y)
        ]

    def _tile(self) -> Optional[pygame.Surface]:
        if self._tile_image is None and self.texture is not None:
            source = pygame.Rect(
                self.column * SOURCE_TILE_SIZE,
                self.row * SOURCE_TILE_SIZE,
                SOURCE_TILE_SIZE,
                SOURCE_TILE_SIZE,
            )
            if self.texture.get_rect().contains(source):
                self._tile_image = pygame.transform.scale(
                    self.texture.subsurface(source), (TILE_SIZE, TILE_SIZE)
                )
        return self._tile_image

    def draw(self, surface: pygame.Surface, camera: Vec, player_pos: Vec) -> None:
        """Draw the floor around ``player_pos``; ``camera`` is the view's top-left."""
        tile = self._tile()
        if tile is None:
            return
        for x, y in self.visible_tiles(surface.get_size(), player_pos):
            surface.blit(tile, (round(x - camera[0]), round(y - camera[1])))