import pygame
import pytest

from zombiesurvival.tilemap import TILE_SIZE, TileMap

VIEW = (800.0, 600.0)


def test_tiles_lie_on_tile_grid():
    tiles = TileMap().visible_tiles(VIEW, (400.0, 300.0))
    assert tiles
    assert all(x % TILE_SIZE == 0 and y % TILE_SIZE == 0 for x, y in tiles)


def test_tiles_form_full_grid():
    tiles = TileMap().visible_tiles(VIEW, (123.0, 456.0))
    xs = {x for x, _ in tiles}
    ys = {y for _, y in tiles}
    assert len(tiles) == len(set(tiles)) == len(xs) * len(ys)


@pytest.mark.parametrize("pos", [(400.0, 300.0), (-1234.0, 987.0), (5000.5, -3000.25)])
def test_tiles_cover_player(pos):
    tiles = TileMap().visible_tiles(VIEW, pos)
    assert any(
        x <= pos[0] < x + TILE_SIZE and y <= pos[1] < y + TILE_SIZE for x, y in tiles
    )


def test_moving_one_tile_shifts_grid():
    tile_map = TileMap()
    before = tile_map.visible_tiles(VIEW, (400.0, 300.0))
    after = tile_map.visible_tiles(VIEW, (400.0 + TILE_SIZE, 300.0))
    assert after == [(x + TILE_SIZE, y) for x, y in before]


def test_start_tile_rounds_towards_zero():
    tile_map = TileMap()
    assert tile_map.visible_tiles(VIEW, (-10.0, -10.0)) == tile_map.visible_tiles(
        VIEW, (10.0, 10.0)
    )


def test_larger_view_has_more_tiles():
    tile_map = TileMap()
    small = tile_map.visible_tiles((400.0, 300.0), (0.0, 0.0))
    large = tile_map.visible_tiles(VIEW, (0.0, 0.0))
    assert len(large) > len(small)


def _sheet(tmp_path):
    sheet = pygame.Surface((32, 16))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 16, 16))
    sheet.fill((0, 0, 255), pygame.Rect(16, 0, 16, 16))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))
    return path


@pytest.mark.parametrize("column, colour", [(0, (255, 0, 0)), (1, (0, 0, 255))])
def test_draw_uses_selected_tile(tmp_path, column, colour):
    tile_map = TileMap(_sheet(tmp_path), 0, column)
    surface = pygame.Surface((200, 200))
    tile_map.draw(surface, (0.0, 0.0), (100.0, 100.0))
    assert tuple(surface.get_at((50, 50)))[:3] == colour
    assert tuple(surface.get_at((199, 199)))[:3] == colour


def test_draw_without_texture_leaves_surface(capsys, tmp_path):
    tile_map = TileMap(tmp_path / "missing.png")
    assert "Error loading tile sheet" in capsys.readouterr().err
    surface = pygame.Surface((100, 100))
    surface.fill((1, 2, 3))
    tile_map.draw(surface, (0.0, 0.0), (50.0, 50.0))
    assert tuple(surface.get_at((10, 10)))[:3] == (1, 2, 3)