import pygame
import pytest

from sollong.game import Game
from sollong.maps import locate_elements
from sollong.render import TILE_SIZE, Renderer, move_count_text, tile_layers

ROWS = [
    "111111",
    "1PC0E1",
    "111111",
]

COLORS = {
    "wall": (200, 0, 0),
    "floor": (0, 200, 0),
    "player": (0, 0, 200),
    "exit": (200, 200, 0),
    "exit_open": (0, 200, 200),
    "coin": (200, 0, 200),
}


@pytest.fixture
def asset_paths(tmp_path):
    paths = {}
    for name, color in COLORS.items():
        image = pygame.Surface((TILE_SIZE, TILE_SIZE))
        image.fill(color)
        path = tmp_path / f"{name}.bmp"
        pygame.image.save(image, str(path))
        paths[name] = path
    return paths


@pytest.fixture
def game():
    return Game.from_level(locate_elements(list(ROWS)))


def _center(x, y):
    return (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)


def _pixel(surface, x, y):
    return tuple(surface.get_at(_center(x, y)))[:3]


def test_move_count_text():
    assert move_count_text(5) == "Moves: 5"
    assert move_count_text(0) == "Moves: 0"


@pytest.mark.parametrize(
    "tile, exit_open, layers",
    [
        ("1", False, ("wall",)),
        ("0", False, ("floor",)),
        ("P", False, ("floor", "player")),
        ("C", True, ("floor", "coin")),
        ("E", False, ("floor", "exit")),
        ("E", True, ("floor", "exit_open")),
    ],
)
def test_tile_layers(tile, exit_open, layers):
    assert tile_layers(tile, exit_open) == layers


def test_window_size(game):
    assert Renderer(game).window_size() == (6 * TILE_SIZE, 3 * TILE_SIZE)


def test_draw_without_surface_raises(game, asset_paths):
    with pytest.raises(RuntimeError):
        Renderer(game, asset_paths=asset_paths).draw()


def test_draw_tiles(game, asset_paths):
    renderer = Renderer(game, asset_paths=asset_paths)
    renderer.surface = pygame.Surface(renderer.window_size())
    renderer.draw()
    surface = renderer.surface
    assert _pixel(surface, 1, 1) == COLORS["player"]
    assert _pixel(surface, 2, 1) == COLORS["coin"]
    assert _pixel(surface, 3, 1) == COLORS["floor"]
    assert _pixel(surface, 4, 1) == COLORS["exit"]
    assert _pixel(surface, 5, 2) == COLORS["wall"]


def test_draw_open_exit_after_coins(game, asset_paths):
    game.move(1, 0)
    renderer = Renderer(game, asset_paths=asset_paths)
    renderer.surface = pygame.Surface(renderer.window_size())
    renderer.draw()
    assert _pixel(renderer.surface, 4, 1) == COLORS["exit_open"]
    assert _pixel(renderer.surface, 2, 1) == COLORS["player"]
    assert _pixel(renderer.surface, 1, 1) == COLORS["floor"]


def test_missing_image_is_skipped(game, asset_paths, tmp_path):
    paths = dict(asset_paths)
    paths["coin"] = tmp_path / "missing.bmp"
    renderer = Renderer(game, asset_paths=paths)
    renderer.load_images()
    assert renderer.images["coin"] is None
    assert renderer.images["wall"] is not None
    renderer.surface = pygame.Surface(renderer.window_size())
    renderer.draw()
    assert _pixel(renderer.surface, 2, 1) == COLORS["floor"]