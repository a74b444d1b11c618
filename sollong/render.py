"""Drawing a game onto a pygame surface."""

from __future__ import annotations

import os
from typing import Mapping, Optional

import pygame

from sollong.game import Game
from sollong.maps import COIN, EXIT, PLAYER, WALL

TILE_SIZE = 32
MAX_WIDTH = 1920
MAX_HEIGHT = 1080
TEXT_COLOR = (255, 255, 255)
TEXT_POSITION = (10, 10)

ASSET_PATHS: dict[str, str] = {
    "wall": "assets/wall.xpm",
    "floor": "assets/floor.xpm",
    "player": "assets/player.xpm",
    "exit": "assets/exit.xpm",
    "exit_open": "assets/exit_open.xpm",
    "coin": "assets/coin.xpm",
}


def move_count_text(moves: int) -> str:
    """The move counter as it is shown to the player."""
    return f"Moves: {moves}"


def tile_layers(tile: str, exit_open: bool) -> tuple[str, ...]:
    """Names of the images drawn for ``tile``, bottom layer first."""
    if tile == WALL:
        return ("wall",)
    if tile == PLAYER:
        return ("floor", "player")
    if tile == COIN:
        return ("floor", "coin")
    if tile == EXIT:
        return ("floor", "exit_open" if exit_open else "exit")
    return ("floor",)


class Renderer:
    """Draws a game's tiles and move counter onto a surface."""

    def __init__(
        self,
        game: Game,
        surface: Optional[pygame.Surface] = None,
        asset_paths: Optional[Mapping[str, str | os.PathLike[str]]] = None,
    ) -> None:
        self.game = game
        self.surface = surface
        self.asset_paths = dict(ASSET_PATHS if asset_paths is None else asset_paths)
        self.images: dict[str, Optional[pygame.Surface]] = {}
        self._font: Optional[pygame.font.Font] = None

    def load_images(self) -> None:
        """Load every tile image; one that cannot be loaded is left out."""
        self.images = {}
        for name, path in self.asset_paths.items():
            try:
                self.images[name] = pygame.image.load(os.fspath(path))
            except (pygame.error, OSError):
                self.images[name] = None

    def window_size(self) -> tuple[int, int]:
        """The pixel size needed to show the whole map."""
        return self.game.width * TILE_SIZE, self.game.height * TILE_SIZE

    def _text_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        return self._font

    def draw(self) -> None:
        """Draw every tile, then the move counter."""
        if self.surface is None:
            raise RuntimeError("no surface to draw on")
        if not self.images:
            self.load_images()
        exit_open = self.game.can_exit()
        for y, row in enumerate(self.game.grid):
            for x, tile in enumerate(row):
                for name in tile_layers(tile, exit_open):
                    image = self.images.get(name)
                    if image is not None:
                        self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))
        text = self._text_font().render(
            move_count_text(self.game.moves), True, TEXT_COLOR
        )
        self.surface.blit(text, TEXT_POSITION)