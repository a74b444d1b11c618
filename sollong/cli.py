"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import pygame

from sollong.game import Game, MoveResult
from sollong.maps import MapError, load_map
from sollong.render import Renderer, move_count_text

WINDOW_TITLE = "So Long"

_SPECIAL_KEYS = {
    pygame.K_ESCAPE: 65307,
    pygame.K_LEFT: 65361,
    pygame.K_UP: 65362,
    pygame.K_RIGHT: 65363,
    pygame.K_DOWN: 65364,
}
_LETTER_KEYS = {pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d}


def _keycode(key: int) -> Optional[int]:
    """Translate a pygame key to the game's key code, or None if unused."""
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    if key in _LETTER_KEYS:
        return key
    return None


def run(game: Game) -> MoveResult:
    """Open a window and play ``game`` until it is won or closed."""
    pygame.init()
    try:
        renderer = Renderer(game)
        renderer.surface = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        renderer.load_images()
        renderer.draw()
        pygame.display.flip()
        print(move_count_text(game.moves), flush=True)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return MoveResult.QUIT
                if event.type != pygame.KEYDOWN:
                    continue
                keycode = _keycode(event.key)
                if keycode is None:
                    continue
                result = game.handle_key(keycode)
                if result is MoveResult.QUIT:
                    return result
                if result is MoveResult.WON:
                    print("You win!", flush=True)
                    return result
                if result is MoveResult.MOVED:
                    renderer.draw()
                    pygame.display.flip()
                    print(move_count_text(game.moves), flush=True)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Error\n")
        return 1
    try:
        level = load_map(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    try:
        run(Game.from_level(level))
    except pygame.error as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())