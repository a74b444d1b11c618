"""Game state and the rules for moving the player around a level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sollong.maps import COIN, EXIT, FLOOR, PLAYER, WALL, Level, Position


class Action(Enum):
    """What a key press asks the game to do."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Position:
        """The step this action takes, as (dx, dy)."""
        return _DELTAS[self]


_DELTAS = {
    Action.QUIT: (0, 0),
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

# Key codes of both the macOS and the X11 keyboards, plus the WASD letters.
_KEYMAP = {
    53: Action.QUIT,
    65307: Action.QUIT,
    ord("w"): Action.UP,
    13: Action.UP,
    65362: Action.UP,
    ord("s"): Action.DOWN,
    1: Action.DOWN,
    65364: Action.DOWN,
    ord("a"): Action.LEFT,
    0: Action.LEFT,
    65361: Action.LEFT,
    ord("d"): Action.RIGHT,
    2: Action.RIGHT,
    65363: Action.RIGHT,
}


class MoveResult(Enum):
    """The outcome of a move or key press."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


def key_action(keycode: int) -> Optional[Action]:
    """The action bound to ``keycode``, or None for an unbound key."""
    return _KEYMAP.get(keycode)


@dataclass
class Game:
    """A level being played: the grid, the player, coins left and moves made."""

    grid: list[list[str]]
    player: Position
    exit: Optional[Position]
    coins: int
    moves: int = 0

    @classmethod
    def from_level(cls, level: Level) -> "Game":
        """Start a new game on a validated level."""
        return cls(
            grid=[list(row) for row in level.rows],
            player=level.player,
            exit=level.exit,
            coins=level.coins,
        )

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def can_exit(self) -> bool:
        """True once every coin has been collected."""
        return self.coins <= 0

    def tile_at(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to step the player by (dx, dy).

        Walls block the player, as does the exit while coins remain. Stepping
        onto the open exit wins the game and leaves the state as it was.
        """
        x, y = self.player
        nx, ny = x + dx, y + dy
        target = self.tile_at(nx, ny)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            return MoveResult.WON if self.can_exit() else MoveResult.BLOCKED
        if target == COIN:
            self.coins -= 1
        self.grid[y][x] = FLOOR
        self.grid[ny][nx] = PLAYER
        self.player = (nx, ny)
        self.moves += 1
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """Apply the action bound to ``keycode``."""
        action = key_action(keycode)
        if action is None:
            return MoveResult.IGNORED
        if action is Action.QUIT:
            return MoveResult.QUIT
        return self.move(*action.delta)