"""Loading and validating level maps."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from sollong.strings import split

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"
TILES = frozenset(WALL + FLOOR + PLAYER + EXIT + COIN)
MAP_EXTENSION = ".ber"

Position = tuple[int, int]


class MapError(Exception):
    """The map file is missing, unreadable or not a valid level."""


@dataclass
class Level:
    """A map's rows together with where its elements are."""

    rows: list[str]
    player: Position = (0, 0)
    exit: Optional[Position] = None
    coins: int = 0

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of the file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Failed to open map file") from exc
    return data.decode("latin-1")


def has_no_empty_lines(text: Optional[str]) -> bool:
    """True if ``text`` is non-empty and has no empty line, even at either end."""
    if not text:
        return False
    return not (text.startswith("\n") or text.endswith("\n") or "\n\n" in text)


def parse_map(text: str) -> list[str]:
    """Split map text into its rows, rejecting empty lines."""
    if not has_no_empty_lines(text):
        raise MapError("Map contains empty lines")
    return split(text, "\n")


def is_valid_extension(filename: str, ext: str) -> bool:
    """True if ``filename`` ends with ``ext``."""
    return len(filename) >= len(ext) and filename.endswith(ext)


def validate_not_directory(path: str | os.PathLike[str]) -> None:
    """Reject a path that names a directory."""
    if os.path.isdir(path):
        raise MapError("Map path is a directory")


def validate_extension(path: str | os.PathLike[str]) -> None:
    """Reject a file name that does not end in the map extension."""
    if not is_valid_extension(os.fspath(path), MAP_EXTENSION):
        raise MapError(f"Map file must end in {MAP_EXTENSION}")


def validate_rectangular(rows: list[str]) -> None:
    """Reject an empty map or rows of differing length."""
    if not rows or not rows[0]:
        raise MapError("Map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("Map is not rectangular")


def validate_walls(rows: list[str]) -> None:
    """Reject a map whose border is not made of walls."""
    if not rows:
        raise MapError("Map is empty")
    edges = rows[0] + rows[-1] + "".join(row[0] + row[-1] for row in rows)
    if any(tile != WALL for tile in edges):
        raise MapError("Map is not surrounded by walls")


def validate_elements(rows: list[str]) -> None:
    """Reject unknown tiles and wrong numbers of players, exits or coins."""
    counts: Counter[str] = Counter()
    for row in rows:
        for tile in row:
            if tile not in TILES:
                raise MapError(f"Unknown map tile {tile!r}")
            counts[tile] += 1
    if counts[PLAYER] != 1 or counts[EXIT] != 1 or counts[COIN] < 1:
        raise MapError("Map needs one player, one exit and at least one coin")


def locate_elements(rows: list[str]) -> Level:
    """Count the coins and find the player and the first exit."""
    level = Level(rows=rows)
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == COIN:
                level.coins += 1
            elif tile == PLAYER:
                level.player = (x, y)
            elif tile == EXIT and level.exit is None:
                level.exit = (x, y)
    return level


def _reachable(rows: list[str], start: Position, allow_exit: bool) -> set[Position]:
    """Cells reachable from ``start`` without crossing walls.

    When ``allow_exit`` is false the exit cannot be entered.
    """
    seen: set[Position] = set()
    stack = [start]
    height = len(rows)
    while stack:
        x, y = stack.pop()
        if (x, y) in seen:
            continue
        tile = rows[y][x]
        if tile == WALL or (tile == EXIT and not allow_exit):
            continue
        seen.add((x, y))
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if 0 <= ny < height and 0 <= nx < len(rows[ny]):
                stack.append((nx, ny))
    return seen


def validate_path(level: Level) -> None:
    """Reject a level where some coin or the exit cannot be reached.

    Coins must be reachable without passing through the exit.
    """
    if level.exit is None:
        raise MapError("Map has no exit")
    without_exit = _reachable(level.rows, level.player, allow_exit=False)
    for y, row in enumerate(level.rows):
        for x, tile in enumerate(row):
            if tile == COIN and (x, y) not in without_exit:
                raise MapError("A coin cannot be reached")
    if level.exit not in _reachable(level.rows, level.player, allow_exit=True):
        raise MapError("The exit cannot be reached")


def load_map(path: str | os.PathLike[str]) -> Level:
    """Read, validate and return the level stored at ``path``."""
    validate_not_directory(path)
    validate_extension(path)
    content = read_file(path)
    if not content:
        raise MapError("Failed to read map file")
    rows = parse_map(content)
    validate_rectangular(rows)
    validate_walls(rows)
    validate_elements(rows)
    level = locate_elements(rows)
    validate_path(level)
    return level