# sollong

A small top-down puzzle game. You walk a player around a walled map,
pick up every coin, and then step onto the exit. The move counter is
drawn in the window and printed to the terminal after each step.

## Installing

```
pip install .
```

The game window uses pygame. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
sollong path/to/level.ber
```

Exactly one argument is accepted: the path to a map file ending in `.ber`.
With any other number of arguments the command writes `Error` to standard
error and exits with status 1.

Controls:

| Key                  | Action     |
|----------------------|------------|
| W / Up arrow         | move up    |
| S / Down arrow       | move down  |
| A / Left arrow       | move left  |
| D / Right arrow      | move right |
| Esc, or close window | quit       |

Walls block the player. While coins remain, the exit is closed and blocks
the player too. Once every coin is collected the exit is drawn open;
walking onto it prints `You win!` and ends the game. `Moves: N` is printed
when the game starts and after every successful step.

## Map format

A map is plain text made only of these characters:

| Char | Meaning             |
|------|---------------------|
| `1`  | wall                |
| `0`  | floor               |
| `P`  | player start (one)  |
| `E`  | exit (one)          |
| `C`  | coin (at least one) |

Example:

```
1111111111
1P0C000001
1000011001
1C0000E0C1
1111111111
```

A map is rejected with `Error` and a short reason on standard error, and
exit status 1, when any of the following is true:

- the path is a directory, or the name does not end in `.ber`
- the file cannot be opened or is empty
- it has empty lines, or a leading or trailing newline
- the rows are not all the same length
- it is not closed by walls on every side
- it holds other characters, or not exactly one `P`, not exactly one `E`,
  or no `C`
- some coin cannot be reached without passing through the exit, or the
  exit cannot be reached

## Images

Tile images are loaded from `assets/wall.xpm`, `assets/floor.xpm`,
`assets/player.xpm`, `assets/exit.xpm`, `assets/exit_open.xpm` and
`assets/coin.xpm`, relative to the current directory. These files are not
shipped with the package. An image that cannot be loaded is simply not
drawn, so without them the window shows only the move counter.
`Renderer` takes an `asset_paths` mapping to point at other files.

## Using it as a library

```python
from sollong.maps import load_map, MapError
from sollong.game import Game, MoveResult

level = load_map("levels/first.ber")   # raises MapError on a bad map
game = Game.from_level(level)
result = game.move(1, 0)               # MoveResult.MOVED, BLOCKED or WON
print(game.moves, game.coins, game.can_exit())
```

- `sollong.maps`: `load_map`, `read_file`, `parse_map`,
  `has_no_empty_lines`, `is_valid_extension`, `validate_not_directory`,
  `validate_extension`, `validate_rectangular`, `validate_walls`,
  `validate_elements`, `locate_elements` and `validate_path`. Every check
  raises `MapError`. `Level` holds the rows, the player and exit positions
  and the coin count.
- `sollong.game`: `Game` with `from_level`, `move`, `handle_key`,
  `tile_at` and `can_exit`; `key_action` maps a key code to an `Action`;
  `MoveResult` is `BLOCKED`, `MOVED`, `WON`, `QUIT` or `IGNORED`. Stepping
  onto the open exit returns `WON` and leaves the state unchanged.
- `sollong.render`: `Renderer` draws a game onto a pygame surface
  (`load_images`, `draw`, `window_size`); `tile_layers` and
  `move_count_text` tell what is drawn.
- `sollong.cli`: `main(argv)` is the `sollong` command; `run(game)` opens
  the window and plays a game until it is won or closed.

`sollong.strings`, `sollong.chars`, `sollong.memory`, `sollong.output` and
`sollong.lines` (`LineReader`, which reads a stream line by line in
fixed-size chunks) are small text and buffer utilities.