# blockfall

A small falling-block puzzle game. Pieces drop into a well that is 10 cells
wide and 20 cells high. A full row is cleared. The game runs in an
800 × 800 pygame window, with a white grid drawn over the board.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Play

```
blockfall
```

The command prints `Starting game ...`, opens the window and runs until you
close it.

Controls:

| Key            | Action                         |
|----------------|--------------------------------|
| W / Up         | Rotate the piece               |
| A / Left       | Move left                      |
| D / Right      | Move right                     |
| S / Down       | Move down one row              |
| Close window   | Quit                           |

The game runs at about 60 frames a second. A piece drops one row on its own
about once a second. When a piece cannot go lower, it stays where it is, any
full rows are cleared, and a new random piece appears at the top centre. A
rotation that would push the piece past a side wall slides it back inside.

## What the game does not do

- Moving left, right or down checks only the walls and the floor. It does not
  check pieces that have already landed, so the falling piece can pass
  through them. Rotation does not check landed pieces either.
- There is no game over. New pieces keep appearing at the top.
- No score is kept or shown. `TetrisGame.score` exists but is never changed.
  The area to the right of the board is left empty.

## Using the pieces from code

The game logic does not depend on the window:

- `blockfall.shapes` holds the board and window sizes, the piece kinds
  (`Shape`, where `Shape.EMPTY` marks a free cell), the cell position type
  `Coord`, the rotations of each piece (`shape_offsets(shape, position)`) and
  `random_shape(rng=None)`.
- `blockfall.board.Board` is the playing field. It provides `get`, `put`,
  `fill` and `show`. `get` and `put` raise `IndexError` outside the board.
  Iterating over a board yields its rows from top to bottom.
  `blockfall.board.is_out_of_bound` treats positions above the top edge as
  inside.
- `blockfall.tetris` holds the game rules. It provides `TetrisGame`,
  `spawn_new_shape`, `compute_pixels_shape`, `move_shape`,
  `can_shape_go_down`, `is_shape_out_of_bound`,
  `update_shapes_until_in_bound`, `affect_shape_to_board`,
  `clear_shape_from_board`, `erase_full_line` and `check_for_full_lines`.
  `check_for_full_lines` returns the number of rows it cleared.
- `blockfall.display.GameSession` runs a game one frame at a time.
  `handle(action)` takes an `Action` (`ROTATE`, `DOWN`, `LEFT`, `RIGHT`,
  `QUIT`), and `tick()` advances one frame. Pass a `random.Random` to make the
  pieces reproducible.
- `blockfall.display.Display` draws a game in a window and runs the main
  loop. Use it as a context manager around `play()`.