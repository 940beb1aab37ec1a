"""Game rules: placing pieces, moving them, collisions and line clearing."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress
from dataclasses import dataclass, field

from .board import Board, is_out_of_bound
from .shapes import BOARD_HEIGHT, BOARD_WIDTH, Coord, Shape, shape_offsets

Pixels = tuple[Coord, ...]


@dataclass
class TetrisGame:
    """State of one game."""

    board: Board = field(default_factory=Board)
    running: bool = False
    score: int = 0


def compute_pixels_shape(shape: Shape, position: int, origin: Coord) -> Pixels:
    """Return the four pixels of a piece placed with its origin at ``origin``."""
    ox, oy = origin
    return tuple(Coord(ox + dx, oy + dy) for dx, dy in shape_offsets(shape, position))


def spawn_new_shape(shape: Shape, position: int) -> Pixels:
    """Return the pixels of a piece at its spawning place, top centre."""
    return compute_pixels_shape(shape, position, Coord(BOARD_WIDTH // 2 - 1, 0))


def affect_shape_to_board(shape: Shape, coords: Iterable[Coord], board: Board) -> None:
    """Write a piece onto the board; pixels outside the board are skipped."""
    for x, y in coords:
        with suppress(IndexError):
            board.put(x, y, shape)


def clear_shape_from_board(coords: Iterable[Coord], board: Board) -> None:
    """Empty the cells covered by a piece."""
    affect_shape_to_board(Shape.EMPTY, coords, board)


def get_colliding_pixels(coords: Iterable[Coord]) -> list[Coord]:
    """Return the lowest pixel of each column the piece covers."""
    deepest: dict[int, Coord] = {}
    for pixel in coords:
        current = deepest.get(pixel.x)
        if current is None or pixel.y > current.y:
            deepest[pixel.x] = pixel
    return list(deepest.values())


def can_shape_go_down(coords: Iterable[Coord], board: Board) -> bool:
    """Tell whether the piece can move one line down."""
    for x, y in get_colliding_pixels(coords):
        if y >= BOARD_HEIGHT - 1:
            return False
        try:
            if board.get(x, y + 1) != Shape.EMPTY:
                return False
        except IndexError:
            return False
    return True


def move_shape(coords: Iterable[Coord], dx: int, dy: int) -> Pixels:
    """Return the pixels shifted by (dx, dy)."""
    return tuple(Coord(x + dx, y + dy) for x, y in coords)


def is_shape_out_of_bound(coords: Iterable[Coord], dx: int, dy: int) -> bool:
    """Tell whether any pixel would leave the board after shifting by (dx, dy)."""
    return any(is_out_of_bound(x, y) for x, y in move_shape(coords, dx, dy))


def update_shapes_until_in_bound(coords: Iterable[Coord]) -> Pixels:
    """Slide a piece sideways, away from the nearer wall, until it fits.

    Raises ValueError when no sideways shift can bring it inside the board.
    """
    pixels = tuple(coords)
    for _ in range(BOARD_WIDTH + 1):
        if not is_shape_out_of_bound(pixels, 0, 0):
            return pixels
        step = 1 if pixels[0].x < BOARD_WIDTH // 2 else -1
        pixels = move_shape(pixels, step, 0)
    raise ValueError("shape cannot be brought inside the board")


def erase_full_line(board: Board, line: int) -> None:
    """Drop every line above ``line`` by one, emptying the top line."""
    if not 0 <= line < BOARD_HEIGHT:
        raise IndexError(f"line {line} is outside the board")
    for target in range(line, 0, -1):
        for col in range(BOARD_WIDTH):
            board.put(col, target, board.get(col, target - 1))
    for col in range(BOARD_WIDTH):
        board.put(col, 0, Shape.EMPTY)


def check_for_full_lines(board: Board) -> int:
    """Erase every line without an empty cell; return how many were erased."""
    erased = 0
    for line in range(BOARD_HEIGHT):
        if all(board.get(col, line) != Shape.EMPTY for col in range(BOARD_WIDTH)):
            erase_full_line(board, line)
            erased += 1
    return erased