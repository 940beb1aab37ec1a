"""Game settings, piece kinds and the rotation table of every piece."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import NamedTuple

BOARD_WIDTH = 10
BOARD_HEIGHT = 20

DISPLAY_WIDTH = 800
DISPLAY_HEIGHT = 800
MENU_BAR_SIZE = 300

FPS = 60
DEFAULT_COUNT_DOWN_LIMIT = 60

PIXEL_PER_SHAPES = 4
POSITION_PER_SHAPES = 4
NUMBER_OF_SHAPES = 7


class Shape(IntEnum):
    """Kind of piece occupying a cell; EMPTY marks a free cell."""

    EMPTY = 0
    SQUARE = 1
    RECTANGLE = 2
    S_SHAPE = 3
    Z_SHAPE = 4
    L_SHAPE = 5
    J_SHAPE = 6
    T_SHAPE = 7
    ERROR = 8


class Coord(NamedTuple):
    """A cell position: x is the column, y is the line."""

    x: int
    y: int


# Offsets of the four pixels from the piece origin, flattened as x, y pairs.
# The first pair is always the origin itself.
_RAW_OFFSETS: dict[Shape, tuple[tuple[int, ...], ...]] = {
    Shape.EMPTY: ((0,) * 8,) * POSITION_PER_SHAPES,
    Shape.SQUARE: ((0, 0, 1, 0, 1, 1, 0, 1),) * POSITION_PER_SHAPES,
    Shape.RECTANGLE: (
        (0, 0, 1, 0, -1, 0, -2, 0),
        (0, 0, 0, -1, 0, 1, 0, 2),
        (0, 0, 1, 0, -1, 0, -2, 0),
        (0, 0, 0, -1, 0, 1, 0, 2),
    ),
    Shape.S_SHAPE: (
        (0, 0, 1, 0, 0, 1, -1, 1),
        (0, 0, -1, -1, -1, 0, 0, 1),
        (0, 0, 1, 0, 0, 1, -1, 1),
        (0, 0, -1, -1, -1, 0, 0, 1),
    ),
    Shape.Z_SHAPE: (
        (0, 0, -1, 0, 0, 1, 1, 1),
        (0, 0, 0, 1, 1, 0, 1, -1),
        (0, 0, -1, 0, 0, 1, 1, 1),
        (0, 0, 0, 1, 1, 0, 1, -1),
    ),
    Shape.L_SHAPE: (
        (0, 0, -1, 0, -1, 1, 1, 0),
        (0, 0, 0, -1, -1, -1, 0, 1),
        (0, 0, -1, 0, 1, 0, 1, -1),
        (0, 0, 0, -1, 0, 1, 1, 1),
    ),
    Shape.J_SHAPE: (
        (0, 0, -1, 0, 1, 1, 1, 0),
        (0, 0, 0, -1, -1, 1, 0, 1),
        (0, 0, -1, 0, 1, 0, -1, -1),
        (0, 0, 0, -1, 0, 1, 1, -1),
    ),
    Shape.T_SHAPE: (
        (0, 0, -1, 0, 1, 0, 0, 1),
        (0, 0, -1, 0, 0, 1, 0, -1),
        (0, 0, -1, 0, 1, 0, 0, -1),
        (0, 0, 1, 0, 0, 1, 0, -1),
    ),
}


def _pairs(flat: tuple[int, ...]) -> tuple[Coord, ...]:
    return tuple(Coord(x, y) for x, y in zip(flat[::2], flat[1::2]))


SHAPE_OFFSETS: dict[Shape, tuple[tuple[Coord, ...], ...]] = {
    shape: tuple(_pairs(position) for position in positions)
    for shape, positions in _RAW_OFFSETS.items()
}


def shape_offsets(shape: Shape | int, position: int) -> tuple[Coord, ...]:
    """Return the four pixel offsets of a piece in the given rotation."""
    kind = Shape(shape)
    if kind not in SHAPE_OFFSETS:
        raise ValueError(f"no geometry for shape {kind.name}")
    if not 0 <= position < POSITION_PER_SHAPES:
        raise ValueError(f"position must be in [0, {POSITION_PER_SHAPES}), got {position}")
    return SHAPE_OFFSETS[kind][position]


def random_shape(rng: random.Random | None = None) -> Shape:
    """Pick one of the seven real pieces at random."""
    source = random if rng is None else rng
    return Shape(source.randrange(NUMBER_OF_SHAPES) + 1)