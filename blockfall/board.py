"""The playing field: a fixed grid of cells, each holding a Shape."""

from __future__ import annotations

from collections.abc import Iterator

from .shapes import BOARD_HEIGHT, BOARD_WIDTH, Shape


def is_out_of_bound(col: int, line: int) -> bool:
    """Tell whether a position lies outside the board.

    Columns must be in [0, BOARD_WIDTH); lines only have a lower limit of
    minus infinity, so pixels above the top edge are not out of bound.
    """
    return not 0 <= col < BOARD_WIDTH or line >= BOARD_HEIGHT


class Board:
    """A BOARD_HEIGHT x BOARD_WIDTH grid of shapes."""

    def __init__(self, value: Shape = Shape.EMPTY) -> None:
        self._cells: list[list[Shape]] = []
        self.fill(value)

    def fill(self, value: Shape) -> None:
        """Set every cell to the same value."""
        value = Shape(value)
        self._cells = [[value] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]

    @staticmethod
    def _check(col: int, line: int) -> None:
        if not (0 <= col < BOARD_WIDTH and 0 <= line < BOARD_HEIGHT):
            raise IndexError(f"cell ({col}, {line}) is outside the board")

    def get(self, col: int, line: int) -> Shape:
        """Return the shape at a cell; raise IndexError outside the board."""
        self._check(col, line)
        return self._cells[line][col]

    def put(self, col: int, line: int, value: Shape) -> None:
        """Store a shape in a cell; raise IndexError outside the board."""
        self._check(col, line)
        self._cells[line][col] = Shape(value)

    def __iter__(self) -> Iterator[tuple[Shape, ...]]:
        """Yield the lines from top to bottom."""
        for row in self._cells:
            yield tuple(row)

    def __str__(self) -> str:
        lines = ("".join(f"{int(cell)} " for cell in row) for row in self._cells)
        return "\n".join(lines) + "\n"

    def show(self) -> None:
        """Print the grid as numbers, one line per row, then a blank line."""
        for row in self._cells:
            print("".join(f"{int(cell)} " for cell in row))
        print()