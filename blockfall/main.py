"""Command that starts a game in a window."""

from __future__ import annotations

from collections.abc import Sequence

from .display import Display
from .tetris import TetrisGame


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    game = TetrisGame()
    print("Starting game ...")
    with Display(game) as display:
        display.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())