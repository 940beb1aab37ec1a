"""Window, drawing and the main game loop."""

from __future__ import annotations

import random
from enum import Enum, auto
from types import TracebackType
from typing import NamedTuple

import pygame

from .shapes import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_COUNT_DOWN_LIMIT,
    DISPLAY_HEIGHT,
    DISPLAY_WIDTH,
    FPS,
    MENU_BAR_SIZE,
    POSITION_PER_SHAPES,
    Coord,
    Shape,
    random_shape,
)
from .tetris import (
    Pixels,
    TetrisGame,
    affect_shape_to_board,
    can_shape_go_down,
    check_for_full_lines,
    clear_shape_from_board,
    compute_pixels_shape,
    is_shape_out_of_bound,
    move_shape,
    spawn_new_shape,
    update_shapes_until_in_bound,
)

WINDOW_TITLE = "Blockfall"


class Color(NamedTuple):
    """An RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


RED = Color(255, 0, 0, 255)
YELLOW = Color(255, 255, 0, 255)
ORANGE = Color(255, 128, 0, 255)
BLUE = Color(0, 0, 255, 255)
CYAN = Color(43, 255, 255, 255)
PURPLE = Color(127, 0, 255, 255)
GREEN = Color(0, 128, 0, 255)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)

SHAPE_COLORS: dict[Shape, Color] = {
    Shape.EMPTY: BLACK,
    Shape.SQUARE: YELLOW,
    Shape.RECTANGLE: CYAN,
    Shape.S_SHAPE: GREEN,
    Shape.Z_SHAPE: RED,
    Shape.L_SHAPE: ORANGE,
    Shape.J_SHAPE: BLUE,
    Shape.T_SHAPE: PURPLE,
}


class Action(Enum):
    """A player command."""

    ROTATE = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()


_KEY_ACTIONS: dict[int, Action] = {
    pygame.K_w: Action.ROTATE,
    pygame.K_UP: Action.ROTATE,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
}

_SIDE_MOVES: dict[Action, tuple[int, int]] = {
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


class GameSession:
    """The falling piece and its timer, driving one game frame by frame."""

    def __init__(self, game: TetrisGame, rng: random.Random | None = None) -> None:
        self.game = game
        self.rng = rng
        self.count_down = 0
        self.count_down_limit = DEFAULT_COUNT_DOWN_LIMIT
        self.game.running = True
        self.game.board.fill(Shape.EMPTY)
        self.shape = random_shape(rng)
        self.position = 0
        self.pixels: Pixels = spawn_new_shape(self.shape, self.position)
        self._placed: Pixels = self.pixels
        affect_shape_to_board(self.shape, self.pixels, self.game.board)

    def handle(self, action: Action) -> None:
        """Apply one player command to the falling piece."""
        if action is Action.QUIT:
            self.game.running = False
        elif action is Action.ROTATE:
            self.position = (self.position + 1) % POSITION_PER_SHAPES
            rotated = compute_pixels_shape(self.shape, self.position, self.pixels[0])
            self.pixels = update_shapes_until_in_bound(rotated)
        else:
            dx, dy = _SIDE_MOVES[action]
            if not is_shape_out_of_bound(self.pixels, dx, dy):
                self.pixels = move_shape(self.pixels, dx, dy)

    def tick(self) -> None:
        """Advance the game by one frame."""
        board = self.game.board
        if not can_shape_go_down(self._placed, board):
            self.shape = random_shape(self.rng)
            self.position = 0
            self.pixels = spawn_new_shape(self.shape, self.position)
            check_for_full_lines(board)
        else:
            clear_shape_from_board(self._placed, board)
            origin = self.pixels[0]
            if self.count_down != 0 and self.count_down % self.count_down_limit == 0:
                self.count_down = 0
                origin = Coord(origin.x, origin.y + 1)
            else:
                self.count_down += 1
            self.pixels = compute_pixels_shape(self.shape, self.position, origin)
        self._placed = self.pixels
        affect_shape_to_board(self.shape, self.pixels, board)


class Display:
    """A pygame window that shows and runs a game."""

    def __init__(self, game: TetrisGame) -> None:
        self.game = game
        self._surface: pygame.Surface | None = None

    @property
    def surface(self) -> pygame.Surface:
        """The window surface; raises RuntimeError while the window is closed."""
        if self._surface is None:
            raise RuntimeError("display is not open")
        return self._surface

    def open(self) -> None:
        """Create the window and paint it black."""
        pygame.init()
        self._surface = pygame.display.set_mode((DISPLAY_WIDTH, DISPLAY_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clear()
        pygame.display.flip()

    def close(self) -> None:
        """Destroy the window and shut pygame down."""
        self._surface = None
        pygame.quit()

    def clear(self) -> None:
        """Fill the window with the background colour."""
        self.surface.fill(BLACK)

    def draw_grid(self) -> None:
        """Draw the white lines between the cells."""
        surface = self.surface
        menu_line_pos = DISPLAY_WIDTH - MENU_BAR_SIZE
        spacing_width = menu_line_pos // BOARD_WIDTH
        spacing_height = DISPLAY_HEIGHT // BOARD_HEIGHT
        for line in range(1, BOARD_HEIGHT):
            y = spacing_height * line
            pygame.draw.line(surface, WHITE, (0, y), (menu_line_pos, y))
        for line in range(1, BOARD_WIDTH + 1):
            x = spacing_width * line
            pygame.draw.line(surface, WHITE, (x, 0), (x, DISPLAY_HEIGHT))

    def draw_board(self) -> None:
        """Fill every cell with the colour of the shape it holds."""
        surface = self.surface
        menu_line_pos = DISPLAY_WIDTH - MENU_BAR_SIZE
        square_width = menu_line_pos // BOARD_WIDTH
        square_height = DISPLAY_HEIGHT // BOARD_HEIGHT
        for line, row in enumerate(self.game.board):
            for col, cell in enumerate(row):
                rect = pygame.Rect(
                    square_width * col, square_height * line, square_width, square_height
                )
                surface.fill(SHAPE_COLORS[cell], rect)

    def _actions(self) -> list[Action]:
        actions = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                actions.append(Action.QUIT)
            elif event.type == pygame.KEYDOWN and event.key in _KEY_ACTIONS:
                actions.append(_KEY_ACTIONS[event.key])
        return actions

    def play(self) -> None:
        """Run the game until the player closes the window."""
        session = GameSession(self.game)
        while self.game.running:
            for action in self._actions():
                session.handle(action)
            session.tick()
            self.clear()
            self.draw_board()
            self.draw_grid()
            pygame.display.flip()
            pygame.time.delay(1000 // FPS)

    def __enter__(self) -> Display:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()