"""A falling-block puzzle game: pieces, board, game rules and a pygame window."""

__version__ = "0.1.0"