"""A falling-block puzzle game for the terminal: pieces, well, game rules and curses interface."""

__version__ = "1.0.0"
__all__ = ["game", "interface", "piece", "well"]