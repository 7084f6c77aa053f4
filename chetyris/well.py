"""The walls and floor around the playing grid."""

from __future__ import annotations

from typing import Any

WALL_CHAR = "@"


class Well:
    """A well holding a grid of the given rows and columns, one cell thick on each side."""

    def __init__(self, rows: int, cols: int) -> None:
        self.width = cols + 2
        self.height = rows + 1

    def display(self, screen: Any, x: int, y: int) -> None:
        """Draw both walls and the floor with the top-left corner at (x, y)."""
        for row in range(self.height):
            screen.goto_xy(x, row + y)
            screen.print_char(WALL_CHAR)
            screen.goto_xy(self.width - 1 + x, row + y)
            screen.print_char(WALL_CHAR)
        for col in range(self.width):
            screen.goto_xy(col + x, self.height - 1 + y)
            screen.print_char(WALL_CHAR)