"""The playing field, the rules of a level and the game loop."""

from __future__ import annotations

import argparse
from typing import Any

from .interface import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP, Timer
from .piece import Piece, choose_random_piece_type, new_piece
from .well import Well

WIDTH = 10
HEIGHT = 18

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 25

WELL_X = 0
WELL_Y = 0

GRID_X = WELL_X + 1
GRID_Y = WELL_Y

PROMPT_X, PROMPT_Y = 0, 20
SCORE_X, SCORE_Y = 16, 8
ROWS_LEFT_X, ROWS_LEFT_Y = 16, 9
LEVEL_X, LEVEL_Y = 16, 10

EMPTY = " "
SOLID = "$"
PIECE_CHAR = "#"

SPAWN_X = 3
SPAWN_Y = 0

MAX_PIECES = 10000
MAX_STEPS = 10000

# Points awarded for clearing this many rows with a single piece.
CLEAR_SCORES = {1: 100, 2: 200, 3: 400, 4: 800, 5: 1600}


class Game:
    """A game of falling pieces drawn on a screen and steered from a keyboard."""

    def __init__(self, screen: Any, keyboard: Any, rng: Any = None) -> None:
        self.screen = screen
        self.keyboard = keyboard
        self.rng = rng
        self.well = Well(HEIGHT, WIDTH)
        self.level = 1
        self.rows_cleared = 0
        self.score = 0
        self.interval = 2000
        self.grid: list[list[str]] = []
        self.clear_board()

    def play(self) -> None:
        """Run levels until one is lost, prompting between them."""
        self.well.display(self.screen, WELL_X, WELL_Y)
        self.display_status()
        self.display_prompt("Press the Enter key to begin playing Chetyris!")
        self.keyboard.wait_for_enter()

        while True:
            self.interval = max(1000 - 100 * (self.level - 1), 100)
            if not self.play_one_level():
                break
            self.display_prompt("Good job!  Press the Enter key to start next level!")
            self.keyboard.wait_for_enter()
            self.level += 1
            self.rows_cleared = 0
            self.display_status()
            self.screen.refresh()

        self.display_prompt("Game Over!  Press the Enter key to exit!")
        self.keyboard.wait_for_enter()

    def play_one_level(self) -> bool:
        """Play on a fresh board; True if enough rows were cleared, False on game over."""
        self.clear_board()
        self.rows_cleared = 0
        for _ in range(MAX_PIECES):
            piece = self.get_new_piece()
            piece_x, piece_y = SPAWN_X, SPAWN_Y
            if self.check_collision(piece, piece_x, piece_y):
                return False

            space_pressed = False
            for _ in range(MAX_STEPS):
                self._redraw(piece, piece_x, piece_y)
                timer = Timer()
                while timer.elapsed() < self.interval and not space_pressed:
                    ch = self.keyboard.get_char_if_any()
                    if ch is None:
                        continue
                    down_pressed = False
                    if ch == " ":
                        space_pressed = True
                    elif ch == ARROW_LEFT:
                        if not self.check_collision(piece, piece_x - 1, piece_y):
                            piece_x -= 1
                    elif ch == ARROW_RIGHT:
                        if not self.check_collision(piece, piece_x + 1, piece_y):
                            piece_x += 1
                    elif ch == ARROW_UP:
                        piece.rotate_clockwise()
                        if self.check_collision(piece, piece_x, piece_y):
                            piece.rotate_counter_clockwise()
                    elif ch == ARROW_DOWN:
                        down_pressed = True
                    self._redraw(piece, piece_x, piece_y)
                    if down_pressed:
                        break

                if not self.check_collision(piece, piece_x, piece_y + 1):
                    piece_y += 1
                    continue

                self.solidify_piece(piece, piece_x, piece_y)
                cleared = self.remove_full_rows()
                self.score += CLEAR_SCORES.get(cleared, 0)
                self.rows_cleared += cleared
                self.display_status()
                self.screen.refresh()
                break

            self.display_grid()
            self.screen.refresh()

            if self.rows_cleared >= self.level * 5:
                self.rows_cleared = 0
                self.display_status()
                return True
        return False

    def _redraw(self, piece: Piece, piece_x: int, piece_y: int) -> None:
        self.display_grid()
        self.display_piece(piece, piece_x, piece_y)
        self.screen.refresh()

    def display_prompt(self, s: str) -> None:
        """Show s on the prompt line, replacing whatever was there."""
        self.screen.goto_xy(PROMPT_X, PROMPT_Y)
        self.screen.print_string_clear_line(s)
        self.screen.refresh()

    def display_status(self) -> None:
        """Show score, rows left to clear and level."""
        self.screen.goto_xy(SCORE_X, SCORE_Y)
        self.screen.print_string(f"Score: {self.score}")
        self.screen.goto_xy(ROWS_LEFT_X, ROWS_LEFT_Y)
        self.screen.print_string(f"Rows left: {self.level * 5 - self.rows_cleared}")
        self.screen.goto_xy(LEVEL_X, LEVEL_Y)
        self.screen.print_string(f"Level: {self.level}")

    def display_grid(self) -> None:
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                self.screen.goto_xy(x + GRID_X, y + GRID_Y)
                self.screen.print_char(cell)

    def display_piece(self, piece: Piece, x: int, y: int) -> None:
        for cell_x, cell_y in piece.cells():
            self.screen.goto_xy(cell_x + x + GRID_X, cell_y + y + GRID_Y)
            self.screen.print_char(PIECE_CHAR)

    def check_collision(self, piece: Piece, piece_x: int, piece_y: int) -> bool:
        """True if the piece at this position leaves the grid or overlaps a solid cell."""
        for cell_x, cell_y in piece.cells():
            x = cell_x + piece_x
            y = cell_y + piece_y
            if not (0 <= x < WIDTH and 0 <= y < HEIGHT) or self.grid[y][x] == SOLID:
                return True
        return False

    def remove_row(self, row: int) -> None:
        """Delete a row, moving every row above it down by one."""
        del self.grid[row]
        self.grid.insert(0, [EMPTY] * WIDTH)

    def remove_full_rows(self) -> int:
        """Remove every full row and return how many were removed."""
        cleared = 0
        for row in range(HEIGHT):
            if all(cell == SOLID for cell in self.grid[row]):
                self.remove_row(row)
                cleared += 1
        return cleared

    def clear_board(self) -> None:
        self.grid = [[EMPTY] * WIDTH for _ in range(HEIGHT)]

    def solidify_piece(self, piece: Piece, x: int, y: int) -> None:
        for cell_x, cell_y in piece.cells():
            self.grid[cell_y + y][cell_x + x] = SOLID

    def get_new_piece(self) -> Piece:
        return new_piece(choose_random_piece_type(self.rng))


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    import curses

    from .interface import Keyboard, Screen

    parser = argparse.ArgumentParser(prog="chetyris", description="Play Chetyris in the terminal.")
    parser.parse_args(argv)

    def _run(stdscr: Any) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen = Screen(stdscr, SCREEN_WIDTH, SCREEN_HEIGHT)
        keyboard = Keyboard(stdscr)
        Game(screen, keyboard).play()

    curses.wrapper(_run)
    return 0