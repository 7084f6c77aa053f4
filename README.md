# chetyris

A falling-block puzzle game that runs in your terminal. Pieces drop into a
well 10 columns wide and 18 rows deep. Fill a row completely and it is
cleared. Clear enough rows and you move up a level, where pieces fall faster.

Besides the seven familiar tetromino shapes (I, L, J, T, O, S, Z), the
random supply of pieces also includes a vapor bomb, a foam bomb and a crazy
shape. Every kind is equally likely.

## Installing

```
pip install .
```

The game draws with Python's `curses` module, so it needs a Python build
that provides it (the usual case on Linux and macOS).

## Playing

```
chetyris
```

Press Enter to start. Then use these keys:

| Key                  | Action                                        |
|----------------------|-----------------------------------------------|
| Left arrow or `a`    | move the piece left                           |
| Right arrow or `d`   | move the piece right                          |
| Up arrow or `w`      | rotate the piece clockwise                    |
| Down arrow or `s`    | move the piece down one row right away        |
| Space                | let the piece fall without waiting each tick  |

A move or rotation that would push the piece out of the well or into a
settled block is ignored.

## Rules

- Level *n* ends once you have cleared `5 × n` rows. The status panel shows
  the score, how many rows are still left and the level.
- A piece falls one row per tick. The tick lasts 1000 ms on level 1 and gets
  100 ms shorter on each later level, down to a floor of 100 ms.
- When a piece cannot fall further it settles. Clearing rows with a single
  piece scores 100 for one row, 200 for two, 400 for three and 800 for four.
- Each new level starts on an empty board.
- The game ends when a new piece has no room to appear at the top of the
  well. Press Enter to exit.

## Using it as a library

The game logic does not depend on a real terminal.

- `chetyris.game.Game(screen, keyboard, rng=None)` runs the game. `screen`
  needs `goto_xy`, `print_char`, `print_string`, `print_string_clear_line`
  and `refresh`; `keyboard` needs `get_char_if_any` and `wait_for_enter`;
  `rng`, if given, needs `randrange`. Its methods such as
  `check_collision`, `solidify_piece`, `remove_full_rows` and `clear_board`
  work on `Game.grid`, a list of rows of `" "` (empty) and `"$"` (settled).
  `chetyris.game.main()` starts the game in the terminal.
- `chetyris.piece` provides `PieceType`, the piece classes, their
  `rotate_clockwise`, `rotate_counter_clockwise` and `cells`, plus
  `new_piece(piece_type)` and `choose_random_piece_type(rng=None)`.
- `chetyris.interface` provides the curses-backed `Screen` and `Keyboard`,
  a millisecond `Timer`, and `translate_key` / `translate_scan_code` for
  turning key codes into game moves.
- `chetyris.well.Well` draws the walls and floor around the grid.

## Running the tests

```
pip install ".[test]"
pytest
```