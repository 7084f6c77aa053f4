"""Terminal output, keyboard input and timing for the game."""

from __future__ import annotations

import curses
import time
from typing import Any

ARROW_UP = "8"
ARROW_DOWN = "2"
ARROW_LEFT = "4"
ARROW_RIGHT = "6"

_LETTER_KEYS = {
    ord("a"): ARROW_LEFT,
    ord("d"): ARROW_RIGHT,
    ord("w"): ARROW_UP,
    ord("s"): ARROW_DOWN,
}

_SCAN_CODES = {
    ord("K"): ARROW_LEFT,
    ord("M"): ARROW_RIGHT,
    ord("H"): ARROW_UP,
    ord("P"): ARROW_DOWN,
}

_ENTER_KEYS = (ord("\n"), ord("\r"))


def translate_key(code: int) -> str:
    """Map a curses key code to a game character; arrows and WASD become ARROW_*."""
    arrows = {
        curses.KEY_LEFT: ARROW_LEFT,
        curses.KEY_RIGHT: ARROW_RIGHT,
        curses.KEY_UP: ARROW_UP,
        curses.KEY_DOWN: ARROW_DOWN,
    }
    if code in arrows:
        return arrows[code]
    if code in _LETTER_KEYS:
        return _LETTER_KEYS[code]
    return chr(code)


def translate_scan_code(code: int) -> str:
    """Map the second byte of a console arrow-key sequence to a game character."""
    return _SCAN_CODES.get(code, "?")


class Screen:
    """A fixed-size drawing surface over a curses-like window."""

    def __init__(self, window: Any, width: int, height: int) -> None:
        self.window = window
        self.width = width
        self.height = height

    def clear(self) -> None:
        self.window.clear()

    def goto_xy(self, x: int, y: int) -> None:
        """Move the cursor; positions outside the screen are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.window.move(y, x)

    def print_char(self, ch: str) -> None:
        self.window.addch(ch)

    def print_string(self, s: str) -> None:
        self.window.addstr(s)

    def print_string_clear_line(self, s: str) -> None:
        """Write s, cut to the screen width, and blank the rest of the line."""
        self.print_string(s[: self.width])
        self.window.clrtoeol()

    def refresh(self) -> None:
        self.goto_xy(self.width - 1, self.height - 1)
        self.window.refresh()


class Keyboard:
    """Non-blocking key reading from a curses-like window."""

    def __init__(self, window: Any) -> None:
        self.window = window
        window.nodelay(True)
        window.keypad(True)

    def get_char_if_any(self) -> str | None:
        """Return the next typed key translated for the game, or None if none is waiting."""
        code = self.window.getch()
        if code == curses.ERR:
            return None
        return translate_key(code)

    def wait_for_enter(self) -> None:
        """Block until Enter is pressed, discarding other keys."""
        self.window.nodelay(False)
        try:
            while self.window.getch() not in _ENTER_KEYS:
                pass
        finally:
            self.window.nodelay(True)

    def discard_pending_keys(self) -> None:
        while self.get_char_if_any() is not None:
            pass


class Timer:
    """Measures milliseconds since it was created or last started."""

    def __init__(self) -> None:
        self._started = 0.0
        self.start()

    def start(self) -> None:
        self._started = time.perf_counter()

    def elapsed(self) -> float:
        return (time.perf_counter() - self._started) * 1000.0