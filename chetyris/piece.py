"""Falling pieces: their shapes, rotations and random selection."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import ClassVar, Protocol

Cell = tuple[int, int]


class PieceType(IntEnum):
    """The kinds of piece, in the order the random chooser numbers them."""

    I = 0
    L = 1
    J = 2
    T = 3
    O = 4
    S = 5
    Z = 6
    VAPOR = 7
    FOAM = 8
    CRAZY = 9


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class Piece:
    """A four-cell shape whose cells are offsets from the piece's position.

    Each subclass defines its starting cells and, for every orientation,
    the shift applied after a clockwise quarter turn about the origin.
    """

    START_CELLS: ClassVar[tuple[Cell, ...]] = ()
    SHIFTS: ClassVar[tuple[Cell, ...]] = ()

    def __init__(self) -> None:
        if len(self.START_CELLS) != 4 or len(self.SHIFTS) != 4:
            raise TypeError(f"{type(self).__name__} does not define a shape")
        self._cells: list[Cell] = list(self.START_CELLS)
        self.orientation = 0

    def cells(self) -> tuple[Cell, ...]:
        """The four (x, y) offsets the piece currently occupies."""
        return tuple(self._cells)

    def rotate_clockwise(self) -> None:
        shift_x, shift_y = self.SHIFTS[self.orientation]
        self._cells = [(-y + shift_x, x + shift_y) for x, y in self._cells]
        self.orientation = (self.orientation + 1) % 4

    def rotate_counter_clockwise(self) -> None:
        self.orientation = (self.orientation - 1) % 4
        shift_x, shift_y = self.SHIFTS[self.orientation]
        self._cells = [(y - shift_y, -(x - shift_x)) for x, y in self._cells]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cells={self.cells()!r}, orientation={self.orientation})"


class IPiece(Piece):
    START_CELLS = ((0, 1), (1, 1), (2, 1), (3, 1))
    SHIFTS = ((2, 0), (3, 0), (2, 0), (3, 0))


class LPiece(Piece):
    START_CELLS = ((0, 1), (0, 2), (1, 1), (2, 1))
    SHIFTS = ((3, 0), (2, 0), (3, 1), (3, 0))


class JPiece(Piece):
    START_CELLS = ((1, 1), (2, 1), (3, 1), (3, 2))
    SHIFTS = ((3, 0), (4, 0), (3, -1), (3, 0))


class TPiece(Piece):
    START_CELLS = ((0, 1), (1, 0), (1, 1), (2, 1))
    SHIFTS = ((2, 0), (2, 0), (2, 0), (2, 0))


class OPiece(Piece):
    START_CELLS = ((0, 0), (1, 0), (0, 1), (1, 1))
    SHIFTS = ((1, 0), (1, 0), (1, 0), (1, 0))


class SPiece(Piece):
    START_CELLS = ((0, 2), (1, 1), (1, 2), (2, 1))
    SHIFTS = ((3, 0), (2, 0), (3, 0), (2, 0))


class ZPiece(Piece):
    START_CELLS = ((0, 1), (1, 1), (1, 2), (2, 2))
    SHIFTS = ((3, 0), (2, 0), (3, 0), (2, 0))


class VaporBomb(Piece):
    """A two-cell bomb that never rotates."""

    START_CELLS = ((1, 0), (1, 0), (2, 0), (2, 0))
    SHIFTS = ((1, 0), (1, 0), (2, 0), (2, 0))

    def rotate_clockwise(self) -> None:
        pass

    def rotate_counter_clockwise(self) -> None:
        pass


class FoamBomb(Piece):
    """A single-cell bomb."""

    START_CELLS = ((1, 1), (1, 1), (1, 1), (1, 1))
    SHIFTS = ((2, 0), (2, 0), (2, 0), (2, 0))


class CrazyShape(Piece):
    START_CELLS = ((0, 0), (1, 1), (2, 1), (3, 0))
    SHIFTS = ((3, 0), (3, 0), (3, 0), (3, 0))


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.I: IPiece,
    PieceType.L: LPiece,
    PieceType.J: JPiece,
    PieceType.T: TPiece,
    PieceType.O: OPiece,
    PieceType.S: SPiece,
    PieceType.Z: ZPiece,
    PieceType.VAPOR: VaporBomb,
    PieceType.FOAM: FoamBomb,
    PieceType.CRAZY: CrazyShape,
}


def choose_random_piece_type(rng: _RandRange | None = None) -> PieceType:
    """Pick a piece type uniformly at random."""
    source = rng if rng is not None else random
    return PieceType(source.randrange(len(PieceType)))


def new_piece(piece_type: PieceType | int) -> Piece:
    """Create a fresh piece of the given type in its starting orientation."""
    return _PIECE_CLASSES[PieceType(piece_type)]()