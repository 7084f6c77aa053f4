import random
from itertools import combinations

import pytest

from chetyris.piece import (
    CrazyShape,
    FoamBomb,
    IPiece,
    JPiece,
    LPiece,
    OPiece,
    Piece,
    PieceType,
    SPiece,
    TPiece,
    VaporBomb,
    ZPiece,
    choose_random_piece_type,
    new_piece,
)

ALL_CLASSES = [IPiece, LPiece, JPiece, TPiece, OPiece, SPiece, ZPiece, VaporBomb, FoamBomb, CrazyShape]


def _distances(cells):
    return sorted((ax - bx) ** 2 + (ay - by) ** 2 for (ax, ay), (bx, by) in combinations(cells, 2))


def test_piece_type_order_matches_enum():
    assert [t.name for t in PieceType] == [
        "I", "L", "J", "T", "O", "S", "Z", "VAPOR", "FOAM", "CRAZY",
    ]
    assert [type(new_piece(t)).__name__ for t in PieceType] == [
        "IPiece", "LPiece", "JPiece", "TPiece", "OPiece",
        "SPiece", "ZPiece", "VaporBomb", "FoamBomb", "CrazyShape",
    ]
    assert type(new_piece(0)) is IPiece
    assert type(new_piece(9)) is CrazyShape


@pytest.mark.parametrize("piece_type, cls", list(zip(PieceType, ALL_CLASSES)))
def test_new_piece_builds_matching_class(piece_type, cls):
    piece = new_piece(piece_type)
    assert type(piece) is cls
    assert piece.orientation == 0
    assert piece.cells() == cls.START_CELLS


def test_new_piece_accepts_plain_int():
    piece = new_piece(4)
    assert type(piece) is OPiece
    assert piece.cells() == ((0, 0), (1, 0), (0, 1), (1, 1))


def test_new_piece_rejects_unknown_type():
    with pytest.raises(ValueError):
        new_piece(10)


def test_base_piece_has_no_shape():
    with pytest.raises(TypeError):
        Piece()


def test_start_cells_from_source():
    assert IPiece().cells() == ((0, 1), (1, 1), (2, 1), (3, 1))
    assert JPiece().cells() == ((1, 1), (2, 1), (3, 1), (3, 2))


def test_i_piece_rotates_to_vertical():
    piece = IPiece()
    piece.rotate_clockwise()
    assert piece.cells() == ((1, 0), (1, 1), (1, 2), (1, 3))
    assert piece.orientation == 1


@pytest.mark.parametrize("piece_type", list(PieceType))
@pytest.mark.parametrize("turns", [1, 2, 3, 4, 7])
def test_counter_clockwise_undoes_clockwise(piece_type, turns):
    piece = new_piece(piece_type)
    for _ in range(turns):
        before = piece.cells()
        orientation = piece.orientation
        piece.rotate_clockwise()
        piece.rotate_counter_clockwise()
        assert piece.cells() == before
        assert piece.orientation == orientation
        piece.rotate_clockwise()


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_clockwise_undoes_counter_clockwise(piece_type):
    piece = new_piece(piece_type)
    start = piece.cells()
    piece.rotate_counter_clockwise()
    piece.rotate_clockwise()
    assert piece.cells() == start
    assert piece.orientation == 0


@pytest.mark.parametrize("cls", [TPiece, OPiece, FoamBomb, CrazyShape])
def test_four_turns_with_constant_shift_restore_cells(cls):
    piece = cls()
    for _ in range(4):
        piece.rotate_clockwise()
    assert piece.cells() == cls.START_CELLS
    assert piece.orientation == 0


def test_i_piece_four_turns_restore_occupied_set():
    piece = IPiece()
    for _ in range(4):
        piece.rotate_clockwise()
    assert set(piece.cells()) == set(IPiece.START_CELLS)


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_rotation_preserves_shape(piece_type):
    piece = new_piece(piece_type)
    original = _distances(piece.cells())
    for _ in range(5):
        piece.rotate_clockwise()
        assert len(piece.cells()) == 4
        assert _distances(piece.cells()) == original


def test_vapor_bomb_does_not_rotate():
    piece = VaporBomb()
    piece.rotate_clockwise()
    piece.rotate_clockwise()
    assert piece.cells() == VaporBomb.START_CELLS
    piece.rotate_counter_clockwise()
    assert piece.cells() == VaporBomb.START_CELLS
    assert piece.orientation == 0


def test_random_choice_covers_all_types():
    rng = random.Random(1234)
    chosen = {choose_random_piece_type(rng) for _ in range(2000)}
    assert chosen == set(PieceType)


def test_random_choice_uses_given_source():
    class Fixed:
        def randrange(self, stop):
            assert stop == len(PieceType)
            return 7

    assert choose_random_piece_type(Fixed()) is PieceType.VAPOR


def test_random_choice_without_source_is_a_piece_type():
    assert choose_random_piece_type() in set(PieceType)