"""Tests for the coverage check and the backtracking placement search."""

import logging

from stalemate.attacks import adjacent_squares
from stalemate.board import Board, PieceKind, Square
from stalemate.candidates import candidates_by_kind
from stalemate.search import (
    calculate_exclusion,
    in_check,
    is_stalemate,
    place_greedy,
    uncovered_squares,
)

K, Q, R, B, N = (
    PieceKind.KING, PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT,
)

# Black king b7; queen a5, king d7, bishop e5.
KING_B7 = Square(1, 1)
STALEMATE_B7 = {Q: [Square(3, 0)], K: [Square(1, 3)], B: [Square(3, 4)]}


class TestUncoveredSquares:
    def test_queen_then_king(self):
        remaining = uncovered_squares(KING_B7, {Q: [Square(3, 0)]})
        assert remaining == {Square(0, 1), Square(0, 2), Square(2, 2), Square(1, 1)}

        remaining = uncovered_squares(KING_B7, {Q: [Square(3, 0)], K: [Square(1, 3)]})
        assert remaining == {Square(0, 1), Square(1, 1)}

    def test_empty_placement(self):
        assert uncovered_squares(KING_B7, {}) == adjacent_squares(KING_B7)


class TestIsStalemate:
    def test_known_stalemate(self):
        assert is_stalemate(KING_B7, STALEMATE_B7)

    def test_two_queens_and_king(self):
        assert is_stalemate(KING_B7, {Q: [Square(3, 0), Square(2, 3)], K: [Square(1, 3)]})

    def test_escape_square_left(self):
        assert not is_stalemate(KING_B7, {Q: [Square(2, 3)], K: [Square(1, 3)]})

    def test_empty_placement(self):
        assert not is_stalemate(KING_B7, {})

    def test_knight_check_is_not_stalemate(self):
        placement = dict(STALEMATE_B7)
        placement[N] = [Square(3, 2)]
        assert not is_stalemate(KING_B7, placement)

    def test_covered_but_in_check(self):
        """King h1 boxed in by Ba8, Ba7 and Kg3, but Ba8 checks along the diagonal."""
        king = Square(7, 7)
        placement = {B: [Square(0, 0), Square(1, 0)], K: [Square(5, 6)]}
        assert uncovered_squares(king, placement) == {king}
        assert in_check(king, placement)
        assert not is_stalemate(king, placement)

    def test_repeatable(self):
        """Same answer every time, with or without a live board."""
        board = Board.from_placement(KING_B7, STALEMATE_B7)
        assert is_stalemate(KING_B7, STALEMATE_B7)
        assert is_stalemate(KING_B7, STALEMATE_B7)
        assert is_stalemate(KING_B7, STALEMATE_B7, board)


class TestCalculateExclusion:
    def test_adjacency_plus_placed(self):
        exclusion = calculate_exclusion(KING_B7, STALEMATE_B7)
        assert exclusion == adjacent_squares(KING_B7) | {
            Square(3, 0), Square(1, 3), Square(3, 4),
        }

    def test_no_pieces(self):
        assert calculate_exclusion(Square(0, 0), {}) == adjacent_squares(Square(0, 0))


def _search(king: Square, pieces: list[PieceKind]):
    board = Board(king)
    adjacency = adjacent_squares(king)
    exclusion = set(adjacency)
    result = {}
    candidates = candidates_by_kind(board, pieces, adjacency)
    found = place_greedy(board, pieces, 0, candidates, exclusion, result)
    return found, board, exclusion, result


class TestPlaceGreedy:
    def test_king_and_two_queens(self):
        """First depth-first success: Kd7, Qd8, then Qa5 after Qd6 fails."""
        found, board, exclusion, result = _search(KING_B7, [K, Q, Q])
        assert found
        assert result == {K: [Square(1, 3)], Q: [Square(0, 3), Square(3, 0)]}
        assert board.occupied() == {
            Square(0, 3): Q, Square(1, 3): K, Square(3, 0): Q,
        }
        assert {Square(0, 3), Square(1, 3), Square(3, 0)} <= exclusion

    def test_stops_once_stalemated(self):
        found, _, _, result = _search(KING_B7, [K, Q, Q, R, R])
        assert found
        assert R not in result

    def test_king_queen_bishop(self):
        found, _, _, result = _search(KING_B7, [K, Q, B])
        assert found
        assert is_stalemate(KING_B7, result)

    def test_failure_restores_state(self):
        """A lone knight cannot cover b7's neighbourhood; nothing is left behind."""
        found, board, exclusion, result = _search(KING_B7, [N])
        assert not found
        assert result == {}
        assert board.occupied() == {}
        assert exclusion == adjacent_squares(KING_B7)

    def test_no_pieces(self):
        found, _, _, result = _search(KING_B7, [])
        assert not found
        assert result == {}

    def test_logs_progress(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="stalemate.search"):
            found, _, _, _ = _search(KING_B7, [K, Q, Q])
        assert found
        assert "KING on d7" in caplog.text
        assert "backtrack QUEEN from" in caplog.text
