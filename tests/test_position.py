"""Tests for the python-chess position bridge."""

import chess

from stalemate.board import PieceKind, Square
from stalemate.position import (
    is_chess_stalemate,
    placement_names,
    render_ascii,
    to_chess_board,
    to_fen,
)
from stalemate.solver import calculate_stalemate

K, Q, B = PieceKind.KING, PieceKind.QUEEN, PieceKind.BISHOP

KING_B7 = Square(1, 1)
STALEMATE_B7 = {Q: [Square(3, 0)], K: [Square(1, 3)], B: [Square(3, 4)]}


class TestToChessBoard:
    def test_pieces_and_turn(self):
        board = to_chess_board(KING_B7, STALEMATE_B7)
        assert board.piece_at(chess.B7) == chess.Piece(chess.KING, chess.BLACK)
        assert board.piece_at(chess.A5) == chess.Piece(chess.QUEEN, chess.WHITE)
        assert board.piece_at(chess.D7) == chess.Piece(chess.KING, chess.WHITE)
        assert board.piece_at(chess.E5) == chess.Piece(chess.BISHOP, chess.WHITE)
        assert board.turn == chess.BLACK

    def test_fen(self):
        assert to_fen(KING_B7, STALEMATE_B7) == "8/1k1K4/8/Q3B3/8/8/8/8 b - - 0 1"

    def test_render_ascii(self):
        lines = render_ascii(KING_B7, STALEMATE_B7).splitlines()
        assert len(lines) == 8
        assert lines[1] == ". k . K . . . ."
        assert lines[3] == "Q . . . B . . ."


class TestChessStalemate:
    def test_known_stalemate(self):
        assert is_chess_stalemate(KING_B7, STALEMATE_B7)

    def test_escape_square(self):
        assert not is_chess_stalemate(KING_B7, {Q: [Square(2, 3)], K: [Square(1, 3)]})

    def test_solver_output_is_real_stalemate(self):
        placement = calculate_stalemate(KING_B7, [K, Q, Q])
        assert is_chess_stalemate(KING_B7, placement)


def test_placement_names():
    assert placement_names(STALEMATE_B7) == {"Q": ["a5"], "K": ["d7"], "B": ["e5"]}
