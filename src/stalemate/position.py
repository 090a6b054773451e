"""Conversion of a placement into a python-chess position.

The opponent king becomes a black king, every placed piece a white piece,
and black is to move.
"""

import chess

from stalemate.board import Placement, Square


def to_chess_board(king_square: Square, placement: Placement) -> chess.Board:
    board = chess.Board(None)
    board.set_piece_at(king_square.chess_square, chess.Piece(chess.KING, chess.BLACK))
    for kind, squares in placement.items():
        for sq in squares:
            board.set_piece_at(sq.chess_square, chess.Piece(kind.chess_piece_type, chess.WHITE))
    board.turn = chess.BLACK
    return board


def to_fen(king_square: Square, placement: Placement) -> str:
    return to_chess_board(king_square, placement).fen()


def render_ascii(king_square: Square, placement: Placement) -> str:
    """Eight lines, rank 8 first; '.' for empty, 'k' for the opponent king."""
    return str(to_chess_board(king_square, placement))


def is_chess_stalemate(king_square: Square, placement: Placement) -> bool:
    """Independent check with python-chess: black to move, not in check, no legal move."""
    return to_chess_board(king_square, placement).is_stalemate()


def placement_names(placement: Placement) -> dict[str, list[str]]:
    """{'Q': ['d8', 'a5'], ...} for JSON output."""
    return {kind.symbol: [sq.name for sq in squares] for kind, squares in placement.items()}
