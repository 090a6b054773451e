"""Parking for leftover pieces: safe squares that leave the king alone."""

import logging

from stalemate.attacks import adjacent_squares, attacked_squares
from stalemate.board import Board, PieceKind, Placement, Square, all_squares
from stalemate.search import is_stalemate

logger = logging.getLogger(__name__)


def not_attacking_king(board: Board, kind: PieceKind, square: Square) -> bool:
    """True when a piece on `square` attacks nothing around the king."""
    adjacency = adjacent_squares(board.king_square)
    return not (adjacency & attacked_squares(board, kind, square))


def place_remaining(
    board: Board,
    leftover: list[PieceKind],
    exclusion: set[Square],
    result: Placement,
) -> list[PieceKind]:
    """Put each leftover piece on the first safe square in row-major order.

    A square is safe when it is not excluded and the piece there would not
    attack the king's neighbourhood. If `result` already stalemates the
    king, squares that would block one of its rays are skipped as well.
    Placed squares join `exclusion`. Returns the pieces that found no square.
    """
    king_square = board.king_square
    keep_stalemate = is_stalemate(king_square, result, board)
    unplaced: list[PieceKind] = []

    for kind in leftover:
        for sq in all_squares():
            if sq in exclusion or not not_attacking_king(board, kind, sq):
                continue
            board.place(kind, sq)
            result.setdefault(kind, []).append(sq)
            if keep_stalemate and not is_stalemate(king_square, result, board):
                board.remove(sq)
                result[kind].pop()
                if not result[kind]:
                    del result[kind]
                continue
            exclusion.add(sq)
            break
        else:
            logger.warning("No safe square left for %s", kind.name)
            unplaced.append(kind)

    return unplaced
