"""Greedy candidate squares: where each piece kind takes the most squares
away from the opponent king."""

import logging

from stalemate.attacks import attacked_squares
from stalemate.board import Board, PieceKind, Square, all_squares

logger = logging.getLogger(__name__)


def count_attacking_adjacent(
    board: Board,
    kind: PieceKind,
    square: Square,
    king_adjacency: set[Square],
) -> int:
    """Number of king-adjacent squares a piece on `square` attacks."""
    return len(king_adjacency & attacked_squares(board, kind, square))


def best_squares(
    board: Board,
    kind: PieceKind,
    king_adjacency: set[Square],
) -> list[Square]:
    """Squares outside the king's neighbourhood with the highest overlap.

    Single row-major pass with a running maximum: a strictly better score
    discards everything collected so far, ties are appended in scan order.
    A score of zero is never collected.
    """
    best = 0
    result: list[Square] = []
    for sq in all_squares():
        if sq in king_adjacency:
            continue
        n = count_attacking_adjacent(board, kind, sq, king_adjacency)
        if n > best:
            result = [sq]
            best = n
        elif n == best and best > 0:
            result.append(sq)
    logger.debug("%s: %d candidate(s) covering %d square(s)", kind.name, len(result), best)
    return result


def candidates_by_kind(
    board: Board,
    pieces: list[PieceKind],
    king_adjacency: set[Square],
) -> dict[PieceKind, list[Square]]:
    """Best squares for every distinct kind in `pieces`."""
    return {kind: best_squares(board, kind, king_adjacency) for kind in dict.fromkeys(pieces)}
