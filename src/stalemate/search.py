"""Backtracking placement search and the stalemate coverage check."""

import logging

from stalemate.attacks import adjacent_squares, attacked_squares, gives_check
from stalemate.board import Board, PieceKind, Placement, Square

__all__ = [
    "calculate_exclusion",
    "in_check",
    "is_stalemate",
    "place_greedy",
    "uncovered_squares",
]

logger = logging.getLogger(__name__)


def uncovered_squares(
    king_square: Square,
    placement: Placement,
    board: Board | None = None,
) -> set[Square]:
    """King-adjacent squares (the king's own included) no placed piece attacks.

    `board` must hold exactly the pieces in `placement`; when omitted it is
    rebuilt from the placement.
    """
    if board is None:
        board = Board.from_placement(king_square, placement)
    remaining = adjacent_squares(king_square)
    for kind, squares in placement.items():
        for sq in squares:
            remaining -= attacked_squares(board, kind, sq)
    return remaining


def in_check(
    king_square: Square,
    placement: Placement,
    board: Board | None = None,
) -> bool:
    """True when any placed piece attacks the king itself."""
    if board is None:
        board = Board.from_placement(king_square, placement)
    return any(
        gives_check(board, kind, sq)
        for kind, squares in placement.items()
        for sq in squares
    )


def is_stalemate(
    king_square: Square,
    placement: Placement,
    board: Board | None = None,
) -> bool:
    """True when every square around the king is attacked and the king is not."""
    if board is None:
        board = Board.from_placement(king_square, placement)
    if uncovered_squares(king_square, placement, board) != {king_square}:
        return False
    return not in_check(king_square, placement, board)


def calculate_exclusion(king_square: Square, placement: Placement) -> set[Square]:
    """King neighbourhood plus every square already holding a placed piece."""
    exclusion = adjacent_squares(king_square)
    for squares in placement.values():
        exclusion.update(squares)
    return exclusion


def place_greedy(
    board: Board,
    pieces: list[PieceKind],
    index: int,
    candidates: dict[PieceKind, list[Square]],
    exclusion: set[Square],
    result: Placement,
) -> bool:
    """Depth-first search placing pieces[index:] on their candidate squares.

    Succeeds as soon as the pieces placed so far stalemate the king; the
    rest of `pieces` stays unplaced. On success `board`, `exclusion` and
    `result` describe the solution. On failure they are back to what they
    were on entry, except that `exclusion` is recomputed from `result`.

    A candidate that failed stays excluded for its remaining siblings and
    is released when this frame returns.
    """
    king_square = board.king_square
    if is_stalemate(king_square, result, board):
        return True

    if index > len(pieces) - 1:
        logger.debug("depth %d: out of pieces", index)
        return False

    kind = pieces[index]
    for sq in candidates.get(kind, []):
        if sq in exclusion:
            continue
        logger.debug("depth %d: %s on %s", index, kind.name, sq.name)
        board.place(kind, sq)
        result.setdefault(kind, []).append(sq)
        exclusion.add(sq)

        if place_greedy(board, pieces, index + 1, candidates, exclusion, result):
            return True

        logger.debug("depth %d: backtrack %s from %s", index, kind.name, sq.name)
        board.remove(sq)
        result[kind].pop()
        if not result[kind]:
            del result[kind]

    exclusion.clear()
    exclusion.update(calculate_exclusion(king_square, result))
    return False
