"""Top-level stalemate construction.

Flow: greedy candidates per piece kind -> backtracking search until the
king is stalemated -> leftover pieces parked on squares that leave the
king alone.
"""

import logging
from dataclasses import dataclass, field

from stalemate.attacks import adjacent_squares
from stalemate.board import Board, PieceKind, Placement, Square
from stalemate.candidates import candidates_by_kind
from stalemate.fallback import place_remaining
from stalemate.ordering import order_by_power, remove_used
from stalemate.search import calculate_exclusion, place_greedy

__all__ = [
    "StalemateResult",
    "calculate_stalemate",
    "calculate_stalemate_alternative",
    "solve",
]

logger = logging.getLogger(__name__)


@dataclass
class StalemateResult:
    king_square: Square
    pieces: list[PieceKind]          # search order actually used
    placement: Placement = field(default_factory=dict)
    solved: bool = False             # greedy search verified a stalemate
    leftover: list[PieceKind] = field(default_factory=list)  # handed to the fallback placer
    unplaced: list[PieceKind] = field(default_factory=list)  # leftovers with no safe square
    board: Board | None = None


def solve(
    king_square: Square,
    pieces: list[PieceKind],
    *,
    by_power: bool = False,
) -> StalemateResult:
    """Place `pieces` around an opponent king on `king_square`.

    With by_power=True the pieces are searched strongest first. `solved` is
    False when the greedy search ran out of candidates; the placement then
    holds only the fallback pieces and does not stalemate the king.
    """
    board = Board(king_square)
    order = order_by_power(pieces) if by_power else list(pieces)
    adjacency = adjacent_squares(king_square)
    exclusion = set(adjacency)
    result: Placement = {}

    candidates = candidates_by_kind(board, order, adjacency)
    solved = place_greedy(board, order, 0, candidates, exclusion, result)
    if solved:
        logger.debug(
            "Stalemate on %s with %d of %d piece(s)",
            king_square.name, sum(len(s) for s in result.values()), len(order),
        )
    else:
        logger.warning(
            "No stalemate on %s from greedy candidates for %s",
            king_square.name, "".join(p.symbol for p in order),
        )

    exclusion = calculate_exclusion(king_square, result)
    leftover = remove_used(order, result)
    unplaced = place_remaining(board, leftover, exclusion, result)

    return StalemateResult(
        king_square=king_square,
        pieces=order,
        placement=result,
        solved=solved,
        leftover=leftover,
        unplaced=unplaced,
        board=board,
    )


def calculate_stalemate(king_square: Square, pieces: list[PieceKind]) -> Placement:
    """Stalemating placement, searching pieces in the order given."""
    return solve(king_square, pieces).placement


def calculate_stalemate_alternative(king_square: Square, pieces: list[PieceKind]) -> Placement:
    """Stalemating placement, searching queens first, then rooks, knights, bishops."""
    return solve(king_square, pieces, by_power=True).placement
