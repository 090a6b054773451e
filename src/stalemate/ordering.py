"""Piece ordering by power and bookkeeping of pieces the search used."""

from collections import Counter

from stalemate.board import PieceKind, Placement

# Lower sorts first.
_POWER_RANK: dict[PieceKind, int] = {
    PieceKind.QUEEN: 0,
    PieceKind.ROOK: 1,
    PieceKind.KNIGHT: 2,
    PieceKind.BISHOP: 3,
}


def order_by_power(pieces: list[PieceKind]) -> list[PieceKind]:
    """King marker first, then queens, rooks, knights, bishops.

    Returns a new list; counts of every kind are preserved.
    """
    kings = [p for p in pieces if p is PieceKind.KING]
    others = [p for p in pieces if p is not PieceKind.KING]
    return kings + sorted(others, key=_POWER_RANK.__getitem__)


def remove_used(pieces: list[PieceKind], result: Placement) -> list[PieceKind]:
    """Pieces not consumed by `result`, one instance removed per placed square.

    Leftovers keep their relative order from `pieces`.
    """
    used = Counter({kind: len(squares) for kind, squares in result.items()})
    leftover = []
    for kind in pieces:
        if used[kind] > 0:
            used[kind] -= 1
        else:
            leftover.append(kind)
    return leftover
