"""Random test fixtures: an opponent king square and a piece multiset.

The piece sets follow a distribution under which a stalemate is normally
constructible; that is best effort, not a guarantee.
"""

import random

from stalemate.board import PieceKind, Square

_RANDOM_KINDS = (PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK, PieceKind.QUEEN)
MAX_QUEENS = 5

_K, _Q, _R, _B, _N = (
    PieceKind.KING, PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT,
)
_TWO_PIECE_SETS = ([_K, _Q, _Q], [_K, _Q, _B])
_THREE_PIECE_SETS = ([_K, _R, _R], [_K, _B, _B], [_K, _N, _N], [_K, _N, _B])


def random_king_square(rng: random.Random | None = None) -> Square:
    """King square away from the edge: row and column in 1..6."""
    rng = rng or random.Random()
    return Square(rng.randint(1, 6), rng.randint(1, 6))


def generate_pieces(max_pieces: int, rng: random.Random | None = None) -> list[PieceKind]:
    """King marker plus between 2 and max_pieces friendly pieces.

    Two pieces: queen pair or queen and bishop. Three: a rook, bishop or
    knight pair (or knight and bishop) topped up with a strong piece.
    Otherwise uniform draws with at most MAX_QUEENS queens.
    """
    if max_pieces < 2:
        raise ValueError(f"max_pieces must be at least 2, got {max_pieces}")
    rng = rng or random.Random()
    n = rng.randint(2, max_pieces)

    if n == 2:
        return list(rng.choice(_TWO_PIECE_SETS))

    if n == 3:
        choice = rng.randrange(len(_THREE_PIECE_SETS))
        result = list(_THREE_PIECE_SETS[choice])
        if choice == 0:
            result.append(rng.choice(_RANDOM_KINDS))
        else:
            result.append(rng.choice((_R, _Q)))
        return result

    result = [_K]
    num_queens = 0
    for _ in range(n):
        pool = _RANDOM_KINDS[:3] if num_queens >= MAX_QUEENS else _RANDOM_KINDS
        kind = rng.choice(pool)
        if kind is _Q:
            num_queens += 1
        result.append(kind)
    return result
