"""Attack-set geometry for the friendly pieces on an 8x8 board.

Sliding pieces walk each ray until the first non-empty square, which is
not itself included. Knights ignore occupancy. The king only reaches its
empty neighbours.
"""

from stalemate.board import Board, Cell, PieceKind, Square, InvalidPieceError

__all__ = [
    "KNIGHT_JUMPS",
    "adjacent_squares",
    "attacked_squares",
    "gives_check",
]

_ORTHOGONAL = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL = ((1, 1), (-1, -1), (1, -1), (-1, 1))
_KING_STEPS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

KNIGHT_JUMPS = (
    (1, 2), (2, 1), (1, -2), (2, -1),
    (-1, 2), (-2, 1), (-1, -2), (-2, -1),
)

_RAY_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.QUEEN: _ORTHOGONAL + _DIAGONAL,
    PieceKind.ROOK: _ORTHOGONAL,
    PieceKind.BISHOP: _DIAGONAL,
}


def adjacent_squares(square: Square) -> set[Square]:
    """The square itself plus its in-bounds neighbours (4 to 9 squares)."""
    return {
        square.offset(dr, dc)
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if Board.in_bounds(square.offset(dr, dc))
    }


def _walk_rays(
    board: Board,
    start: Square,
    directions: tuple[tuple[int, int], ...],
) -> set[Square]:
    found = set()
    for dr, dc in directions:
        sq = start.offset(dr, dc)
        while board.in_bounds(sq) and board.is_empty(sq):
            found.add(sq)
            sq = sq.offset(dr, dc)
    return found


def attacked_squares(board: Board, kind: PieceKind, square: Square) -> set[Square]:
    """Squares a piece of the given kind attacks from `square` on `board`."""
    if kind is PieceKind.KNIGHT:
        return {
            square.offset(dr, dc)
            for dr, dc in KNIGHT_JUMPS
            if board.in_bounds(square.offset(dr, dc))
        }
    if kind is PieceKind.KING:
        return {
            square.offset(dr, dc)
            for dr, dc in _KING_STEPS
            if board.in_bounds(square.offset(dr, dc))
            and board.is_empty(square.offset(dr, dc))
        }
    if kind in _RAY_DIRS:
        return _walk_rays(board, square, _RAY_DIRS[kind])
    raise InvalidPieceError(f"Invalid piece kind: {kind!r}")



def gives_check(board: Board, kind: PieceKind, square: Square) -> bool:
    """True when a piece on `square` attacks the opponent king.

    Unlike attacked_squares, a ray that ends on the king counts as reaching it.
    """
    king = board.king_square
    if king is None:
        return False
    if kind is PieceKind.KNIGHT:
        return king in attacked_squares(board, kind, square)
    if kind is PieceKind.KING:
        return max(abs(king.row - square.row), abs(king.col - square.col)) == 1
    if kind not in _RAY_DIRS:
        raise InvalidPieceError(f"Invalid piece kind: {kind!r}")
    for dr, dc in _RAY_DIRS[kind]:
        sq = square.offset(dr, dc)
        while board.in_bounds(sq) and board.is_empty(sq):
            sq = sq.offset(dr, dc)
        if board.in_bounds(sq) and board[sq] is Cell.OPPONENT_KING:
            return True
    return False
