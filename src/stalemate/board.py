"""Board geometry: squares, piece kinds, and the 8x8 occupancy grid."""

import enum
from dataclasses import dataclass

import chess

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "InvalidPieceError",
    "PieceKind",
    "Placement",
    "Square",
    "all_squares",
    "parse_pieces",
]

BOARD_SIZE = 8


class InvalidPieceError(ValueError):
    """Raised for a piece kind or symbol the geometry does not know."""


@dataclass(frozen=True, order=True)
class Square:
    """Board coordinate. Row 0 is rank 8, column 0 is the a-file."""
    row: int
    col: int

    @classmethod
    def from_name(cls, name: str) -> "Square":
        """Parse an algebraic square name: 'b7' -> Square(1, 1)."""
        try:
            sq = chess.parse_square(name.strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid square: {name!r}") from e
        return cls(7 - chess.square_rank(sq), chess.square_file(sq))

    @property
    def chess_square(self) -> chess.Square:
        return chess.square(self.col, 7 - self.row)

    @property
    def name(self) -> str:
        return chess.square_name(self.chess_square)

    def offset(self, dr: int, dc: int) -> "Square":
        return Square(self.row + dr, self.col + dc)


class PieceKind(enum.Enum):
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"

    @classmethod
    def from_symbol(cls, symbol: str) -> "PieceKind":
        """Accept K/Q/R/B/N in either case; 'H' is the older knight spelling."""
        upper = symbol.upper()
        if upper == "H":
            return cls.KNIGHT
        try:
            return cls(upper)
        except ValueError as e:
            raise InvalidPieceError(f"Invalid piece symbol: {symbol!r}") from e

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def chess_piece_type(self) -> chess.PieceType:
        return _CHESS_PIECE_TYPES[self]


_CHESS_PIECE_TYPES: dict[PieceKind, chess.PieceType] = {
    PieceKind.KING: chess.KING,
    PieceKind.QUEEN: chess.QUEEN,
    PieceKind.ROOK: chess.ROOK,
    PieceKind.BISHOP: chess.BISHOP,
    PieceKind.KNIGHT: chess.KNIGHT,
}


class Cell(enum.Enum):
    """Non-piece cell contents. Occupied cells hold a PieceKind instead."""
    EMPTY = "."
    OPPONENT_KING = "k"


# Piece kind -> squares, one entry per placed piece of that kind.
Placement = dict[PieceKind, list[Square]]


def parse_pieces(symbols: str) -> list[PieceKind]:
    """'KQQR' -> [KING, QUEEN, QUEEN, ROOK]. Whitespace and commas are ignored."""
    return [PieceKind.from_symbol(ch) for ch in symbols if ch not in " ,\t\n"]


class Board:
    """8x8 grid holding the opponent king and any friendly pieces placed so far.

    Attack sets for sliding pieces are computed against the live contents,
    so every placement or removal changes what later queries see. Without a
    king square the board starts completely empty.
    """

    def __init__(self, king_square: Square | None = None):
        self.king_square = king_square
        self._cells: list[list[Cell | PieceKind]] = [
            [Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        if king_square is not None:
            if not self.in_bounds(king_square):
                raise ValueError(f"King square out of bounds: {king_square}")
            self[king_square] = Cell.OPPONENT_KING

    @classmethod
    def from_placement(cls, king_square: Square, placement: Placement) -> "Board":
        board = cls(king_square)
        for kind, squares in placement.items():
            for sq in squares:
                board[sq] = kind
        return board

    @staticmethod
    def in_bounds(square: Square) -> bool:
        return 0 <= square.row < BOARD_SIZE and 0 <= square.col < BOARD_SIZE

    def __getitem__(self, square: Square) -> Cell | PieceKind:
        return self._cells[square.row][square.col]

    def __setitem__(self, square: Square, content: Cell | PieceKind) -> None:
        self._cells[square.row][square.col] = content

    def is_empty(self, square: Square) -> bool:
        return self[square] is Cell.EMPTY

    def place(self, kind: PieceKind, square: Square) -> None:
        if not self.is_empty(square):
            raise ValueError(f"Square {square.name} is already occupied")
        self[square] = kind

    def remove(self, square: Square) -> None:
        self[square] = Cell.EMPTY

    def occupied(self) -> dict[Square, PieceKind]:
        """Friendly pieces currently on the board, in row-major order."""
        found = {}
        for sq in all_squares():
            content = self[sq]
            if isinstance(content, PieceKind):
                found[sq] = content
        return found


def all_squares() -> list[Square]:
    """Every square in row-major scan order."""
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
