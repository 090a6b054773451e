"""Stalemate construction: place friendly pieces so an opponent king has no move."""

from stalemate.attacks import adjacent_squares, attacked_squares
from stalemate.board import Board, Cell, InvalidPieceError, PieceKind, Placement, Square, parse_pieces
from stalemate.search import is_stalemate
from stalemate.solver import (
    StalemateResult,
    calculate_stalemate,
    calculate_stalemate_alternative,
    solve,
)

__all__ = [
    "Board",
    "Cell",
    "InvalidPieceError",
    "PieceKind",
    "Placement",
    "Square",
    "StalemateResult",
    "adjacent_squares",
    "attacked_squares",
    "calculate_stalemate",
    "calculate_stalemate_alternative",
    "is_stalemate",
    "parse_pieces",
    "solve",
]
