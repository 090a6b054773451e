"""CLI for building a stalemate around a single opponent king.

Usage:
    python -m stalemate.cli [--king SQUARE] [--pieces SYMBOLS]
        [--random] [--seed N] [--alternative] [--board]

Pieces are given as symbols, e.g. KQQR (K is the friendly king, N or H a
knight). Returns JSON with the placement, FEN, and verification results.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from pydantic import ValidationError

from stalemate.board import InvalidPieceError, Square, parse_pieces
from stalemate.config import Settings
from stalemate.generate import generate_pieces, random_king_square
from stalemate.position import is_chess_stalemate, placement_names, render_ascii, to_fen
from stalemate.search import is_stalemate
from stalemate.solver import solve


def _run(args: argparse.Namespace, settings: Settings) -> dict:
    rng = random.Random(args.seed)

    if args.king:
        king = Square.from_name(args.king)
    elif args.random:
        king = random_king_square(rng)
    else:
        raise ValueError("--king is required unless --random is given")

    if args.pieces:
        pieces = parse_pieces(args.pieces)
    elif args.random:
        pieces = generate_pieces(settings.generate_max, rng)
    else:
        raise ValueError("--pieces is required unless --random is given")

    if len(pieces) > settings.max_pieces + 1:
        raise ValueError(
            f"{len(pieces)} pieces exceeds the limit of {settings.max_pieces} plus the king"
        )

    result = solve(king, pieces, by_power=args.alternative)

    output = {
        "king": king.name,
        "pieces": "".join(p.symbol for p in result.pieces),
        "placement": placement_names(result.placement),
        "solved": result.solved,
        "stalemate": is_stalemate(king, result.placement),
        "chess_stalemate": is_chess_stalemate(king, result.placement),
        "leftover": "".join(p.symbol for p in result.leftover),
        "unplaced": "".join(p.symbol for p in result.unplaced),
        "fen": to_fen(king, result.placement),
    }
    if args.board:
        output["board"] = render_ascii(king, result.placement)
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Place friendly pieces so the opponent king is stalemated",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--king", help="Opponent king square, e.g. b7")
    parser.add_argument("--pieces", help="Piece symbols, e.g. KQQ")
    parser.add_argument(
        "--random", action="store_true",
        help="Draw the missing king square and/or pieces at random",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument(
        "--alternative", action="store_true",
        help="Search strongest pieces first",
    )
    parser.add_argument(
        "--board", action="store_true",
        help="Include an ASCII board in the output",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        logging.basicConfig(level=settings.log_level)
        result = _run(args, settings)
    except (InvalidPieceError, ValidationError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    json.dump(result, sys.stdout, indent=2)
    print()
    if settings.strict and not result["solved"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
