"""Command line entry point: show a chess position."""

from __future__ import annotations

import argparse
import sys

from bitchess.board import START_FEN, Board, format_bitboard, square_index


def main(argv: list[str] | None = None) -> int:
    """Print the knight attack map of h4 and the board for a FEN position."""
    parser = argparse.ArgumentParser(prog="bitchess", description="Show a chess position.")
    parser.add_argument("fen", nargs="?", default=START_FEN, help="position in FEN notation")
    args = parser.parse_args(argv)

    try:
        board = Board(args.fen)
    except ValueError as exc:
        parser.error(str(exc))

    sys.stdout.write(format_bitboard(board.knight_attacks[square_index(3, 7)]))
    board.print_board()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())