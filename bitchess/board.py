"""Chess position held as bitboards, with precomputed attack tables.

Bit layout: the square at (rank, file) lives at bit ``7 - file + 8 * rank``,
so file *a* is the most significant bit of each rank's byte.  Square indices
(``rank * 8 + file``) are used only to index the attack tables.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator

NUM_SQUARES = 64
MAX_RANK = 7
MAX_FILE = 7
FILE_A_MASK = 0x8080808080808080
RANK_0_MASK = 0x00000000000000FF
START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class Color(enum.IntEnum):
    """Side to which a piece belongs."""

    WHITE = 0x8
    BLACK = 0x10


class Piece(enum.IntEnum):
    """Kind of chess piece."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    KING = 5
    QUEEN = 6


_FEN_PIECES = {
    "p": Piece.PAWN,
    "n": Piece.KNIGHT,
    "b": Piece.BISHOP,
    "r": Piece.ROOK,
    "q": Piece.QUEEN,
    "k": Piece.KING,
}

_KNIGHT_OFFSETS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (-1, 2), (1, -2), (-1, -2))
_KING_OFFSETS = ((-1, 1), (-1, -1), (-1, 0), (1, 1), (1, -1), (1, 0), (0, 1), (0, -1))
_DIAGONAL_STEPS = ((1, 1), (-1, 1), (1, -1), (-1, -1))


def square_index(rank: int, file: int) -> int:
    """Return the table index of the square at ``rank`` and ``file``."""
    return rank * 8 + file


def _bit(rank: int, file: int) -> int:
    return 1 << (MAX_FILE - file + 8 * rank)


def set_bit(bitboard: int, rank: int, file: int) -> int:
    """Return ``bitboard`` with the square at ``rank``/``file`` set."""
    return bitboard | _bit(rank, file)


def clear_bit(bitboard: int, rank: int, file: int) -> int:
    """Return ``bitboard`` with the square at ``rank``/``file`` cleared."""
    return bitboard & ~_bit(rank, file) & 0xFFFFFFFFFFFFFFFF


def on_board(rank: int, file: int) -> bool:
    """Tell whether ``rank`` and ``file`` name a square of the board."""
    return 0 <= rank <= MAX_RANK and 0 <= file <= MAX_FILE


def _squares_to_bitboard(squares: Iterable[tuple[int, int]]) -> int:
    bitboard = 0
    for rank, file in squares:
        bitboard = set_bit(bitboard, rank, file)
    return bitboard


def _walk(rank: int, file: int, d_rank: int, d_file: int) -> Iterator[tuple[int, int]]:
    rank, file = rank + d_rank, file + d_file
    while on_board(rank, file):
        yield rank, file
        rank, file = rank + d_rank, file + d_file


def straight_rays(square: int) -> int:
    """Return every square on the same rank or file, excluding ``square`` itself."""
    rank, file = divmod(square, 8)
    bitboard = (FILE_A_MASK >> file) | (RANK_0_MASK << (rank * 8))
    return clear_bit(bitboard, rank, file)


def diagonal_rays(square: int) -> int:
    """Return every square on the diagonals through ``square``, excluding it."""
    rank, file = divmod(square, 8)
    return _squares_to_bitboard(
        target for step in _DIAGONAL_STEPS for target in _walk(rank, file, *step)
    )


def _offset_targets(
    offsets: Iterable[tuple[int, int]],
) -> Callable[[int, int], Iterator[tuple[int, int]]]:
    offsets = tuple(offsets)

    def targets(rank: int, file: int) -> Iterator[tuple[int, int]]:
        for d_rank, d_file in offsets:
            if on_board(rank + d_rank, file + d_file):
                yield rank + d_rank, file + d_file

    return targets


def _build_table(targets: Callable[[int, int], Iterable[tuple[int, int]]]) -> tuple[int, ...]:
    return tuple(
        _squares_to_bitboard(targets(*divmod(square, 8))) for square in range(NUM_SQUARES)
    )


def generate_white_pawn_attacks() -> tuple[int, ...]:
    """Attack table for white pawns; pawns never stand on the first or last rank."""
    forward = _offset_targets(((1, 1), (1, -1)))
    return _build_table(lambda rank, file: forward(rank, file) if 1 <= rank <= 6 else ())


def generate_black_pawn_attacks() -> tuple[int, ...]:
    """Attack table for black pawns; pawns never stand on the first or last rank."""
    forward = _offset_targets(((-1, 1), (-1, -1)))
    return _build_table(lambda rank, file: forward(rank, file) if 1 <= rank <= 6 else ())


def generate_rook_attacks() -> tuple[int, ...]:
    """Attack table for rooks on an empty board."""
    return tuple(straight_rays(square) for square in range(NUM_SQUARES))


def generate_bishop_attacks() -> tuple[int, ...]:
    """Attack table for bishops on an empty board."""
    return tuple(diagonal_rays(square) for square in range(NUM_SQUARES))


def generate_knight_attacks() -> tuple[int, ...]:
    """Attack table for knights."""
    return _build_table(_offset_targets(_KNIGHT_OFFSETS))


def generate_king_attacks() -> tuple[int, ...]:
    """Attack table for kings."""
    return _build_table(_offset_targets(_KING_OFFSETS))


def generate_queen_attacks() -> tuple[int, ...]:
    """Attack table for queens on an empty board."""
    return tuple(
        diagonal_rays(square) | straight_rays(square) for square in range(NUM_SQUARES)
    )


WHITE_PAWN_ATTACKS = generate_white_pawn_attacks()
BLACK_PAWN_ATTACKS = generate_black_pawn_attacks()
ROOK_ATTACKS = generate_rook_attacks()
BISHOP_ATTACKS = generate_bishop_attacks()
KNIGHT_ATTACKS = generate_knight_attacks()
KING_ATTACKS = generate_king_attacks()
QUEEN_ATTACKS = generate_queen_attacks()


def format_bitboard(bitboard: int) -> str:
    """Render a bitboard as eight rows of bits, highest rank first."""
    lines = [
        f"{rank}:  |{(bitboard >> (8 * rank)) & 0xFF:08b}|\n"
        for rank in range(MAX_RANK, -1, -1)
    ]
    lines.append("     ABCDEFGH\n")
    return "".join(lines)


_GLYPHS = {
    Color.BLACK: (" ", "\u2659", "\u2656", "\u2658", "\u2657", "\u2654", "\u2655"),
    Color.WHITE: (" ", "\u265F", "\u265C", "\u265E", "\u265D", "\u265A", "\u265B"),
}


class Board:
    """A chess position built from the piece-placement field of a FEN string."""

    def __init__(self, fen: str) -> None:
        self.turn = Color.WHITE
        self._squares: dict[tuple[int, int], tuple[Color, Piece]] = {}
        self._bitboards = {(color, piece): 0 for color in Color for piece in Piece}

        self.white_pawn_attacks = WHITE_PAWN_ATTACKS
        self.black_pawn_attacks = BLACK_PAWN_ATTACKS
        self.rook_attacks = ROOK_ATTACKS
        self.knight_attacks = KNIGHT_ATTACKS
        self.bishop_attacks = BISHOP_ATTACKS
        self.king_attacks = KING_ATTACKS
        self.queen_attacks = QUEEN_ATTACKS

        fields = fen.split()
        self._parse_placement(fields[0] if fields else "")

    def _parse_placement(self, placement: str) -> None:
        rank, file = MAX_RANK, 0
        for char in placement:
            if char in "0123456789":
                # A digit positions the cursor at that file.
                file = int(char)
            elif char == "/":
                rank -= 1
                file = 0
                if rank < 0:
                    raise ValueError(f"too many ranks in placement {placement!r}")
            elif char.lower() in _FEN_PIECES:
                if not on_board(rank, file):
                    raise ValueError(
                        f"piece {char!r} falls off the board in placement {placement!r}"
                    )
                color = Color.WHITE if char.isupper() else Color.BLACK
                piece = _FEN_PIECES[char.lower()]
                key = (color, piece)
                self._bitboards[key] = set_bit(self._bitboards[key], rank, file)
                self._squares[(rank, file)] = key
                file += 1

    def piece_at(self, rank: int, file: int) -> tuple[Color, Piece] | None:
        """Return the colour and kind of the piece on a square, or None if empty."""
        if not on_board(rank, file):
            raise ValueError(f"square ({rank}, {file}) is not on the board")
        return self._squares.get((rank, file))

    def bitboard(self, color: Color, piece: Piece) -> int:
        """Return the bitboard of all pieces of one kind and colour."""
        return self._bitboards[(Color(color), Piece(piece))]

    def render(self) -> str:
        """Draw the board with Unicode chess glyphs, highest rank first."""
        lines = []
        for rank in range(MAX_RANK, -1, -1):
            cells = []
            for file in range(MAX_FILE + 1):
                occupant = self._squares.get((rank, file))
                if occupant is None:
                    cells.append(" ")
                else:
                    color, piece = occupant
                    cells.append(_GLYPHS[color][piece])
            lines.append(f"{rank}: |" + "|".join(cells) + "|\n")
        lines.append("    A B C D E F G H\n\n")
        return "".join(lines)

    def print_board(self) -> None:
        """Write the rendered board to standard output."""
        print(self.render(), end="")