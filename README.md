# bitchess

A small chess board model built on 64-bit bitboards. It reads the
piece-placement field of a FEN string and keeps one bitboard for each colour
and piece type. It also precomputes attack tables for pawns, knights,
bishops, rooks, queens and kings on every square.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Command line

```
bitchess
bitchess "r3k2r/8/8/8/8/8/8/R3K2R"
```

The command takes an optional FEN string. Without one it uses the standard
starting position. It first prints the knight attack bitboard for h4 (rank 3,
file 7), then the board drawn with Unicode chess symbols. If the placement
cannot be read, it reports the error and exits with status 2.

## Library use

```python
from bitchess.board import Board, Color, Piece, format_bitboard, generate_knight_attacks

board = Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
board.print_board()                     # same text as board.render()

print(board.piece_at(0, 4))             # (Color.WHITE, Piece.KING)
print(hex(board.bitboard(Color.WHITE, Piece.PAWN)))

knight = generate_knight_attacks()
print(format_bitboard(knight[0]))       # attacks from a1
```

### Coordinates and bit layout

- Ranks are numbered 0 to 7 from White's side.
- Files are numbered 0 to 7 from a to h.
- Square indices (`square_index(rank, file)`, that is `rank * 8 + file`) run
  from 0 (a1) to 63 (h8). They are used only to index the attack tables.
- Inside a bitboard, the square at `(rank, file)` is bit `7 - file + 8 * rank`.
  File a is therefore the most significant bit of each rank's byte.

### Module `bitchess.board`

- `Color` (`WHITE`, `BLACK`) and `Piece` (`PAWN`, `ROOK`, `KNIGHT`, `BISHOP`,
  `KING`, `QUEEN`) are integer enums.
- `Board(fen)` parses the placement field, which is the first
  whitespace-separated field. It raises `ValueError` when the placement has
  more than eight ranks or when a piece would fall off the board. The board
  has these members:
  - `piece_at(rank, file)` returns `(Color, Piece)` or `None`. It raises
    `ValueError` for a square that is off the board.
  - `bitboard(color, piece)` returns one piece set.
  - `render()` returns the board as text. `print_board()` writes that text to
    standard output.
  - `turn` is always `Color.WHITE`.
  - The attack tables are available as attributes: `white_pawn_attacks`,
    `black_pawn_attacks`, `rook_attacks`, `knight_attacks`,
    `bishop_attacks`, `king_attacks` and `queen_attacks`.
- Bit helpers:
  - `set_bit(bitboard, rank, file)` and `clear_bit(bitboard, rank, file)`
    return a new integer.
  - `on_board(rank, file)` tells whether the square exists.
- Ray helpers: `straight_rays(square)` and `diagonal_rays(square)` return the
  lines through a square on an empty board, without the square itself.
- Table generators: `generate_white_pawn_attacks()`,
  `generate_black_pawn_attacks()`, `generate_rook_attacks()`,
  `generate_bishop_attacks()`, `generate_knight_attacks()`,
  `generate_king_attacks()` and `generate_queen_attacks()` each return a tuple
  of 64 bitboards.
  - The same tables are available as module constants, such as
    `KNIGHT_ATTACKS`.
  - The pawn tables are empty for squares on ranks 0 and 7.
- `format_bitboard(bitboard)` returns eight rows of bits, highest rank first,
  under a file legend.
- `START_FEN` holds the standard starting position.

### Placement parsing details

- Letters `pnbrqk` are black pieces and `PNBRQK` are white pieces.
- `/` moves down one rank.
- A digit moves the cursor *to* that file number; it does not advance the
  cursor by that many squares.
- Other characters are ignored.

## What it does not do

This package models a position and empty-board attack maps only.

- It does not generate or validate moves. The sliding-piece tables ignore
  blocking pieces.
- It does not play games or detect check or mate.
- It ignores the FEN fields for side to move, castling, en passant and move
  counters.
- It cannot write a position back out as FEN.