"""Bitboard chess board with FEN placement parsing, attack tables and a small command."""

__version__ = "0.1.0"
__all__ = ["board", "cli"]