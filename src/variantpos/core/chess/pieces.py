"""Piece value types and the piece metadata table."""

from dataclasses import dataclass

import chess

# Betza movement notation for each python-chess piece type
BETZA = {
    chess.PAWN: "fmWfceFifmnD",
    chess.KNIGHT: "N",
    chess.BISHOP: "B",
    chess.ROOK: "R",
    chess.QUEEN: "Q",
    chess.KING: "K",
}


@dataclass(frozen=True)
class PieceInfo:
    """Metadata for one piece type."""

    id: int

    @property
    def name(self) -> str:
        return chess.piece_name(self.id)

    @property
    def betza(self) -> str:
        return BETZA[self.id]

    def symbol(self, color: chess.Color = chess.WHITE) -> str:
        """FEN character for this piece type in the given color."""
        symbol = chess.piece_symbol(self.id)
        return symbol.upper() if color == chess.WHITE else symbol


@dataclass(frozen=True)
class Piece:
    """A piece standing on a square or held in hand.

    ``promoted`` marks a piece that entered the board by promotion; in
    crazyhouse such a piece returns to its owner's pocket as a pawn when
    captured.
    """

    piece_type: int
    color: chess.Color
    promoted: bool = False

    @property
    def info(self) -> PieceInfo:
        return PieceInfo(self.piece_type)

    @property
    def id(self) -> int:
        return self.piece_type

    @property
    def is_white(self) -> bool:
        return self.color == chess.WHITE

    @property
    def is_black(self) -> bool:
        return self.color == chess.BLACK

    def symbol(self) -> str:
        return self.info.symbol(self.color)


def available_pieces() -> dict[str, PieceInfo]:
    """Map every piece name known to the rule engine to its metadata."""
    return {chess.piece_name(piece_type): PieceInfo(piece_type) for piece_type in chess.PIECE_TYPES}
