"""Engine handle: a python-chess board behind a narrow, checkable interface.

python-chess boards are mutated in place by ``push``. ``EngineHandle`` is the
only place this package touches a board directly, and every mutating call is
made on a handle that nobody else can see (a fresh one from ``create`` or a
``duplicate``).

Duplication contract: a handle holds exactly two references.

* ``board``: copied field by field with ``Board.copy(stack=False)``. That copy
  covers the bitboards, side to move, castling rights, en passant square,
  clocks, promoted mask and the variant extras (pockets, remaining checks),
  but not python-chess's own move stack. Per-move history lives in
  ``StateHistory`` instead.
* ``variant``: the frozen ``VariantDescriptor``, shared by every handle.

``state_key()`` renders everything the copy is responsible for, so a
duplicate can be checked against its source.
"""

import chess
import chess.variant

from variantpos.core.chess.errors import IllegalMoveError, InvalidFENError
from variantpos.core.chess.history import Bookkeeping
from variantpos.core.chess.pieces import Piece
from variantpos.core.chess.types import VALUE_DRAW, VALUE_MATE, VALUE_ZERO, Notation
from variantpos.core.chess.variants import VariantDescriptor


class EngineHandle:
    """One mutable rule-engine position bound to a variant."""

    __slots__ = ("board", "variant")

    def __init__(self, variant: VariantDescriptor, board: chess.Board) -> None:
        self.variant = variant
        self.board = board

    @classmethod
    def create(cls, variant: VariantDescriptor, fen: str, chess960: bool = False) -> "EngineHandle":
        """Build a handle from a FEN.

        Raises:
            InvalidFENError: If python-chess cannot parse the FEN or reports
                the position as invalid for the variant.
        """
        try:
            board = variant.new_board(fen, chess960=chess960)
        except ValueError as e:
            raise InvalidFENError(fen, str(e)) from e

        if not board.is_valid():
            raise InvalidFENError(fen, f"status {board.status()!r}")

        return cls(variant, board)

    def duplicate(self) -> "EngineHandle":
        """Independent copy that may be mutated freely."""
        return EngineHandle(self.variant, self.board.copy(stack=False))

    def state_key(self) -> tuple[str, bool]:
        """Full logical state covered by the duplication contract."""
        fen = self.board.fen(shredder=True, en_passant="fen", promoted=True)
        return fen, self.board.chess960

    def resolve(self, token: str) -> chess.Move:
        """Find the legal move whose UCI text is ``token``.

        Raises:
            IllegalMoveError: If no legal move is written that way.
        """
        text = token
        if len(text) == 5 and "@" not in text:
            text = text[:4] + text[4].lower()

        for move in self.board.legal_moves:
            if self.board.uci(move) == text:
                return move

        raise IllegalMoveError(token)

    def apply(self, move: chess.Move, ply: int) -> Bookkeeping:
        """Play ``move`` in place and return the new position's record."""
        token = self.board.uci(move)
        self.board.push(move)
        return self.bookkeeping(token, ply)

    def bookkeeping(self, move: str | None, ply: int) -> Bookkeeping:
        board = self.board
        return Bookkeeping(
            move=move,
            key=board.epd(),
            turn=board.turn,
            in_check=board.is_check(),
            halfmove_clock=board.halfmove_clock,
            ply=ply,
        )

    def finalize(self) -> None:
        """Drop python-chess's own undo stack once moves are applied."""
        self.board.clear_stack()

    def legal_moves(self) -> list[str]:
        return [self.board.uci(move) for move in self.board.legal_moves]

    def has_legal_moves(self) -> bool:
        return any(self.board.generate_legal_moves())

    def keys_after_legal_moves(self) -> list[str]:
        """Repetition keys of every position one legal move away."""
        keys = []
        for move in self.board.legal_moves:
            child = self.board.copy(stack=False)
            child.push(move)
            keys.append(child.epd())
        return keys

    def san(self, move: chess.Move, notation: Notation) -> str:
        if notation == Notation.LAN:
            return self.board.lan(move)
        return self.board.san(move)

    @property
    def turn(self) -> chess.Color:
        return self.board.turn

    @property
    def halfmove_clock(self) -> int:
        return self.board.halfmove_clock

    def fen(self, *, short: bool = False, promoted: bool = False, fullmove_floor: int = 0) -> str:
        """FEN (or EPD when ``short``) with the fullmove field raised to ``fullmove_floor``."""
        if short:
            return self.board.epd(promoted=promoted)

        head, _, fullmove = self.board.fen(promoted=promoted).rpartition(" ")
        return f"{head} {max(int(fullmove), fullmove_floor)}"

    def is_check(self) -> bool:
        return self.board.is_check()

    def variant_end(self) -> tuple[bool, int]:
        """Whether a variant-specific rule has ended the game, and the value."""
        board = self.board
        if not board.is_variant_end():
            return False, VALUE_ZERO
        if board.is_variant_loss():
            return True, -VALUE_MATE
        if board.is_variant_win():
            return True, VALUE_MATE
        return True, VALUE_DRAW

    def stalemate_override(self) -> int | None:
        """Value the variant itself assigns to a position without moves, if any."""
        board = self.board
        if board.is_variant_win():
            return VALUE_MATE
        if board.is_variant_loss():
            return -VALUE_MATE
        if board.is_variant_draw():
            return VALUE_DRAW
        return None

    def has_insufficient_material(self, color: chess.Color) -> bool:
        return self.board.has_insufficient_material(color)

    def piece_at(self, square: chess.Square) -> Piece | None:
        piece = self.board.piece_at(square)
        if piece is None:
            return None
        promoted = bool(self.board.promoted & chess.BB_SQUARES[square])
        return Piece(piece.piece_type, piece.color, promoted)

    def pieces_in_hand(self) -> list[Piece]:
        """Pocket contents, white's first; empty for variants without drops."""
        if not isinstance(self.board, chess.variant.CrazyhouseBoard):
            return []

        pieces = []
        for color in (chess.WHITE, chess.BLACK):
            pocket = self.board.pockets[color]
            for piece_type in chess.PIECE_TYPES:
                pieces.extend(Piece(piece_type, color) for _ in range(pocket.count(piece_type)))
        return pieces

    def walls(self) -> chess.Bitboard:
        """Blocked, empty cells. python-chess variants have none."""
        return chess.BB_EMPTY
