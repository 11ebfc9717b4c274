"""Immutable positions on top of python-chess's mutable boards.

A ``Position`` never changes after it is created. ``make_moves`` and the SAN
helpers work on a private duplicate of the engine board, so the receiver and
any other position sharing its history stay valid::

    start = Position("chess")
    after_e4 = start.make_moves(["e2e4"])
    start.get_fen()  # still the starting position
"""

from collections.abc import Iterable

import chess
from loguru import logger

from variantpos.core.chess.engine import EngineHandle
from variantpos.core.chess.errors import IllegalMoveError
from variantpos.core.chess.history import StateHistory
from variantpos.core.chess.outcome import GameOutcomeClassifier
from variantpos.core.chess.pieces import Piece
from variantpos.core.chess.types import Notation, clamp_counter
from variantpos.core.chess.variants import VariantDescriptor, get_variant
from variantpos.core.utils.squares import square_name


def _tokens(moves: Iterable[str] | str) -> list[str]:
    # A bare string is one move, not a sequence of characters
    if isinstance(moves, str):
        return [moves]
    return list(moves)


class Position:
    """One board state of one variant, with value semantics."""

    __slots__ = ("_descriptor", "_engine", "_history", "_is_chess960")

    def __init__(self, variant: str, fen: str | None = None, is_chess960: bool = False) -> None:
        """Create a position.

        Args:
            variant: Registered variant name or python-chess alias.
            fen: Starting FEN; defaults to the variant's initial position.
            is_chess960: Use Chess960 castling notation (king takes rook).

        Raises:
            InvalidVariantError: If the variant is unknown.
            InvalidFENError: If the FEN is malformed or invalid for the variant.
        """
        descriptor = get_variant(variant)
        if fen is None:
            fen = descriptor.starting_fen

        engine = EngineHandle.create(descriptor, fen, chess960=is_chess960)
        self._descriptor = descriptor
        self._is_chess960 = is_chess960
        self._engine = engine
        self._history = StateHistory.root(engine.bookkeeping(None, 0))

    @classmethod
    def _derive(cls, parent: "Position", engine: EngineHandle, history: StateHistory) -> "Position":
        position = cls.__new__(cls)
        position._descriptor = parent._descriptor
        position._is_chess960 = parent._is_chess960
        position._engine = engine
        position._history = history
        return position

    @property
    def variant(self) -> str:
        return self._descriptor.name

    @property
    def descriptor(self) -> VariantDescriptor:
        return self._descriptor

    @property
    def is_chess960(self) -> bool:
        return self._is_chess960

    @property
    def ply(self) -> int:
        """Moves applied since this lineage was constructed."""
        return self._history.current.ply

    @property
    def moves(self) -> list[str]:
        """Moves applied since this lineage was constructed, oldest first."""
        return self._history.moves()

    @property
    def outcome(self) -> GameOutcomeClassifier:
        return GameOutcomeClassifier(self._engine, self._history)

    def __repr__(self) -> str:
        return f"Position(variant={self.variant!r}, fen={self.get_fen()!r}, is_chess960={self._is_chess960})"

    def make_moves(self, moves: Iterable[str] | str) -> "Position":
        """Return the position reached by playing ``moves`` in order.

        Raises:
            IllegalMoveError: On the first token that is not a legal move.
                Nothing is applied and ``self`` is unchanged.
        """
        engine = self._engine.duplicate()
        history = self._history
        for token in _tokens(moves):
            try:
                move = engine.resolve(token)
            except IllegalMoveError:
                logger.debug(f"Rejected move {token!r} in {engine.fen()}")
                raise
            history = history.extend(engine.apply(move, history.current.ply + 1))

        engine.finalize()
        return Position._derive(self, engine, history)

    def get_san(self, move: str, notation: Notation | str = Notation.DEFAULT) -> str:
        """Format one UCI move in ``notation``."""
        return self.get_san_moves([move], notation)[0]

    def get_san_moves(self, moves: Iterable[str] | str, notation: Notation | str = Notation.DEFAULT) -> list[str]:
        """Format a sequence of UCI moves, each in the position after the previous one.

        Raises:
            IllegalMoveError: On the first token that is not a legal move.
        """
        notation = Notation.parse(notation)
        if notation == Notation.DEFAULT:
            notation = self._descriptor.notation

        engine = self._engine.duplicate()
        ply = self.ply
        result = []
        for token in _tokens(moves):
            move = engine.resolve(token)
            result.append(engine.san(move, notation))
            ply += 1
            engine.apply(move, ply)
        return result

    def get_fen(self, use_short_form: bool = False, show_promoted: bool = False, move_counter_floor: int = 0) -> str:
        """FEN of the position.

        Args:
            use_short_form: Return EPD, without the move counters.
            show_promoted: Mark promoted pieces with ``~``.
            move_counter_floor: Lowest fullmove number to report. Clamped to
                ``[0, MAX_COUNTER]`` before use.
        """
        return self._engine.fen(
            short=use_short_form,
            promoted=show_promoted,
            fullmove_floor=clamp_counter(move_counter_floor),
        )

    def get_legal_moves(self) -> list[str]:
        """Legal moves as UCI tokens, in engine order."""
        return self._engine.legal_moves()

    def gives_check(self) -> bool:
        return self.outcome.gives_check()

    def game_result(self) -> int:
        return self.outcome.game_result()

    def is_immediate_game_end(self) -> tuple[bool, int]:
        return self.outcome.is_immediate_game_end()

    def is_optional_game_end(self, count_started: int = 0) -> tuple[bool, int]:
        return self.outcome.is_optional_game_end(count_started)

    def is_draw(self, ply: int) -> bool:
        return self.outcome.is_draw(ply)

    def has_insufficient_material(self) -> tuple[bool, bool]:
        return self.outcome.has_insufficient_material()

    def has_game_cycle(self, ply: int) -> bool:
        return self.outcome.has_game_cycle(ply)

    def has_repeated(self) -> bool:
        return self.outcome.has_repeated()

    def _squares(self) -> Iterable[chess.Square]:
        for file_idx in range(self._descriptor.files):
            for rank_idx in range(self._descriptor.ranks):
                yield chess.square(file_idx, rank_idx)

    def pieces_on_board(self) -> dict[chess.Square, Piece]:
        """Occupied squares mapped to their pieces."""
        pieces = {}
        for square in self._squares():
            piece = self._engine.piece_at(square)
            if piece is not None:
                pieces[square] = piece
        return pieces

    def pieces_on_uci_board(self) -> dict[str, Piece]:
        """Like ``pieces_on_board`` but keyed by square name."""
        files, ranks = self._descriptor.files, self._descriptor.ranks
        return {
            square_name(square, files=files, ranks=ranks): piece
            for square, piece in self.pieces_on_board().items()
        }

    def pieces_in_hand(self) -> list[Piece]:
        """Pieces held in hand by either side (white's first)."""
        return self._engine.pieces_in_hand()

    def walls_on_board(self) -> dict[chess.Square, bool]:
        """Blocked empty cells."""
        walls = self._engine.walls()
        return {square: True for square in self._squares() if walls & chess.BB_SQUARES[square]}
