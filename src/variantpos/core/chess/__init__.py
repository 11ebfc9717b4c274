"""Immutable variant positions and notation helpers on top of python-chess."""

from variantpos.core.chess.chess960 import to_960_uci
from variantpos.core.chess.engine import EngineHandle
from variantpos.core.chess.errors import (
    IllegalMoveError,
    InvalidFENError,
    InvalidVariantError,
    PositionError,
    PreconditionViolatedError,
)
from variantpos.core.chess.history import Bookkeeping, StateHistory, StateNode
from variantpos.core.chess.outcome import GameOutcomeClassifier
from variantpos.core.chess.pieces import Piece, PieceInfo, available_pieces
from variantpos.core.chess.position import Position
from variantpos.core.chess.types import MAX_COUNTER, VALUE_DRAW, VALUE_MATE, VALUE_ZERO, Notation
from variantpos.core.chess.validation import validate_fen
from variantpos.core.chess.variants import (
    VariantDescriptor,
    available_piece_chars,
    available_promotable_piece_chars,
    available_variants,
    get_variant,
    init,
    initial_fen,
    register_variant,
    teardown,
)

__all__ = [
    "MAX_COUNTER",
    "VALUE_DRAW",
    "VALUE_MATE",
    "VALUE_ZERO",
    "Bookkeeping",
    "EngineHandle",
    "GameOutcomeClassifier",
    "IllegalMoveError",
    "InvalidFENError",
    "InvalidVariantError",
    "Notation",
    "Piece",
    "PieceInfo",
    "Position",
    "PositionError",
    "PreconditionViolatedError",
    "StateHistory",
    "StateNode",
    "VariantDescriptor",
    "available_piece_chars",
    "available_pieces",
    "available_promotable_piece_chars",
    "available_variants",
    "get_variant",
    "init",
    "initial_fen",
    "register_variant",
    "teardown",
    "to_960_uci",
    "validate_fen",
]
