"""variantpos: immutable chess-variant positions on top of python-chess.

- `from variantpos import Position` for positions with value semantics
- `from variantpos import to_960_uci` to rewrite castling for Chess960
- `from variantpos.core import setup_logging, load_variant_config` for the
  ambient setup
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("variantpos")

from variantpos.core import load_config, load_variant_config, save_config, setup_logging  # noqa: E402
from variantpos.core.chess import (  # noqa: E402
    MAX_COUNTER,
    VALUE_DRAW,
    VALUE_MATE,
    VALUE_ZERO,
    GameOutcomeClassifier,
    IllegalMoveError,
    InvalidFENError,
    InvalidVariantError,
    Notation,
    Piece,
    PieceInfo,
    Position,
    PositionError,
    PreconditionViolatedError,
    available_piece_chars,
    available_pieces,
    available_promotable_piece_chars,
    available_variants,
    init,
    initial_fen,
    teardown,
    to_960_uci,
    validate_fen,
)


def version() -> str:
    """Version of the library."""
    return __version__


__all__ = [
    "MAX_COUNTER",
    "VALUE_DRAW",
    "VALUE_MATE",
    "VALUE_ZERO",
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
    "__version__",
    "available_piece_chars",
    "available_pieces",
    "available_promotable_piece_chars",
    "available_variants",
    "init",
    "initial_fen",
    "load_config",
    "load_variant_config",
    "save_config",
    "setup_logging",
    "teardown",
    "to_960_uci",
    "validate_fen",
    "version",
]
