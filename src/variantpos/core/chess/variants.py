"""Process-wide variant registry.

Every position is bound to a ``VariantDescriptor``: the python-chess board
class that implements the rules plus the handful of settings this package
layers on top (notation, repetition and move-count rules, stalemate value).
Descriptors are frozen and shared by every engine handle of that variant.

The registry is filled from ``chess.variant.VARIANTS`` the first time it is
used. ``init()`` may be called any number of times from any thread; only the
first call does any work.
"""

import threading
from dataclasses import dataclass, replace
from typing import Any

import chess
import chess.variant
from loguru import logger

from variantpos.core.chess.errors import InvalidVariantError
from variantpos.core.chess.types import VALUE_DRAW, Notation

STANDARD_PROMOTIONS = (chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT)


@dataclass(frozen=True)
class VariantDescriptor:
    """Rules and settings for one registered variant."""

    name: str
    board_class: type[chess.Board]
    starting_fen: str
    castling: bool = True
    notation: Notation = Notation.SAN
    files: int = 8
    ranks: int = 8
    piece_types: tuple[int, ...] = tuple(chess.PIECE_TYPES)
    promotion_piece_types: tuple[int, ...] = STANDARD_PROMOTIONS
    nmove_rule: int = 50  # 0 disables the rule
    nfold_rule: int = 3
    nfold_value: int = VALUE_DRAW
    perpetual_check_value: int | None = None  # None: perpetual check is an ordinary repetition
    stalemate_value: int = VALUE_DRAW

    def derive(self, name: str, **changes: Any) -> "VariantDescriptor":
        """Create a new descriptor based on this one."""
        return replace(self, name=name, **changes)

    def new_board(self, fen: str, chess960: bool = False) -> chess.Board:
        """Build a fresh python-chess board for this variant."""
        return self.board_class(fen, chess960=chess960)


_lock = threading.Lock()
_initialized = False
_variants: dict[str, VariantDescriptor] = {}


def _describe_builtin(board_class: type[chess.Board]) -> VariantDescriptor:
    """Descriptor for one of python-chess's own variants."""
    starting_fen = board_class.starting_fen
    piece_types = tuple(chess.PIECE_TYPES)
    promotions = STANDARD_PROMOTIONS

    if issubclass(board_class, chess.variant.RacingKingsBoard):
        piece_types = tuple(pt for pt in piece_types if pt != chess.PAWN)
        promotions = ()
    elif issubclass(board_class, chess.variant.SuicideBoard):
        # Kings are ordinary pieces in the losing variants
        promotions = STANDARD_PROMOTIONS + (chess.KING,)

    return VariantDescriptor(
        name=board_class.uci_variant,
        board_class=board_class,
        starting_fen=starting_fen,
        castling=bool(board_class(starting_fen).castling_rights),
        piece_types=piece_types,
        promotion_piece_types=promotions,
    )


def init() -> None:
    """Populate the registry with the built-in variants (once)."""
    global _initialized
    with _lock:
        if _initialized:
            return
        for board_class in chess.variant.VARIANTS:
            descriptor = _describe_builtin(board_class)
            _variants.setdefault(descriptor.name, descriptor)
        _initialized = True
        count = len(_variants)
    logger.info(f"Registered {count} built-in variants")


def teardown() -> None:
    """Forget every registered variant; the next lookup re-initializes."""
    global _initialized
    with _lock:
        _variants.clear()
        _initialized = False
    logger.debug("Variant registry cleared")


def register_variant(descriptor: VariantDescriptor) -> None:
    """Add or replace a variant in the registry."""
    init()
    with _lock:
        if descriptor.name in _variants:
            logger.warning(f"Replacing registered variant {descriptor.name!r}")
        _variants[descriptor.name] = descriptor


def get_variant(name: str) -> VariantDescriptor:
    """Look up a variant by registered name or python-chess alias.

    Raises:
        InvalidVariantError: If no registered variant matches.
    """
    init()
    descriptor = _variants.get(name)
    if descriptor is not None:
        return descriptor

    try:
        board_class = chess.variant.find_variant(name)
    except ValueError:
        raise InvalidVariantError(name) from None

    descriptor = _variants.get(board_class.uci_variant)
    if descriptor is None:
        raise InvalidVariantError(name)
    return descriptor


def available_variants() -> list[str]:
    """Names of all registered variants, sorted."""
    init()
    return sorted(_variants)


def initial_fen(variant: str) -> str:
    """Starting FEN of a registered variant."""
    return get_variant(variant).starting_fen


def _piece_chars(attribute: str) -> str:
    init()
    chars: set[str] = set()
    for descriptor in list(_variants.values()):
        for piece_type in getattr(descriptor, attribute):
            symbol = chess.piece_symbol(piece_type)
            chars.update((symbol.upper(), symbol))
    return "".join(sorted(chars))


def available_piece_chars() -> str:
    """Every piece character used by any registered variant, both colors."""
    return _piece_chars("piece_types")


def available_promotable_piece_chars() -> str:
    """Every character a pawn can promote to in any registered variant."""
    return _piece_chars("promotion_piece_types")
