"""FEN validation against a registered variant."""

from loguru import logger

from variantpos.core.chess.engine import EngineHandle
from variantpos.core.chess.errors import InvalidFENError
from variantpos.core.chess.variants import get_variant


def validate_fen(variant: str, fen: str, is_chess960: bool = False) -> bool:
    """Check whether a FEN describes a valid position of a variant.

    Args:
        variant: Registered variant name.
        fen: The FEN to check.
        is_chess960: Interpret castling rights the Chess960 way.

    Returns:
        True if python-chess parses the FEN and reports the position valid.

    Raises:
        InvalidVariantError: If the variant is unknown.
    """
    descriptor = get_variant(variant)
    try:
        EngineHandle.create(descriptor, fen, chess960=is_chess960)
    except InvalidFENError as e:
        logger.debug(str(e))
        return False
    return True
