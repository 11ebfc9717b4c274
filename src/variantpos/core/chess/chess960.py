"""Translation of UCI move lists into Chess960 castling notation.

Standard UCI writes castling as the king moving two squares (``e1g1``);
Chess960 UCI writes it as the king capturing its own rook (``e1h1``). All
other moves are written the same way in both.

The translation replays the game on two boards of the same variant, one in
each mode, and compares their legal moves before every move. This is a
heuristic: it recognizes the shapes castling actually produces (one or two
moves differing between the modes) and otherwise leaves the move alone.
"""

from collections.abc import Sequence

import chess
from loguru import logger

from variantpos.core.chess.position import Position
from variantpos.core.chess.variants import get_variant
from variantpos.core.utils.squares import split_uci, square_file


def _is_castling_960(position960: Position, move: str) -> bool:
    """King on the source square and rook on the destination square."""
    source, target = split_uci(move)
    pieces = position960.pieces_on_uci_board()
    king = pieces.get(source) if source else None
    rook = pieces.get(target)
    return (
        king is not None
        and rook is not None
        and king.piece_type == chess.KING
        and rook.piece_type == chess.ROOK
        and king.color == rook.color
    )


def _pair_moves(
    move: str,
    only_standard: list[str],
    only_960: list[str],
    position960: Position,
) -> tuple[str, str]:
    """Decide what each board plays for ``move``: (standard move, 960 move)."""
    if len(only_standard) != len(only_960) or len(only_standard) not in (1, 2):
        return move, move

    if len(only_standard) == 1 and only_standard[0] == move:
        return move, only_960[0]

    if len(only_standard) == 2 and move in only_standard:
        # Both lists are sorted with the king on the same square, so the
        # queen-side castle comes first and the king-side castle second.
        source, target = split_uci(move)
        king_side = source is not None and square_file(source) < square_file(target)
        candidate = only_960[1] if king_side else only_960[0]
        if _is_castling_960(position960, candidate):
            return move, candidate
        logger.debug(f"{candidate!r} is not a castling move, keeping {move!r}")
        return move, move

    if move in only_960:
        # Already in 960 notation; the standard board plays its counterpart.
        return only_standard[only_960.index(move)], move

    return move, move


def to_960_uci(variant: str, moves: Sequence[str], fen: str | None = None) -> list[str]:
    """Rewrite castling moves of a game into Chess960 UCI notation.

    Args:
        variant: Registered variant name.
        moves: The game's moves in standard UCI notation.
        fen: Starting FEN; defaults to the variant's initial position.

    Returns:
        The moves with castling written king-takes-rook. Input that is
        already in 960 notation comes back unchanged.

    Raises:
        InvalidVariantError: If the variant is unknown.
        IllegalMoveError: If a move is illegal in the replayed game.
    """
    if not get_variant(variant).castling:
        return list(moves)

    position = Position(variant, fen)
    position960 = Position(variant, fen, is_chess960=True)
    translated = []

    for move in moves:
        legal = set(position.get_legal_moves())
        legal960 = set(position960.get_legal_moves())
        only_960 = sorted(legal960 - legal)
        only_standard = sorted(legal - legal960)

        standard_move, move960 = _pair_moves(move, only_standard, only_960, position960)
        if move960 != move:
            logger.debug(f"Translated {move!r} to {move960!r} at ply {position.ply}")

        position = position.make_moves([standard_move])
        position960 = position960.make_moves([move960])
        translated.append(move960)

    return translated
