"""Exceptions raised by positions, variants and move translation."""


class PositionError(ValueError):
    """Base exception for position errors."""

    pass


class InvalidVariantError(PositionError):
    """Raised when a variant name is not registered."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"Unknown variant: {variant!r}")


class InvalidFENError(PositionError):
    """Raised when a starting FEN is malformed or invalid for its variant."""

    def __init__(self, fen: str, reason: str | None = None) -> None:
        self.fen = fen
        msg = f"Invalid FEN: {fen!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class IllegalMoveError(PositionError):
    """Raised when a move token matches none of the current legal moves."""

    def __init__(self, move: str) -> None:
        self.move = move
        super().__init__(f"Invalid Move: {move!r}")


class PreconditionViolatedError(PositionError):
    """Raised when a query is made in a position that does not allow it."""

    pass
