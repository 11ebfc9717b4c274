"""Square utilities for variant-sized boards.

Squares are indexed the way python-chess indexes them, file-major within a
rank starting from a1:

    a1=0,  b1=1,  ..., h1=7
    a2=8,  b2=9,  ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

For boards with ``files`` columns the index is ``rank * files + file``, which
matches ``chess.square(file, rank)`` on the standard 8x8 board.
"""

import re

# File letters and the largest board geometry a square name can describe
FILES = "abcdefghijkl"
MAX_RANKS = 10

_SQUARE_RE = re.compile(r"([a-l])(10|[1-9])")
_UCI_RE = re.compile(r"^(?:([a-l](?:10|[1-9]))|([A-Za-z])@)([a-l](?:10|[1-9]))(.*)$")


def parse_square(square: str, *, files: int = 8, ranks: int = 8) -> int:
    """Convert a square name to its board index.

    Args:
        square: Square name (e.g., 'a1', 'h8', 'j10').
        files: Number of files on the board.
        ranks: Number of ranks on the board.

    Returns:
        Index ``rank * files + file``.

    Raises:
        ValueError: If the square is malformed or outside the board.
    """
    match = _SQUARE_RE.fullmatch(square.lower())
    if match is None:
        msg = f"Invalid square notation: {square!r}"
        raise ValueError(msg)

    file_idx = FILES.index(match.group(1))
    rank_idx = int(match.group(2)) - 1

    if file_idx >= files or rank_idx >= ranks:
        msg = f"Square {square!r} is outside a {files}x{ranks} board"
        raise ValueError(msg)

    return rank_idx * files + file_idx


def square_name(index: int, *, files: int = 8, ranks: int = 8) -> str:
    """Convert a board index to its square name.

    Raises:
        ValueError: If the index is out of range.
    """
    if not 0 <= index < files * ranks:
        msg = f"Invalid board index: {index}"
        raise ValueError(msg)

    rank_idx, file_idx = divmod(index, files)
    return f"{FILES[file_idx]}{rank_idx + 1}"


def square_file(square: str) -> int:
    """Zero-based file of a square name ('a' = 0)."""
    if not square or square[0].lower() not in FILES:
        msg = f"Invalid square notation: {square!r}"
        raise ValueError(msg)
    return FILES.index(square[0].lower())


def split_uci(move: str) -> tuple[str | None, str]:
    """Split a UCI token into its source and destination squares.

    Drops such as ``P@e4`` have no source square and return ``None`` for it.

    Raises:
        ValueError: If the token is not a coordinate move.
    """
    match = _UCI_RE.match(move)
    if match is None:
        msg = f"Invalid UCI move: {move!r}"
        raise ValueError(msg)
    return match.group(1), match.group(3)
