"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from variantpos.core.chess import Position, teardown

# 1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O Nf6 5. d3 O-O
KING_SIDE_GAME = ["e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "f8c5", "e1g1", "g8f6", "d2d3", "e8g8"]

# 1. d4 d5 2. Nc3 Nc6 3. Bf4 Bf5 4. Qd2 Qd7 5. O-O-O
QUEEN_SIDE_GAME = ["d2d4", "d7d5", "b1c3", "b8c6", "c1f4", "c8f5", "d1d2", "d8d7", "e1c1"]

# 1. e4 e5 2. Nf3 Nf6 3. Bc4 Bc5 4. d3 d6 5. Nc3 Nc6 6. Be3 Be6 7. Qd2 Qd7, both castles legal
BOTH_SIDES_OPENING = [
    "e2e4", "e7e5", "g1f3", "g8f6", "f1c4", "f8c5", "d2d3", "d7d6",
    "b1c3", "b8c6", "c1e3", "c8e6", "d1d2", "d8d7",
]

# Knights out and back twice: the start position occurs for the third time at ply 8
THREEFOLD_SHUFFLE = ["b1c3", "g8f6", "c3b1", "f6g8", "b1c3", "g8f6", "c3b1", "f6g8"]

# White checks from e8 and e4 while the black king shuffles between h8 and h7
PERPETUAL_FEN = "7k/6p1/7p/8/8/8/6PP/4Q1K1 w - - 0 1"
PERPETUAL_MOVES = ["e1e8", "h8h7", "e8e4", "h7h8"] + ["e4e8", "h8h7", "e8e4", "h7h8"] * 2


@pytest.fixture(autouse=True)
def fresh_registry() -> Iterator[None]:
    """Drop variants registered by a test so every test starts from the built-ins."""
    yield
    teardown()


@pytest.fixture
def start() -> Position:
    """Standard chess starting position."""
    return Position("chess")
