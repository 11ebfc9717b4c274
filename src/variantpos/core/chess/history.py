"""Persistent move history shared between positions.

Each applied move leaves one ``Bookkeeping`` record behind. Records are
linked newest-to-oldest through ``StateNode.previous``; a ``StateHistory`` is
just a handle on the newest node. Extending a history allocates one new node
and leaves the old handle (and everything it points to) untouched, so any
number of positions can branch from a common ancestor and share its prefix.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import chess


@dataclass(frozen=True)
class Bookkeeping:
    """Per-move state recorded right after a move is applied."""

    move: str | None  # None for the starting position
    key: str  # EPD of the resulting position, used for repetition detection
    turn: chess.Color
    in_check: bool
    halfmove_clock: int
    ply: int


@dataclass(frozen=True)
class StateNode:
    """One link in the history chain."""

    bookkeeping: Bookkeeping
    previous: "StateNode | None" = None


@dataclass(frozen=True)
class StateHistory:
    """Immutable handle on the newest node of a history chain."""

    head: StateNode

    @classmethod
    def root(cls, bookkeeping: Bookkeeping) -> "StateHistory":
        return cls(StateNode(bookkeeping))

    def extend(self, bookkeeping: Bookkeeping) -> "StateHistory":
        """Return a new history with one more record; ``self`` is unchanged."""
        return StateHistory(StateNode(bookkeeping, self.head))

    @property
    def current(self) -> Bookkeeping:
        return self.head.bookkeeping

    def __len__(self) -> int:
        return self.current.ply + 1

    def __iter__(self) -> Iterator[Bookkeeping]:
        """Records from newest to oldest."""
        node: StateNode | None = self.head
        while node is not None:
            yield node.bookkeeping
            node = node.previous

    def moves(self) -> list[str]:
        """Tokens applied since the root, oldest first."""
        moves = [record.move for record in self if record.move is not None]
        moves.reverse()
        return moves

    def reversible(self) -> Iterator[tuple[int, Bookkeeping]]:
        """Earlier records reachable without crossing an irreversible move.

        Yields ``(distance, record)`` pairs where ``distance`` is the number of
        plies between the record and the current position.
        """
        node = self.head.previous
        for distance in range(1, self.current.halfmove_clock + 1):
            if node is None:
                return
            yield distance, node.bookkeeping
            node = node.previous
