"""Game outcome classification.

All values are from the point of view of the side to move: ``-VALUE_MATE``
means the side to move has lost, ``VALUE_MATE`` that it has won and
``VALUE_DRAW`` a draw.
"""

import chess

from variantpos.core.chess.engine import EngineHandle
from variantpos.core.chess.errors import PreconditionViolatedError
from variantpos.core.chess.history import StateHistory
from variantpos.core.chess.types import VALUE_DRAW, VALUE_MATE, VALUE_ZERO, clamp_counter


class GameOutcomeClassifier:
    """Combines engine end conditions and move history into game outcomes."""

    def __init__(self, engine: EngineHandle, history: StateHistory) -> None:
        self._engine = engine
        self._history = history
        self._variant = engine.variant

    def gives_check(self) -> bool:
        """Whether the side to move is in check."""
        return self._engine.is_check()

    def game_result(self) -> int:
        """Result of a position in which the side to move has no legal moves.

        Raises:
            PreconditionViolatedError: If legal moves remain.
        """
        if self._engine.has_legal_moves():
            msg = "game_result() requires a position without legal moves"
            raise PreconditionViolatedError(msg)

        ended, value = self._engine.variant_end()
        if ended:
            return value

        if self._engine.is_check():
            return -VALUE_MATE

        override = self._engine.stalemate_override()
        return self._variant.stalemate_value if override is None else override

    def is_immediate_game_end(self) -> tuple[bool, int]:
        """Variant rules only; checkmate and stalemate are not considered."""
        return self._engine.variant_end()

    def is_optional_game_end(self, count_started: int = 0) -> tuple[bool, int]:
        """Claimable game ends: the n-move rule and n-fold repetition.

        Args:
            count_started: Caller-tracked plies without progress. Used instead
                of the halfmove clock when it is larger; saturates like every
                other counter.
        """
        if self._nmove_rule_reached(count_started):
            return True, VALUE_DRAW

        cycle = self._repetition_cycle(self._variant.nfold_rule)
        if cycle is None:
            return False, VALUE_ZERO

        return True, self._repetition_value(cycle)

    def is_draw(self, ply: int) -> bool:
        """Draw by the n-move rule or by a repetition.

        A single earlier occurrence only counts when it lies fewer than ``ply``
        plies back; a position that has already occurred twice always does.
        """
        if self._nmove_rule_reached(0):
            return True

        current = self._history.current.key
        distances = [d for d, record in self._history.reversible() if record.key == current]
        if not distances:
            return False
        return len(distances) >= 2 or distances[0] < ply

    def has_insufficient_material(self) -> tuple[bool, bool]:
        """(white, black) insufficient material flags."""
        return (
            self._engine.has_insufficient_material(chess.WHITE),
            self._engine.has_insufficient_material(chess.BLACK),
        )

    def has_repeated(self) -> bool:
        """Whether any position repeats since the last irreversible move."""
        seen = {self._history.current.key}
        for _, record in self._history.reversible():
            if record.key in seen:
                return True
            seen.add(record.key)
        return False

    def has_game_cycle(self, ply: int) -> bool:
        """Whether the side to move can return to an earlier position.

        Only positions an odd number of plies back (at least three) can be
        reached in one move. Such a position counts when it is fewer than
        ``ply`` plies back or has itself already repeated.
        """
        earlier: dict[str, int] = {}
        repeated: set[str] = set()
        for distance, record in self._history.reversible():
            if record.key in earlier:
                repeated.add(record.key)
            if distance >= 3 and distance % 2 == 1:
                earlier.setdefault(record.key, distance)

        if not earlier:
            return False

        for key in self._engine.keys_after_legal_moves():
            distance = earlier.get(key)
            if distance is not None and (distance < ply or key in repeated):
                return True
        return False

    def _nmove_rule_reached(self, count_started: int) -> bool:
        rule = self._variant.nmove_rule
        if rule <= 0:
            return False
        progress = max(self._engine.halfmove_clock, clamp_counter(count_started))
        if progress < 2 * rule:
            return False
        # A checkmate delivered on the last allowed move still counts
        return not self._engine.is_check() or self._engine.has_legal_moves()

    def _repetition_cycle(self, nfold: int) -> int | None:
        """Plies back to the occurrence completing an ``nfold`` repetition."""
        current = self._history.current.key
        occurrences = 1
        for distance, record in self._history.reversible():
            if record.key == current:
                occurrences += 1
                if occurrences >= nfold:
                    return distance
        return None

    def _repetition_value(self, cycle: int) -> int:
        """Value of a completed repetition spanning ``cycle`` plies."""
        perpetual = self._variant.perpetual_check_value
        if perpetual is None:
            return self._variant.nfold_value

        us = self._history.current.turn
        we_were_checked = True
        they_were_checked = True
        for distance, record in enumerate(self._history):
            if distance >= cycle:
                break
            if record.turn == us:
                we_were_checked &= record.in_check
            else:
                they_were_checked &= record.in_check

        # perpetual_check_value is the checking side's result
        if we_were_checked:
            return -perpetual
        if they_were_checked:
            return perpetual
        return self._variant.nfold_value
