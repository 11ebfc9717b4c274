"""Tests for the variant registry and FEN validation."""

import threading

import chess
import pytest

from variantpos.core.chess import (
    InvalidVariantError,
    Notation,
    Position,
    available_piece_chars,
    available_pieces,
    available_promotable_piece_chars,
    available_variants,
    get_variant,
    init,
    initial_fen,
    register_variant,
    teardown,
    validate_fen,
)

BUILTIN_VARIANTS = [
    "3check",
    "antichess",
    "atomic",
    "chess",
    "crazyhouse",
    "horde",
    "kingofthehill",
    "racingkings",
]


class TestRegistry:
    """Tests for registry initialization and lookup."""

    def test_init_idempotent(self) -> None:
        """Repeated init calls change nothing."""
        init()
        before = available_variants()
        for _ in range(1000):
            init()
        assert available_variants() == before

    def test_init_from_threads(self) -> None:
        """Concurrent first use initializes exactly once."""
        teardown()
        results: list[list[str]] = []

        def worker() -> None:
            init()
            results.append(available_variants())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result == results[0] for result in results)

    def test_builtin_variants(self) -> None:
        """python-chess's variants are registered."""
        variants = available_variants()
        for name in BUILTIN_VARIANTS:
            assert name in variants, f"Missing variant {name}"
        assert variants == sorted(variants)

    def test_teardown_reinitializes(self) -> None:
        """Lookups after teardown rebuild the registry."""
        teardown()
        assert get_variant("chess").name == "chess"

    def test_alias(self) -> None:
        """Aliases resolve to the canonical descriptor."""
        assert get_variant("Racing Kings") is get_variant("racingkings")

    @pytest.mark.parametrize("name", ["shogi", "xiangqi", "", "no-such-variant"])
    def test_unknown_variant(self, name: str) -> None:
        """Unsupported variants raise InvalidVariantError."""
        with pytest.raises(InvalidVariantError):
            get_variant(name)
        with pytest.raises(InvalidVariantError):
            initial_fen(name)

    def test_register_variant(self) -> None:
        """Derived descriptors can be registered under a new name."""
        register_variant(get_variant("chess").derive("chess-lan", notation=Notation.LAN))

        assert "chess-lan" in available_variants()
        assert Position("chess-lan").get_san("e2e4") == "e2-e4"
        assert Position("chess").get_san("e2e4") == "e4"

    def test_teardown_drops_registered_variants(self) -> None:
        """Registered variants do not survive teardown."""
        register_variant(get_variant("chess").derive("chess-temp"))
        teardown()
        assert "chess-temp" not in available_variants()


class TestDescriptors:
    """Tests for built-in variant descriptors."""

    def test_castling(self) -> None:
        """Castling is detected from the starting position."""
        assert get_variant("chess").castling
        assert get_variant("crazyhouse").castling
        assert not get_variant("racingkings").castling
        assert not get_variant("antichess").castling

    def test_rule_defaults(self) -> None:
        """Standard draw rules apply unless configured otherwise."""
        descriptor = get_variant("chess")
        assert descriptor.nmove_rule == 50
        assert descriptor.nfold_rule == 3
        assert descriptor.perpetual_check_value is None
        assert descriptor.notation == Notation.SAN

    def test_racing_kings_has_no_pawns(self) -> None:
        """Racing kings is played without pawns or promotions."""
        descriptor = get_variant("racingkings")
        assert chess.PAWN not in descriptor.piece_types
        assert descriptor.promotion_piece_types == ()

    def test_antichess_promotes_to_king(self) -> None:
        """Kings are promotion pieces in antichess."""
        assert chess.KING in get_variant("antichess").promotion_piece_types

    def test_descriptors_are_frozen(self) -> None:
        """Descriptors cannot be modified in place."""
        with pytest.raises(AttributeError):
            get_variant("chess").nfold_rule = 4  # type: ignore[misc]


class TestPieceCharacters:
    """Tests for piece character listings."""

    def test_piece_chars(self) -> None:
        """Every piece in both colors."""
        assert available_piece_chars() == "BKNPQRbknpqr"

    def test_promotable_piece_chars(self) -> None:
        """Pawns never promote to pawns; kings only in antichess."""
        assert available_promotable_piece_chars() == "BKNQRbknqr"

    def test_available_pieces(self) -> None:
        """Piece metadata by name."""
        pieces = available_pieces()
        assert set(pieces) == {"pawn", "knight", "bishop", "rook", "queen", "king"}
        assert pieces["knight"].betza == "N"
        assert pieces["queen"].symbol() == "Q"
        assert pieces["queen"].symbol(chess.BLACK) == "q"


class TestValidateFen:
    """Tests for validate_fen."""

    @pytest.mark.parametrize("variant", BUILTIN_VARIANTS)
    def test_initial_fens_valid(self, variant: str) -> None:
        """Every variant's initial FEN is valid and has legal moves."""
        fen = initial_fen(variant)
        assert validate_fen(variant, fen), f"{variant}: {fen} rejected"
        assert Position(variant).get_legal_moves()

    def test_chess960_start(self) -> None:
        """A shuffled back rank is valid in Chess960 mode."""
        fen = "bqnbrkrn/pppppppp/8/8/8/8/PPPPPPPP/BQNBRKRN w KQkq - 0 1"
        assert validate_fen("chess", fen, is_chess960=True)

    @pytest.mark.parametrize(
        "fen",
        [
            "I'm a Chess FEN! (not)",
            "",
            "8/8/8/8/8/8/8/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K2K w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
        ],
    )
    def test_invalid_fens(self, fen: str) -> None:
        """Malformed and impossible positions are rejected."""
        assert not validate_fen("chess", fen)

    def test_unknown_variant(self) -> None:
        """Validation against an unknown variant raises."""
        with pytest.raises(InvalidVariantError):
            validate_fen("shogi", initial_fen("chess"))
