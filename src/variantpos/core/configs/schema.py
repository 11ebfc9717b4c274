"""Strongly-typed configuration schemas for user-defined variants.

A variant config derives a new variant from a registered one and overrides
the settings this package layers on top of python-chess's rules. Unset
fields keep the base variant's values.

Example YAML::

    variants:
      chess-perpetual:
        base: chess
        perpetual_check: loss
      chess-fourfold:
        base: chess
        nfold_rule: 4
"""

from dataclasses import dataclass
from typing import Any

from variantpos.core.chess.types import Notation, outcome_value


@dataclass
class VariantConfig:
    """Configuration for one derived variant."""

    base: str = "chess"
    starting_fen: str | None = None
    castling: bool | None = None
    notation: str = "default"  # "default" keeps the base notation | "san" | "lan"
    nmove_rule: int | None = None  # In moves; 0 disables
    nfold_rule: int | None = None
    nfold_value: str | None = None  # "draw" | "win" | "loss", for the side to move
    perpetual_check: str | None = None  # Result for the side giving perpetual check
    stalemate: str | None = None  # Result for the stalemated side

    def __post_init__(self) -> None:
        """Validate values."""
        Notation.parse(self.notation)

        for name in ("nfold_value", "perpetual_check", "stalemate"):
            value = getattr(self, name)
            if value is not None:
                outcome_value(value)

        if self.nfold_rule is not None and self.nfold_rule < 2:
            msg = f"nfold_rule must be at least 2, got {self.nfold_rule}"
            raise ValueError(msg)

        if self.nmove_rule is not None and self.nmove_rule < 0:
            msg = f"nmove_rule must be non-negative, got {self.nmove_rule}"
            raise ValueError(msg)

    def descriptor_changes(self) -> dict[str, Any]:
        """Fields to override on the base variant's descriptor."""
        changes: dict[str, Any] = {}
        if self.starting_fen is not None:
            changes["starting_fen"] = self.starting_fen
        if self.castling is not None:
            changes["castling"] = self.castling
        notation = Notation.parse(self.notation)
        if notation != Notation.DEFAULT:
            changes["notation"] = notation
        if self.nmove_rule is not None:
            changes["nmove_rule"] = self.nmove_rule
        if self.nfold_rule is not None:
            changes["nfold_rule"] = self.nfold_rule
        if self.nfold_value is not None:
            changes["nfold_value"] = outcome_value(self.nfold_value)
        if self.perpetual_check is not None:
            changes["perpetual_check_value"] = outcome_value(self.perpetual_check)
        if self.stalemate is not None:
            changes["stalemate_value"] = outcome_value(self.stalemate)
        return changes


def variant_configs_from_dict(data: dict[str, Any]) -> dict[str, VariantConfig]:
    """Create VariantConfigs from the ``variants`` section of a config.

    Args:
        data: Mapping of variant name to its settings.

    Returns:
        Mapping of variant name to VariantConfig.
    """
    configs = {}
    for name, settings in data.items():
        if not isinstance(settings, dict):
            msg = f"Variant {name!r} must be a mapping, got {type(settings).__name__}"
            raise ValueError(msg)
        configs[str(name)] = VariantConfig(**settings)
    return configs
