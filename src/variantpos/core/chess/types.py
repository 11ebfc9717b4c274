"""Shared value types for positions and outcomes."""

from enum import Enum

# Outcome values, always from the point of view of the side to move.
VALUE_ZERO = 0
VALUE_DRAW = 0
VALUE_MATE = 32_000

# Widest counter python-chess FENs are allowed to report through this package.
MAX_COUNTER = 2**31 - 1


class Notation(Enum):
    """Move notations understood by ``Position.get_san``.

    ``DEFAULT`` resolves to the notation configured for the variant.
    """

    DEFAULT = "default"
    SAN = "san"
    LAN = "lan"

    @classmethod
    def parse(cls, value: "Notation | str") -> "Notation":
        """Accept an enum member or its (case-insensitive) name or value."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        msg = f"Unknown notation: {value!r}"
        raise ValueError(msg)


def outcome_value(name: str) -> int:
    """Map an outcome name ("win", "loss", "draw") to its value."""
    values = {"win": VALUE_MATE, "loss": -VALUE_MATE, "draw": VALUE_DRAW}
    try:
        return values[name.lower()]
    except KeyError:
        msg = f"Unknown outcome {name!r}, expected one of {sorted(values)}"
        raise ValueError(msg) from None


def clamp_counter(value: int) -> int:
    """Saturate a caller-supplied counter into ``[0, MAX_COUNTER]``."""
    return min(max(int(value), 0), MAX_COUNTER)
