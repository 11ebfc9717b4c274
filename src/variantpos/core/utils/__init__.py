"""Shared utilities for variantpos."""

from variantpos.core.utils.logging import setup_logging
from variantpos.core.utils.squares import parse_square, split_uci, square_file, square_name

__all__ = [
    "parse_square",
    "setup_logging",
    "split_uci",
    "square_file",
    "square_name",
]
