"""Core building blocks: positions, variants, configuration and logging."""

from variantpos.core.configs import load_config, load_variant_config, save_config
from variantpos.core.utils.logging import setup_logging

__all__ = ["load_config", "load_variant_config", "save_config", "setup_logging"]
