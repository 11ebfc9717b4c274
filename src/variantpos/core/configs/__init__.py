"""Configuration management utilities."""

from variantpos.core.configs.loader import load_config, load_variant_config, save_config
from variantpos.core.configs.schema import VariantConfig, variant_configs_from_dict

__all__ = [
    "VariantConfig",
    "load_config",
    "load_variant_config",
    "save_config",
    "variant_configs_from_dict",
]
