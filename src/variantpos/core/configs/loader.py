"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

from loguru import logger
from omegaconf import DictConfig, OmegaConf

from variantpos.core.chess.engine import EngineHandle
from variantpos.core.chess.variants import get_variant, register_variant
from variantpos.core.configs.schema import variant_configs_from_dict


def load_config(config_path: str | Path, overrides: list[str] | None = None) -> DictConfig:
    """Load a configuration file with optional overrides.

    Args:
        config_path: Path to the YAML configuration file.
        overrides: Optional list of CLI-style overrides (e.g., ["variants.chess-x.nfold_rule=4"]).

    Returns:
        Merged configuration as a DictConfig.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    config = OmegaConf.load(config_path)

    if overrides:
        override_conf = OmegaConf.from_dotlist(overrides)
        config = OmegaConf.merge(config, override_conf)

    return config


def save_config(config: DictConfig | dict[str, Any], path: str | Path) -> None:
    """Save a configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Path to save the configuration to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(config, dict):
        config = OmegaConf.create(config)

    OmegaConf.save(config, path)


def load_variant_config(source: Path | str | DictConfig | dict[str, Any]) -> list[str]:
    """Register the variants defined in a config.

    Args:
        source: A YAML file (a ``Path``, or a ``str`` ending in ``.yaml`` or
            ``.yml``), YAML text, a mapping or a DictConfig. It must have a
            top-level ``variants`` section.

    Returns:
        Names of the registered variants, in config order.

    Raises:
        FileNotFoundError: If a config file does not exist.
        ValueError: If the ``variants`` section is missing or a setting is invalid.
        InvalidVariantError: If a base variant is unknown.
        InvalidFENError: If a starting FEN is invalid for its base variant.
    """
    if isinstance(source, str) and "\n" not in source and Path(source).suffix in (".yaml", ".yml"):
        source = Path(source)

    if isinstance(source, Path):
        config = load_config(source)
    elif isinstance(source, DictConfig):
        config = source
    else:
        config = OmegaConf.create(source)

    section = config.get("variants")
    if section is None:
        msg = "Variant config has no 'variants' section"
        raise ValueError(msg)

    configs = variant_configs_from_dict(OmegaConf.to_container(section, resolve=True))

    names = []
    for name, variant_config in configs.items():
        descriptor = get_variant(variant_config.base).derive(name, **variant_config.descriptor_changes())
        # Fail before registering anything unusable
        EngineHandle.create(descriptor, descriptor.starting_fen)
        register_variant(descriptor)
        names.append(name)

    logger.info(f"Loaded {len(names)} variants from config: {', '.join(names)}")
    return names
