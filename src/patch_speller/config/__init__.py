"""Configuration loading and validation."""

from .loader import load_spell_config, read_config_file, resolve_filter_config
from .schema import (
    DEFAULT_CONFIG_FILE,
    FilterConfig,
    SpellConfig,
    SpellerSettings,
)

__all__ = [
    # Loader
    "load_spell_config",
    "read_config_file",
    "resolve_filter_config",
    # Schema
    "DEFAULT_CONFIG_FILE",
    "FilterConfig",
    "SpellConfig",
    "SpellerSettings",
]
