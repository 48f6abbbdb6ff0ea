"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from ..utils.errors import ConfigError
from .schema import DEFAULT_CONFIG_FILE, FilterConfig, SpellConfig

log = structlog.get_logger()


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ConfigError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def resolve_filter_config(source: Mapping[str, Any] | None = None) -> FilterConfig:
    """
    Resolve an already-parsed configuration mapping into filter parameters.

    A missing source is the same as an empty mapping: every field takes its
    default.

    Args:
        source: Parsed configuration, or None

    Returns:
        Immutable FilterConfig for the run

    Raises:
        ConfigError: If the mapping doesn't match the schema
    """
    if source is None:
        source = {}
    if not isinstance(source, Mapping):
        raise ConfigError(
            f"Spelling configuration must be a mapping, got {type(source).__name__}"
        )

    try:
        spell_config = SpellConfig.model_validate(dict(source))
    except ValidationError as e:
        raise ConfigError(f"Invalid spelling configuration: {e}") from e

    return FilterConfig.from_spell_config(spell_config)


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read a YAML spelling configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed mapping; empty if the file doesn't exist or is empty

    Raises:
        ConfigError: If the file isn't valid YAML or isn't a mapping
    """
    if not path.exists():
        log.debug("spell_config_not_found", path=str(path))
        return {}

    with path.open() as f:
        raw_yaml = f.read()

    # Substitute environment variables
    yaml_with_env = substitute_env_vars(raw_yaml)

    try:
        data = yaml.safe_load(yaml_with_env)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Spelling configuration in {path} must be a mapping, got {type(data).__name__}",
            path=str(path),
        )
    return data


def load_spell_config(repo_path: Path, config_file: str | Path | None = None) -> FilterConfig:
    """
    Load and resolve the spelling configuration of a repository.

    Args:
        repo_path: Repository root
        config_file: Configuration file, relative to repo_path unless absolute
            (default: .patch_speller.yml)

    Returns:
        Immutable FilterConfig for the run

    Raises:
        ConfigError: If the file exists but is malformed
    """
    path = repo_path / (config_file or DEFAULT_CONFIG_FILE)

    data = read_config_file(path)
    try:
        config = resolve_filter_config(data)
    except ConfigError as e:
        raise ConfigError(str(e), path=str(path)) from e

    log.debug(
        "spell_config_loaded",
        path=str(path),
        language=config.language,
        min_word_length=config.min_word_length,
        whitelist_size=len(config.whitelist),
        keywords=list(config.keywords),
    )
    return config
