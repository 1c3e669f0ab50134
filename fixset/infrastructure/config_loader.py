#!/usr/bin/env python3
"""YAML configuration loading for FixSet.

This module reads fix set configuration from YAML files:
- ``!regex`` tag for anchored regular-expression prefixes and suffixes
- Optional top-level ``fixset:`` wrapper key
- Environment variable overrides for replace flags (FIXSET_*)

Example:
    >>> config = load_file("fixset.yaml")
    >>> fix_set = FixSet(config)

A file looks like::

    fixset:
      include:
        prefixes: [a, !regex '^x\\d']
        replace_prefix: true
      exclude:
        except: [aa]
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from fixset.core.constants import ENV_PREFIX, FIX_SET_KEYS, FLAG_KEYS, ConfigKey, ErrorCode
from fixset.infrastructure.logger import get_logger


class ConfigError(Exception):
    """Configuration loading error."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class FixSetLoader(yaml.SafeLoader):
    """Safe YAML loader understanding the ``!regex`` tag."""


def _construct_regex(loader: yaml.SafeLoader, node: yaml.Node) -> re.Pattern:
    source = loader.construct_scalar(node)
    try:
        return re.compile(source)
    except re.error as e:
        raise yaml.constructor.ConstructorError(
            None, None, f"invalid regular expression {source!r}: {e}", node.start_mark
        )


FixSetLoader.add_constructor("!regex", _construct_regex)


def parse_yaml(text: str) -> Dict[str, Any]:
    """Parse fix set configuration from YAML text.

    Args:
        text: YAML document

    Returns:
        Configuration dictionary (``fixset:`` wrapper removed)

    Raises:
        ConfigError: If text is not valid YAML or not a mapping
    """
    try:
        config_data = yaml.load(text, Loader=FixSetLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error: {e}", ErrorCode.INVALID_INPUT)

    if config_data is None:
        return {}

    if not isinstance(config_data, dict):
        raise ConfigError("Invalid config format: top level must be a mapping")

    if set(config_data.keys()) == {ConfigKey.ROOT}:
        config_data = config_data[ConfigKey.ROOT] or {}
        if not isinstance(config_data, dict):
            raise ConfigError(f"Invalid config format: '{ConfigKey.ROOT}' must be a mapping")

    return config_data


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise ConfigError(f"Environment variable {key} must be boolean: {value!r}")


def apply_environment(
    config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Apply replace flag overrides from environment variables.

    Variables are named FIXSET_<RULE>_<FLAG>, for example
    FIXSET_INCLUDE_REPLACE_PREFIX=true. An override only applies to a rule
    that is configured.

    Args:
        config: Configuration dictionary
        environ: Environment mapping, defaults to os.environ

    Returns:
        New configuration dictionary with overrides applied
    """
    if environ is None:
        environ = os.environ

    result = dict(config)
    for rule_key in sorted(FIX_SET_KEYS):
        rule = result.get(rule_key)
        if not isinstance(rule, dict) or not rule:
            continue

        overrides = {}
        for flag in sorted(FLAG_KEYS):
            env_key = f"{ENV_PREFIX}{rule_key}_{flag}".upper()
            if env_key in environ:
                overrides[flag] = _parse_bool(env_key, environ[env_key])

        if overrides:
            get_logger().debug("Applying environment overrides", rule=rule_key, **overrides)
            result[rule_key] = {**rule, **overrides}

    return result


def load_file(
    file_path: Union[str, Path], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Load fix set configuration from a YAML file.

    Args:
        file_path: Path to YAML config file
        environ: Environment mapping for overrides, defaults to os.environ

    Returns:
        Configuration dictionary ready for FixSet

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    logger = get_logger()
    path = Path(file_path).expanduser().resolve()

    if not path.exists():
        logger.error("Config file not found", path=str(path))
        raise ConfigError(f"Config file not found: {file_path}", ErrorCode.NOT_FOUND)

    logger.info("Loading fix set configuration", path=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Config file unreadable", path=str(path), error=str(e))
        raise ConfigError(f"Error loading config {file_path}: {e}", ErrorCode.INTERNAL_ERROR)

    try:
        config_data = parse_yaml(text)
    except ConfigError as e:
        logger.error("Config file invalid", path=str(path), error=e.message)
        raise ConfigError(f"{e.message} in {file_path}", e.error_code)

    return apply_environment(config_data, environ)
