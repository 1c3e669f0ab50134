"""FixSet Infrastructure Layer.

Services used by the rules layer:
- Logger: Structured logging system
- Config loader: YAML configuration with environment overrides
"""

from .config_loader import ConfigError, FixSetLoader, apply_environment, load_file, parse_yaml
from .logger import Logger, LogLevel, get_logger, set_global_logger

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "get_logger",
    "set_global_logger",
    # Config exports
    "ConfigError",
    "FixSetLoader",
    "apply_environment",
    "load_file",
    "parse_yaml",
]
