"""
FixSet Core: Constants and Type Definitions

This module provides package-wide constants, error codes, and configuration
keys for rule and fix set definitions.
"""
from enum import Enum, IntEnum
from typing import TypeAlias

# Version information
FIXSET_VERSION = "1.0.0"

# Prefix for environment variable overrides
ENV_PREFIX = "FIXSET_"


class ErrorCode(IntEnum):
    """Standardized error codes for FixSet operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad configuration value or shape
    NOT_FOUND = 2  # Configuration file doesn't exist
    INTERNAL_ERROR = 6  # Unexpected failure while loading


# Type aliases for clarity
Element: TypeAlias = str
ElementName: TypeAlias = str


class FixType(Enum):
    """Position a fix is anchored to."""

    PREFIX = "prefix"  # Anchored to start of string with ^
    SUFFIX = "suffix"  # Anchored to end of string with $


class ConfigKey:
    """Configuration dictionary keys."""

    # Fix set keys
    INCLUDE = "include"
    EXCLUDE = "exclude"

    # Rule keys
    ELEMENTS = "elements"
    EXCEPT = "except"
    PREFIXES = "prefixes"
    SUFFIXES = "suffixes"
    EXCEPT_PREFIXES = "except_prefixes"
    EXCEPT_SUFFIXES = "except_suffixes"
    REPLACE_PREFIX = "replace_prefix"
    REPLACE_SUFFIX = "replace_suffix"

    # Top-level wrapper key in YAML files
    ROOT = "fixset"


# Keys grouped by the kind of value they accept
FIX_SET_KEYS = frozenset({ConfigKey.INCLUDE, ConfigKey.EXCLUDE})
ELEMENT_KEYS = frozenset({ConfigKey.ELEMENTS, ConfigKey.EXCEPT})
FIX_KEYS = frozenset(
    {
        ConfigKey.PREFIXES,
        ConfigKey.SUFFIXES,
        ConfigKey.EXCEPT_PREFIXES,
        ConfigKey.EXCEPT_SUFFIXES,
    }
)
FLAG_KEYS = frozenset({ConfigKey.REPLACE_PREFIX, ConfigKey.REPLACE_SUFFIX})
RULE_KEYS = ELEMENT_KEYS | FIX_KEYS | FLAG_KEYS
