"""
FixSet Core: Configuration Validators.

This module validates the shape of rule and fix set configuration
dictionaries before any matcher is built. Validation only checks types and
keys; anchoring of regular expressions is checked while compiling fixes.
"""
import re
from typing import Any, Dict, Optional

from fixset.core.constants import (
    ELEMENT_KEYS,
    FIX_KEYS,
    FIX_SET_KEYS,
    FLAG_KEYS,
    RULE_KEYS,
    ErrorCode,
)

COLLECTION_TYPES = (list, tuple, set, frozenset)
# First matching fix wins, so fixes need a defined order
ORDERED_TYPES = (list, tuple)


class ValidationError(Exception):
    """Base exception for configuration errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def _path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def validate_elements(value: Any, field_name: str) -> bool:
    """Validate an exact-match element value.

    Accepts a string or a collection of strings.

    Args:
        value: Value to check
        field_name: Field path used in error messages

    Returns:
        True if valid

    Raises:
        ValidationError: If value has the wrong type
    """
    if isinstance(value, str):
        return True

    if not isinstance(value, COLLECTION_TYPES):
        raise ValidationError(
            f'"{field_name}" must be a string or a collection of strings: {value!r}'
        )

    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f'"{field_name}" items must be strings: {item!r}')

    return True


def validate_fixes(value: Any, field_name: str) -> bool:
    """Validate a prefix or suffix value.

    Accepts a string, a compiled regular expression, or a list or tuple of
    them. Sets are rejected because their iteration order is arbitrary.

    Args:
        value: Value to check
        field_name: Field path used in error messages

    Returns:
        True if valid

    Raises:
        ValidationError: If value has the wrong type
    """
    if isinstance(value, (str, re.Pattern)):
        return True

    if isinstance(value, (set, frozenset)):
        raise ValidationError(
            f'"{field_name}" must be an ordered list or tuple, not a set: {value!r}'
        )

    if not isinstance(value, ORDERED_TYPES):
        raise ValidationError(
            f'"{field_name}" must be a string, a regular expression or a list of them: '
            f"{value!r}"
        )

    for item in value:
        if not isinstance(item, (str, re.Pattern)):
            raise ValidationError(
                f'"{field_name}" items must be strings or regular expressions: {item!r}'
            )

    return True


def validate_rule_config(rule: Any, field_name: str = "") -> bool:
    """Validate rule configuration.

    Keys with a ``None`` value are treated as absent.

    Args:
        rule: Rule configuration dictionary
        field_name: Field path of the rule, used in error messages

    Returns:
        True if valid

    Raises:
        ValidationError: If rule is invalid
    """
    if not isinstance(rule, dict):
        label = f'"{field_name}"' if field_name else "Rule"
        raise ValidationError(f"{label} must be a dictionary: {rule!r}")

    unknown_fields = sorted(str(key) for key in set(rule.keys()) - RULE_KEYS)
    if unknown_fields:
        names = ", ".join(f'"{_path(field_name, key)}"' for key in unknown_fields)
        raise ValidationError(f"Unknown rule configuration fields: {names}")

    for key, value in rule.items():
        if value is None:
            continue

        path = _path(field_name, key)
        if key in ELEMENT_KEYS:
            validate_elements(value, path)
        elif key in FIX_KEYS:
            validate_fixes(value, path)
        elif key in FLAG_KEYS and not isinstance(value, bool):
            raise ValidationError(f'"{path}" must be boolean: {value!r}')

    return True


def validate_fix_set_config(config: Optional[Dict[str, Any]]) -> bool:
    """Validate fix set configuration structure.

    Args:
        config: Configuration dictionary with optional include/exclude rules

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    if config is None:
        return True

    if not isinstance(config, dict):
        raise ValidationError(f"Fix set configuration must be a dictionary: {config!r}")

    unknown_fields = sorted(str(key) for key in set(config.keys()) - FIX_SET_KEYS)
    if unknown_fields:
        names = ", ".join(f'"{key}"' for key in unknown_fields)
        raise ValidationError(f"Unknown fix set configuration fields: {names}")

    for key, rule in config.items():
        if rule is not None:
            validate_rule_config(rule, key)

    return True
