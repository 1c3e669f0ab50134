#!/usr/bin/env python3
"""Include/exclude composition of rules.

A FixSet combines an optional include rule and an optional exclude rule:
- Exclude rule is prioritized in decision: an excluded element is never covered
- Include rule is prioritized in naming: its stripped name is returned

Example:
    >>> fix_set = FixSet({
    ...     "include": {"prefixes": "a", "replace_prefix": True},
    ...     "exclude": {"prefixes": "aa"},
    ... })
    >>> fix_set.get_name("aAge")
    'Age'
    >>> fix_set.has("aaAge")
    False
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from fixset.core.constants import ConfigKey
from fixset.core.validators import validate_fix_set_config
from fixset.infrastructure.config_loader import load_file
from fixset.infrastructure.logger import get_logger
from fixset.rules.rule import Rule

# Result of get_name for elements not covered by the fix set
NOT_COVERED = None


def _build_rule(config: Optional[Dict[str, Any]]) -> Optional[Rule]:
    # None and {} both mean no rule
    if not config:
        return None
    return Rule(config)


class FixSet:
    """Filter combining include and exclude rules.

    If include or exclude is not given, or given as an empty dictionary, it
    is skipped. Both rules are built at construction and never change.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize fix set.

        Args:
            config: Dictionary with optional "include" and "exclude" rule configs

        Raises:
            ValidationError: If configuration is invalid
        """
        validate_fix_set_config(config)
        config = config or {}

        self._include = _build_rule(config.get(ConfigKey.INCLUDE))
        self._exclude = _build_rule(config.get(ConfigKey.EXCLUDE))

        get_logger().debug(
            "FixSet created",
            include=self._include is not None,
            exclude=self._exclude is not None,
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "FixSet":
        """Create fix set from a YAML configuration file.

        Args:
            file_path: Path to YAML file

        Returns:
            FixSet instance

        Raises:
            ConfigError: If file cannot be loaded
            ValidationError: If configuration is invalid
        """
        return cls(load_file(file_path))

    @property
    def include(self) -> Optional[Rule]:
        """Rule for included elements, if configured."""
        return self._include

    @property
    def exclude(self) -> Optional[Rule]:
        """Rule for excluded elements, if configured."""
        return self._exclude

    def get_name(
        self,
        element: str,
        replace_prefix: Optional[bool] = None,
        replace_suffix: Optional[bool] = None,
    ) -> Optional[str]:
        """Return element name if it is covered by the fix set.

        Prefix and suffix are stripped if requested by the deciding rule.

        Args:
            element: Element name to test
            replace_prefix: Override stripping of matched prefix for this call
            replace_suffix: Override stripping of matched suffix for this call

        Returns:
            Element name after replacement, or NOT_COVERED
        """
        excluded = (
            self._exclude.classify(element, replace_prefix, replace_suffix)
            if self._exclude is not None
            else None
        )
        included = (
            self._include.classify(element, replace_prefix, replace_suffix)
            if self._include is not None
            else None
        )

        if (excluded is not None and excluded.matched) or (
            included is not None and not included.matched
        ):
            result = NOT_COVERED
        elif included is not None:
            result = included.name
        elif excluded is not None:
            result = excluded.name
        else:
            result = element

        get_logger().debug("Element classified", element=element, result=result)
        return result

    def has(self, element: str) -> bool:
        """Return whether element is covered by the fix set.

        Args:
            element: Element name to test

        Returns:
            True if covered
        """
        return self.get_name(element) is not NOT_COVERED

    def filter(self, elements: Iterable[str]) -> Dict[str, str]:
        """Map covered elements to their names, in input order.

        Args:
            elements: Element names to test

        Returns:
            Dictionary of covered element to resolved name
        """
        names = {}
        for element in elements:
            name = self.get_name(element)
            if name is not NOT_COVERED:
                names[element] = name
        return names

    def __contains__(self, element: object) -> bool:
        return isinstance(element, str) and self.has(element)

    def __repr__(self) -> str:
        return f"FixSet(include={self._include!r}, exclude={self._exclude!r})"
