#!/usr/bin/env python3
"""Single rule evaluation for element names.

A rule consists of exact elements, exceptions, prefixes, suffixes and
exception prefixes/suffixes. Individual elements are then tested for
whether they are covered by the rule.

Resolution order (first applicable wins):
1. ``except`` contains element → not matched
2. ``elements`` contains element → matched, name unchanged
3. Exception prefix/suffix found → not matched, name stripped
4. Prefix/suffix configured → matched (stripped) if found, else not matched
5. Nothing configured → matched

Example:
    >>> rule = Rule({"prefixes": "a", "replace_prefix": True})
    >>> rule.classify("abc")
    RuleResult(matched=True, name='bc')
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, Optional

from fixset.core.constants import ConfigKey, FixType
from fixset.core.validators import validate_rule_config
from fixset.infrastructure.logger import get_logger
from fixset.rules.patterns import FixMatcher, build_matcher, convert_to_set, get_name_without_fix


@dataclass(frozen=True)
class RuleResult:
    """Outcome of classifying one element against a rule."""

    matched: bool
    name: str

    def __iter__(self) -> Iterator[Any]:
        return iter((self.matched, self.name))

    def __bool__(self) -> bool:
        return self.matched


class Rule:
    """Filter rule deciding whether element names are covered.

    All criteria are built once at construction and never mutated, so a
    rule can be shared between threads.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize rule.

        Args:
            config: Rule configuration dictionary

        Raises:
            ValidationError: If configuration is invalid
        """
        if config is None:
            config = {}
        validate_rule_config(config)

        elements = config.get(ConfigKey.ELEMENTS)
        excepted = config.get(ConfigKey.EXCEPT)

        self._elements: Optional[FrozenSet[str]] = (
            convert_to_set(elements) if elements is not None else None
        )
        self._except: Optional[FrozenSet[str]] = (
            convert_to_set(excepted) if excepted is not None else None
        )
        self._prefixes = build_matcher(config.get(ConfigKey.PREFIXES), FixType.PREFIX)
        self._suffixes = build_matcher(config.get(ConfigKey.SUFFIXES), FixType.SUFFIX)
        self._except_prefixes = build_matcher(config.get(ConfigKey.EXCEPT_PREFIXES), FixType.PREFIX)
        self._except_suffixes = build_matcher(config.get(ConfigKey.EXCEPT_SUFFIXES), FixType.SUFFIX)
        self._replace_prefix = bool(config.get(ConfigKey.REPLACE_PREFIX) or False)
        self._replace_suffix = bool(config.get(ConfigKey.REPLACE_SUFFIX) or False)

        get_logger().debug(
            "Rule created",
            elements=len(self._elements) if self._elements is not None else None,
            excepted=len(self._except) if self._except is not None else None,
            prefixes=_count(self._prefixes),
            suffixes=_count(self._suffixes),
            except_prefixes=_count(self._except_prefixes),
            except_suffixes=_count(self._except_suffixes),
            replace_prefix=self._replace_prefix,
            replace_suffix=self._replace_suffix,
        )

    @property
    def replace_prefix(self) -> bool:
        """Default for stripping a matched prefix."""
        return self._replace_prefix

    @property
    def replace_suffix(self) -> bool:
        """Default for stripping a matched suffix."""
        return self._replace_suffix

    def classify(
        self,
        element: str,
        replace_prefix: Optional[bool] = None,
        replace_suffix: Optional[bool] = None,
    ) -> RuleResult:
        """Classify element against this rule.

        Args:
            element: Element name to test
            replace_prefix: Override stripping of matched prefix for this call
            replace_suffix: Override stripping of matched suffix for this call

        Returns:
            Whether element is covered and its name after replacement
        """
        if replace_prefix is None:
            replace_prefix = self._replace_prefix
        if replace_suffix is None:
            replace_suffix = self._replace_suffix

        if self._except is not None and element in self._except:
            return RuleResult(False, element)

        if self._elements is not None and element in self._elements:
            return RuleResult(True, element)

        # An exception criterion that finds nothing does not decide; fall through.
        if self._except_prefixes is not None or self._except_suffixes is not None:
            exception_name = get_name_without_fix(
                element, self._except_prefixes, self._except_suffixes, replace_prefix, replace_suffix
            )
            if exception_name is not None:
                return RuleResult(False, exception_name)

        if self._prefixes is not None or self._suffixes is not None:
            name = get_name_without_fix(
                element, self._prefixes, self._suffixes, replace_prefix, replace_suffix
            )
            if name is None:
                return RuleResult(False, element)
            return RuleResult(True, name)

        return RuleResult(True, element)

    # Historical name
    has = classify

    def __repr__(self) -> str:
        return (
            f"Rule(elements={self._elements!r}, except={self._except!r}, "
            f"prefixes={self._prefixes!r}, suffixes={self._suffixes!r}, "
            f"except_prefixes={self._except_prefixes!r}, "
            f"except_suffixes={self._except_suffixes!r}, "
            f"replace_prefix={self._replace_prefix}, replace_suffix={self._replace_suffix})"
        )


def _count(matcher: Optional[FixMatcher]) -> Optional[int]:
    return len(matcher) if matcher is not None else None
