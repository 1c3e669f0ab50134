#!/usr/bin/env python3
r"""Prefix and suffix matching for element names.

This module provides the matcher layer used by rules:
- Conversion of scalar/collection configuration values to canonical forms
- Literal fixes escaped and anchored with \A (prefix) or \Z (suffix)
- Regex fixes validated for the proper anchor
- First-match-wins lookup over an ordered list of fixes
- Stripping of the matched prefix and suffix from a name

Example:
    >>> prefixes = FixMatcher(["a", re.compile(r"^x\d")], FixType.PREFIX)
    >>> prefixes.find("x1Name").pattern
    '^x\\d'
    >>> get_name_without_fix("aName", prefixes, None, True, False)
    'Name'
"""

import re
from typing import Any, FrozenSet, Iterator, List, Optional, Pattern, Tuple

from fixset.core.constants import FixType
from fixset.core.validators import COLLECTION_TYPES, ValidationError

SCALAR_TYPES = (str, re.Pattern)
PREFIX_ANCHORS = ("^", "\\A")
SUFFIX_ANCHORS = ("$", "\\Z")


class ConversionError(ValidationError):
    """Raised when a value cannot be converted to a list or set."""


def convert_to_list(value: Any = None) -> List[Any]:
    """Create a new list from a scalar, a collection, or None.

    Args:
        value: String, compiled regex, list, tuple, set, frozenset or None

    Returns:
        New list (empty for None)

    Raises:
        ConversionError: If value type cannot be converted
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (set, frozenset)):
        return [item for item in value]
    if isinstance(value, SCALAR_TYPES):
        return [value]

    raise ConversionError(f"Cannot convert {type(value).__name__} to list: {value!r}")


def convert_to_set(value: Any = None) -> FrozenSet[Any]:
    """Create a new frozenset from a scalar, a collection, or None.

    Args:
        value: String, compiled regex, list, tuple, set, frozenset or None

    Returns:
        New frozenset (empty for None)

    Raises:
        ConversionError: If value type cannot be converted
    """
    if value is None:
        return frozenset()
    if isinstance(value, COLLECTION_TYPES):
        return frozenset(value)
    if isinstance(value, SCALAR_TYPES):
        return frozenset([value])

    raise ConversionError(f"Cannot convert {type(value).__name__} to set: {value!r}")


def get_regexp(value: Any, fix_type: FixType) -> Pattern:
    """Convert a prefix or suffix into an anchored regular expression.

    Strings are escaped and anchored to the absolute start or end of the
    string, so a suffix never matches before a trailing newline. Compiled
    expressions are returned as they are if they carry one of
    PREFIX_ANCHORS or SUFFIX_ANCHORS.

    Args:
        value: String, compiled regex, or None
        fix_type: Whether value is a prefix or a suffix

    Returns:
        Compiled regular expression (empty expression for None)

    Raises:
        ValidationError: If a compiled expression lacks the required anchor
        ConversionError: If value type is not supported
    """
    if isinstance(value, re.Pattern):
        source = value.pattern
        if isinstance(source, bytes):
            raise ConversionError(f"Byte regular expressions are not supported: {value!r}")
        if fix_type == FixType.PREFIX and not source.startswith(PREFIX_ANCHORS):
            raise ValidationError('Prefix regular expression must begin with "^"')
        if fix_type == FixType.SUFFIX and not source.endswith(SUFFIX_ANCHORS):
            raise ValidationError('Suffix regular expression must end with "$"')
        return value

    if value is None:
        return re.compile("")

    if not isinstance(value, str):
        raise ConversionError(f"Cannot convert {type(value).__name__} to {fix_type.value}: {value!r}")

    source = re.escape(value)
    source = f"\\A{source}" if fix_type == FixType.PREFIX else f"{source}\\Z"
    return re.compile(source)


class FixMatcher:
    """Ordered, immutable list of anchored prefix or suffix expressions.

    Lookup is first-match-wins in configuration order; there is no
    longest-match tie-break.
    """

    __slots__ = ("_fix_type", "_patterns")

    def __init__(self, fixes: Any, fix_type: FixType):
        """Initialize matcher.

        Args:
            fixes: String, compiled regex, or a collection of them
            fix_type: Whether fixes are prefixes or suffixes
        """
        self._fix_type = fix_type
        self._patterns: Tuple[Pattern, ...] = tuple(
            get_regexp(fix, fix_type) for fix in convert_to_list(fixes)
        )

    @property
    def fix_type(self) -> FixType:
        """Whether this matcher holds prefixes or suffixes."""
        return self._fix_type

    @property
    def patterns(self) -> Tuple[Pattern, ...]:
        """Compiled expressions in configuration order."""
        return self._patterns

    def find(self, element: str) -> Optional[Pattern]:
        """Return the first expression found in element.

        Args:
            element: Element name to check

        Returns:
            Matching expression or None
        """
        for pattern in self._patterns:
            if pattern.search(element) is not None:
                return pattern
        return None

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        """Return number of fixes."""
        return len(self._patterns)

    def __repr__(self) -> str:
        sources = [p.pattern for p in self._patterns]
        return f"FixMatcher({sources!r}, {self._fix_type})"


def build_matcher(fixes: Any, fix_type: FixType) -> Optional[FixMatcher]:
    """Build a matcher, or None if the fixes are not configured.

    Args:
        fixes: Configured value (None means not in use)
        fix_type: Whether fixes are prefixes or suffixes

    Returns:
        FixMatcher or None
    """
    if fixes is None:
        return None
    return FixMatcher(fixes, fix_type)


def get_name_without_fix(
    element: str,
    prefixes: Optional[FixMatcher],
    suffixes: Optional[FixMatcher],
    replace_prefix: bool,
    replace_suffix: bool,
) -> Optional[str]:
    """Return element name if it has any of the prefixes or suffixes.

    The first matching prefix and the first matching suffix are looked up
    independently. Prefix is stripped first, then suffix is stripped from
    the already modified name.

    Args:
        element: Element to test
        prefixes: Prefix matcher or None
        suffixes: Suffix matcher or None
        replace_prefix: Whether to strip the matched prefix
        replace_suffix: Whether to strip the matched suffix

    Returns:
        Name after replacement, or None if no prefix or suffix matched
    """
    prefix = prefixes.find(element) if prefixes is not None else None
    suffix = suffixes.find(element) if suffixes is not None else None

    if prefix is None and suffix is None:
        return None

    name = element
    if replace_prefix and prefix is not None:
        name = prefix.sub("", name, count=1)
    if replace_suffix and suffix is not None:
        name = suffix.sub("", name, count=1)

    return name
