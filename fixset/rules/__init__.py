"""FixSet Rules System.

This module provides element name rules and their composition:
- FixMatcher: Ordered anchored prefix/suffix expressions
- Rule: Single rule classifying element names
- FixSet: Include/exclude composition of rules
"""

from .fix_set import NOT_COVERED, FixSet
from .patterns import (
    ConversionError,
    FixMatcher,
    build_matcher,
    convert_to_list,
    convert_to_set,
    get_name_without_fix,
    get_regexp,
)
from .rule import Rule, RuleResult

__all__ = [
    # Pattern matching
    "ConversionError",
    "FixMatcher",
    "build_matcher",
    "convert_to_list",
    "convert_to_set",
    "get_name_without_fix",
    "get_regexp",
    # Rules
    "Rule",
    "RuleResult",
    "FixSet",
    "NOT_COVERED",
]
