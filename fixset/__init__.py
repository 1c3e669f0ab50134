"""FixSet - include/exclude rules for element names.

Decides whether string identifiers are covered by prefix, suffix and
exact-element rules, and strips matched prefixes and suffixes on request.

Example:
    >>> from fixset import FixSet
    >>> fix_set = FixSet({"include": {"prefixes": "a", "replace_prefix": True}})
    >>> fix_set.get_name("abc")
    'bc'
"""

from fixset.core.constants import FIXSET_VERSION, ErrorCode, FixType
from fixset.core.validators import ValidationError
from fixset.infrastructure.config_loader import ConfigError
from fixset.rules import NOT_COVERED, ConversionError, FixSet, Rule, RuleResult

__version__ = FIXSET_VERSION

__all__ = [
    "FixSet",
    "Rule",
    "RuleResult",
    "NOT_COVERED",
    "FixType",
    "ErrorCode",
    "ValidationError",
    "ConversionError",
    "ConfigError",
    "__version__",
]
