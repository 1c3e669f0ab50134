"""FixSet Core - Shared constants and configuration validation.

Import specific names from submodules:
    from fixset.core.constants import ConfigKey, ErrorCode, FixType
    from fixset.core.validators import ValidationError, validate_rule_config
"""

from fixset.core import constants, validators

__all__ = [
    "constants",
    "validators",
]
