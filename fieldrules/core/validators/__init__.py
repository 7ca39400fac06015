"""
Validation rule implementations.

Provides the BaseValidator contract and validators for required values,
regex patterns and matching sibling fields.
"""

from ..exceptions import InvalidConfigurationError
from .base_validator import BaseValidator, OptionsFormat, normalize_options
from .match_validator import MatchValidator
from .regex_validator import RegexValidator
from .required_validator import RequiredValidator

__all__ = [
    "BaseValidator",
    "InvalidConfigurationError",
    "OptionsFormat",
    "normalize_options",
    "RequiredValidator",
    "RegexValidator",
    "MatchValidator",
]
