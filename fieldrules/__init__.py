"""
fieldrules: pluggable value validation rules with templated error messages.
"""

from .core.context import ArrayWrapper, ContextWrapper
from .core.exceptions import InvalidConfigurationError
from .core.messages import ErrorMessage
from .core.validators import BaseValidator, MatchValidator, RegexValidator, RequiredValidator

__version__ = "0.1.0"

__all__ = [
    "ArrayWrapper",
    "BaseValidator",
    "ContextWrapper",
    "ErrorMessage",
    "InvalidConfigurationError",
    "MatchValidator",
    "RegexValidator",
    "RequiredValidator",
]
