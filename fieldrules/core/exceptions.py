"""
Exceptions raised by the rule framework.

A failed rule is a normal outcome reported through validate()'s return value;
only programmer errors (bad options, bad context, bad patterns) raise.
"""

from typing import Any


class InvalidConfigurationError(ValueError):
    """Raised when a rule is given options, context or a prototype it cannot use."""

    def __init__(self, message: str, value: Any = None):
        self.message = message
        self.value = value
        super().__init__(message)
