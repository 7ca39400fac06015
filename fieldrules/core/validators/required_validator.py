"""
RequiredValidator - ensures a value is present and not empty.
"""

from typing import Any

from .base_validator import BaseValidator


class RequiredValidator(BaseValidator):
    """
    Validates that a value is present.

    Fails if:
    - Value is None
    - Value is an empty string

    Falsy values such as 0, False or [] are considered present.
    """

    @property
    def default_template(self) -> str:
        return "This field is required"

    @property
    def labeled_template(self) -> str:
        return "{label} is required"

    def validate(self, value: Any, value_identifier: str | None = None) -> bool:
        present = value is not None and not (isinstance(value, str) and value == "")
        return self._record_result(value, present, value_identifier)

    @property
    def rule_type(self) -> str:
        return "required"
