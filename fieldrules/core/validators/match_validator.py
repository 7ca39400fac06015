"""
MatchValidator - validates that a value equals another field's value.
"""

from typing import Any

from .base_validator import BaseValidator


class MatchValidator(BaseValidator):
    """
    Validates that a value equals a sibling value from the context.

    Typical use: a "confirm e-mail" field must match the "email" field.

    Options:
    - item: Path of the sibling value in the context ("email", "user[email]")

    Fails when no item option is set or no context was attached.
    """

    @property
    def default_template(self) -> str:
        return "This input does not match {item}"

    @property
    def labeled_template(self) -> str:
        return "{label} does not match {item}"

    def validate(self, value: Any, value_identifier: str | None = None) -> bool:
        item = self.options.get("item")
        if item is None or self.context is None:
            return self._record_result(value, False, value_identifier)

        return self._record_result(value, value == self.context.get_item_value(item), value_identifier)

    @property
    def rule_type(self) -> str:
        return "match"
