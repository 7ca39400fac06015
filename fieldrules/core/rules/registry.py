"""
Registry mapping rule type names to validator classes.
"""

from typing import Any

from ..exceptions import InvalidConfigurationError
from ..validators import BaseValidator, MatchValidator, RegexValidator, RequiredValidator

VALIDATOR_REGISTRY: dict[str, type[BaseValidator]] = {
    "required": RequiredValidator,
    "regex": RegexValidator,
    "match": MatchValidator,
}


def create_validator(
    rule_type: str,
    options: Any = None,
    message_template: str | None = None,
) -> BaseValidator:
    """
    Instantiate a validator by its registry name.

    Args:
        rule_type: Registry name (required, regex, match)
        options: Rule options as a mapping, JSON string or query string
        message_template: Optional custom message template

    Returns:
        Configured validator

    Raises:
        InvalidConfigurationError: If the rule type is unknown or the options are invalid
    """
    validator_class = VALIDATOR_REGISTRY.get(rule_type)
    if not validator_class:
        raise InvalidConfigurationError(f"Unknown rule type: {rule_type}", value=rule_type)

    validator = validator_class(options)
    if message_template:
        validator.set_message_template(message_template)
    return validator
