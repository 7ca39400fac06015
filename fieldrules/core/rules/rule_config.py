"""
Rule configuration management.

Loads rule definitions from YAML files and builds validator instances
from them.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import InvalidConfigurationError
from ..models import RuleDefinition
from ..validators import BaseValidator
from ...observability.logger import get_logger
from .registry import create_validator

logger = get_logger("fieldrules.config")


def build_validators(definitions: list[RuleDefinition]) -> dict[str, list[BaseValidator]]:
    """
    Build validators for every enabled rule definition, grouped by field.

    A rule identical to one already attached to the same field (same type,
    same options) is skipped.

    Args:
        definitions: Rule definitions, in evaluation order

    Returns:
        Field name -> validators for that field

    Raises:
        InvalidConfigurationError: If a definition cannot be turned into a validator
    """
    validators: dict[str, list[BaseValidator]] = {}
    seen: dict[str, set[str]] = {}

    for definition in definitions:
        if not definition.enabled:
            continue

        validator = create_validator(
            definition.rule_type,
            definition.options,
            definition.message_template,
        )

        unique_id = validator.get_unique_id()
        field_ids = seen.setdefault(definition.field_name, set())
        if unique_id in field_ids:
            logger.info(
                "Skipping duplicate rule",
                extra={"field": definition.field_name, "rule_id": unique_id},
            )
            continue

        field_ids.add(unique_id)
        validators.setdefault(definition.field_name, []).append(validator)

    return validators


class RuleConfigLoader:
    """
    Loads rule definitions from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email:
        - type: required
          options:
            label: E-mail
        - type: regex
          options: '{"pattern": "/^[^@]+@[^@]+$/"}'
          message: "{label} must be an e-mail address"

      email_confirm:
        - type: match
          options: "item=email"
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[RuleDefinition]:
        """
        Load and parse rule definitions from the YAML file.

        Returns:
            Rule definitions in file order

        Raises:
            InvalidConfigurationError: If the YAML is invalid or a rule is malformed
        """
        try:
            with open(self.config_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise InvalidConfigurationError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise InvalidConfigurationError("'rules' section must map field names to rule lists")

        definitions = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise InvalidConfigurationError(f"Rules for field '{field_name}' must be a list")

            for rule_def in field_rule_list:
                definitions.append(self._parse_rule(str(field_name), rule_def))

        logger.info(
            "Loaded rule definitions",
            extra={"config_path": str(self.config_path), "rule_count": len(definitions)},
        )
        return definitions

    def build_validators(self) -> dict[str, list[BaseValidator]]:
        """Load the file and build validators grouped by field."""
        return build_validators(self.load_rules())

    def _parse_rule(self, field_name: str, rule_def: Any) -> RuleDefinition:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML

        Returns:
            Parsed rule definition

        Raises:
            InvalidConfigurationError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise InvalidConfigurationError(
                f"Rule for field '{field_name}' is missing 'type'", value=rule_def
            )

        try:
            return RuleDefinition(
                rule_type=rule_def["type"],
                field_name=field_name,
                options=rule_def.get("options", rule_def.get("params")),
                message_template=rule_def.get("message"),
                enabled=rule_def.get("enabled", True),
            )
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid rule for field '{field_name}': {e}", value=rule_def
            ) from e


class RuleConfigBuilder:
    """
    Programmatically build rule definitions (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[RuleDefinition] = []

    def add_required(self, field_name: str, label: str | None = None) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self._add("required", field_name, {}, label)

    def add_regex(self, field_name: str, pattern: str, label: str | None = None) -> "RuleConfigBuilder":
        """Add a regex rule."""
        return self._add("regex", field_name, {"pattern": pattern}, label)

    def add_match(self, field_name: str, item: str, label: str | None = None) -> "RuleConfigBuilder":
        """Add a rule requiring the field to equal another field."""
        return self._add("match", field_name, {"item": item}, label)

    def build(self) -> list[RuleDefinition]:
        """Build and return the rule definitions."""
        return self.rules

    def _add(
        self,
        rule_type: str,
        field_name: str,
        options: dict[str, Any],
        label: str | None,
    ) -> "RuleConfigBuilder":
        if label is not None:
            options["label"] = label
        self.rules.append(RuleDefinition(rule_type=rule_type, field_name=field_name, options=options))
        return self
