"""
RuleDefinition model describing one configured rule for one field.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field


class RuleDefinition(BaseModel):
    """
    A rule attached to a field, as read from configuration.

    Attributes:
        rule_type: Registry name: "required", "regex", "match"
        field_name: Which field this rule applies to
        options: Rule options as a mapping, JSON string or query string
        message_template: Custom message overriding the rule's defaults
        enabled: Whether the rule is active
    """

    rule_type: Literal["required", "regex", "match"]
    field_name: str = Field(..., min_length=1)
    options: Dict[str, Any] | str | None = None
    message_template: str | None = None
    enabled: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "rule_type": "regex",
                "field_name": "postcode",
                "options": {"pattern": "/^[0-9]{5}$/", "label": "Postcode"},
                "message_template": None,
                "enabled": True
            }
        }
