"""
Configuration models for rule sets.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_definition import RuleDefinition

__all__ = [
    "RuleDefinition",
]
