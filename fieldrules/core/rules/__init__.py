"""
Rule registry and configuration management.
"""

from .registry import VALIDATOR_REGISTRY, create_validator
from .rule_config import RuleConfigBuilder, RuleConfigLoader, build_validators

__all__ = [
    "VALIDATOR_REGISTRY",
    "create_validator",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "build_validators",
]
