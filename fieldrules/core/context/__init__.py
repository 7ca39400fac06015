"""
Data wrappers used as validation context for cross-field rules.
"""

from .wrapper import ArrayWrapper, ContextWrapper

__all__ = [
    "ContextWrapper",
    "ArrayWrapper",
]
