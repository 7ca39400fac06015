"""
Error message templates for validation failures.
"""

from .error_message import ErrorMessage

__all__ = [
    "ErrorMessage",
]
