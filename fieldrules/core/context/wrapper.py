"""
Context wrappers expose sibling field values to context-aware rules.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from ..exceptions import InvalidConfigurationError

# "address[city]", "items[0][sku]" and "address.city" all split into segments
PATH_SEGMENT_PATTERN = re.compile(r"[^.\[\]]+")


class ContextWrapper(ABC):
    """
    Uniform lookup over the data being validated.
    """

    @abstractmethod
    def get_item_value(self, item: str) -> Any:
        """
        Return the value stored under an item path.

        Args:
            item: Item path, e.g. "email" or "address[city]"

        Returns:
            The value, or None when the path does not resolve
        """
        pass


class ArrayWrapper(ContextWrapper):
    """
    ContextWrapper over a plain mapping (e.g. a decoded request body).
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise InvalidConfigurationError(
                f"ArrayWrapper expects a mapping, got {type(data).__name__}",
                value=data,
            )
        self.data = data

    def get_item_value(self, item: str) -> Any:
        segments = PATH_SEGMENT_PATTERN.findall(str(item))
        if not segments:
            return None

        current: Any = self.data
        for segment in segments:
            if isinstance(current, Mapping):
                if segment not in current:
                    return None
                current = current[segment]
            elif isinstance(current, Sequence) and not isinstance(current, str | bytes):
                if not segment.isdigit() or int(segment) >= len(current):
                    return None
                current = current[int(segment)]
            else:
                return None
        return current

    def __repr__(self) -> str:
        return f"ArrayWrapper(keys={list(self.data)})"
