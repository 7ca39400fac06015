"""
ErrorMessage model: a template plus named variables, rendered on demand.

Rules never build messages from scratch; they clone a prototype ErrorMessage,
so a localized subclass can be swapped in without touching rule logic.
"""

import re
from typing import Any, Mapping

from pydantic import BaseModel, Field

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


class ErrorMessage(BaseModel):
    """
    A message template with `{name}` placeholders and the variables to fill them.

    Attributes:
        template: Message text, e.g. "{label} is required"
        variables: Placeholder name -> value (rendered with str())
    """

    template: str = ""
    variables: dict[str, Any] = Field(default_factory=dict)

    def set_template(self, template: str) -> "ErrorMessage":
        self.template = template
        return self

    def set_variables(self, variables: Mapping[str, Any]) -> "ErrorMessage":
        """Merge variables into the existing ones, overwriting by key."""
        self.variables.update(variables)
        return self

    def clone(self) -> "ErrorMessage":
        """
        Copy this message with its own variables container.

        Variables set on the clone never show up on the original (the
        prototype stays untouched across renders).
        """
        return self.model_copy(update={"variables": dict(self.variables)})

    def render(self) -> str:
        """
        Substitute every known placeholder.

        Placeholders without a matching variable are left as written.
        """

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name not in self.variables:
                return match.group(0)
            value = self.variables[name]
            return "" if value is None else str(value)

        return PLACEHOLDER_PATTERN.sub(replace, self.template)

    def __str__(self) -> str:
        return self.render()
