"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement validate() and
rule_type. The base class owns option handling, context injection and the
error message protocol shared by every rule.
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping
from urllib.parse import parse_qsl

from ..context import ArrayWrapper, ContextWrapper
from ..exceptions import InvalidConfigurationError
from ..messages import ErrorMessage
from ...observability.logger import get_logger

logger = get_logger("fieldrules.rules")


class OptionsFormat(str, Enum):
    """Accepted shapes for rule options."""

    EMPTY = "empty"
    MAPPING = "mapping"
    JSON = "json"
    QUERY = "query"


def detect_options_format(options: Any) -> OptionsFormat:
    """
    Tag raw options with the shape they were supplied in.

    Raises:
        InvalidConfigurationError: If options are not a mapping or a string
    """
    # "0" is the one non-empty string that counts as no options
    if not options or options == "0":
        return OptionsFormat.EMPTY
    if isinstance(options, Mapping):
        return OptionsFormat.MAPPING
    if isinstance(options, str):
        if options.lstrip()[:1] in ("{", "["):
            return OptionsFormat.JSON
        return OptionsFormat.QUERY
    raise InvalidConfigurationError(
        "Validator options should be a mapping, JSON string or query string, "
        f"got {type(options).__name__}",
        value=options,
    )


def normalize_options(options: Any) -> dict[str, Any]:
    """
    Normalize rule options into a plain dict.

    Args:
        options: A mapping, a JSON object string ('{"pattern": "/^a/"}'),
                 a query string ("label=Name&pattern=abc") or None.
                 "[]" and "0" are read as no options.

    Returns:
        Option name -> value

    Raises:
        InvalidConfigurationError: If options have another shape or do not parse
    """
    options_format = detect_options_format(options)

    if options_format is OptionsFormat.EMPTY:
        return {}

    if options_format is OptionsFormat.MAPPING:
        return dict(options)

    if options_format is OptionsFormat.JSON:
        try:
            decoded = json.loads(options)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(f"Invalid JSON options: {e}", value=options) from e
        if decoded == []:
            return {}
        if not isinstance(decoded, dict):
            raise InvalidConfigurationError(
                "JSON options must decode to an object", value=options
            )
        return decoded

    try:
        return dict(parse_qsl(options, keep_blank_values=True, strict_parsing=True))
    except ValueError as e:
        raise InvalidConfigurationError(f"Invalid query string options: {e}", value=options) from e


def _encode_option_value(value: Any) -> Any:
    """
    JSON fallback for option values used in unique ids.

    Sets are sorted; other values use their repr, which must not be the
    address-bearing default from object.
    """
    if isinstance(value, set | frozenset):
        return sorted(value, key=repr)
    if type(value).__repr__ is object.__repr__:
        raise TypeError(f"{type(value).__name__} value has no stable representation")
    return repr(value)


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    A validator checks one value at a time and remembers the outcome of the
    last check so the error message can be produced afterwards. Instances are
    not safe for concurrent use: validate() and get_message() share state.

    Every option is also a message variable, so {pattern}, {label} and the
    like resolve in templates.
    """

    def __init__(self, options: Any = None):
        """
        Initialize validator.

        Args:
            options: Rule options as a mapping, JSON string or query string

        Raises:
            InvalidConfigurationError: If options cannot be normalized
        """
        self.options: dict[str, Any] = {}
        self.message_template: str | None = None
        self.success = False
        self.value: Any = None
        self.context: ContextWrapper | None = None
        self.error_message_prototype: ErrorMessage | None = None

        try:
            normalized = normalize_options(options)
        except InvalidConfigurationError as e:
            logger.warning(
                "Rejected validator options",
                extra={"validator": type(self).__name__, "error": e.message},
            )
            raise

        for name, value in normalized.items():
            self.set_option(name, value)

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    @property
    def default_template(self) -> str:
        """Message used when no label option is set."""
        return "Value is not valid"

    @property
    def labeled_template(self) -> str:
        """Message used when a label option is set."""
        return "{label} is not valid"

    @abstractmethod
    def validate(self, value: Any, value_identifier: str | None = None) -> bool:
        """
        Validate a value against this rule.

        Implementations must store the value in self.value and the outcome in
        self.success before returning it.

        Args:
            value: The value to validate
            value_identifier: Optional field name, for rules that look up
                              related values in the context

        Returns:
            True if the value passes the rule
        """
        pass

    def set_option(self, name: str, value: Any) -> "BaseValidator":
        self.options[name] = value
        return self

    def set_context(self, context: Mapping[str, Any] | ContextWrapper | None = None) -> "BaseValidator":
        """
        Attach the data the value under test comes from.

        Context-aware rules (e.g. matching a confirmation field) read sibling
        values through it. None leaves the current context unchanged.

        Raises:
            InvalidConfigurationError: If context is neither a mapping nor a ContextWrapper
        """
        if context is None:
            return self
        if isinstance(context, Mapping):
            context = ArrayWrapper(context)
        if not isinstance(context, ContextWrapper):
            logger.warning(
                "Rejected validator context",
                extra={"validator": type(self).__name__, "context_type": type(context).__name__},
            )
            raise InvalidConfigurationError(
                "Validator context must be either a mapping or a ContextWrapper instance",
                value=context,
            )
        self.context = context
        return self

    def set_message_template(self, template: str | None) -> "BaseValidator":
        """Use a custom message template instead of the class defaults."""
        self.message_template = template
        return self

    def get_message_template(self) -> str:
        if self.message_template:
            return self.message_template
        if self.options.get("label") is not None:
            return self.labeled_template
        return self.default_template

    def set_error_message_prototype(self, prototype: ErrorMessage) -> "BaseValidator":
        """
        Set the message every failure is cloned from.

        Pass an ErrorMessage subclass to translate or otherwise customize
        rendered messages.

        Raises:
            InvalidConfigurationError: If prototype is not an ErrorMessage
        """
        if not isinstance(prototype, ErrorMessage):
            raise InvalidConfigurationError(
                "Error message prototype must be an ErrorMessage instance",
                value=prototype,
            )
        self.error_message_prototype = prototype
        return self

    def get_error_message_prototype(self) -> ErrorMessage:
        if self.error_message_prototype is None:
            self.error_message_prototype = ErrorMessage()
        return self.error_message_prototype

    def get_message(self) -> ErrorMessage | None:
        """
        Return the error message for the last validation.

        Returns:
            None if the last validation passed, otherwise the message with
            the options and the tested value as variables
        """
        if self.success:
            return None
        message = self.get_potential_message()
        message.set_variables({"value": self.value})
        return message

    def get_potential_message(self) -> ErrorMessage:
        """
        Return the message this rule would produce on failure.

        Useful when the message is needed ahead of validation, e.g. for
        client-side hints.
        """
        message = self.get_error_message_prototype().clone()
        message.set_template(self.get_message_template())
        message.set_variables(self.options)
        return message

    def get_unique_id(self) -> str:
        """
        Identify this rule by its class and options.

        Two validators of the same class with equal options (in any order)
        share an id, so a caller can avoid attaching the same rule twice.

        Raises:
            InvalidConfigurationError: If an option value has no stable encoding
        """
        cls = type(self)
        options = {
            name if isinstance(name, str) else repr(name): value
            for name, value in self.options.items()
        }
        try:
            encoded = json.dumps(options, sort_keys=True, default=_encode_option_value)
        except TypeError as e:
            raise InvalidConfigurationError(
                f"Options of {cls.__name__} cannot be encoded: {e}", value=self.options
            ) from e
        return f"{cls.__module__}.{cls.__qualname__}|{encoded}"

    def _record_result(self, value: Any, success: bool, value_identifier: str | None = None) -> bool:
        self.value = value
        self.success = success
        if not success:
            logger.debug(
                "Validation failed",
                extra={"rule_type": self.rule_type, "field": value_identifier},
            )
        return success

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(options={self.options})"
