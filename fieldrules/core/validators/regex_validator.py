"""
RegexValidator - validates values against a regular expression pattern.
"""

import re
from functools import lru_cache
from re import Pattern
from typing import Any

from ..exceptions import InvalidConfigurationError
from .base_validator import BaseValidator

# Trailing modifiers accepted on delimited patterns such as "/^abc$/i"
PATTERN_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,  # str patterns are unicode already
    "S": 0,  # study hint
    "X": 0,  # re already rejects unknown escapes
    "J": 0,  # duplicate group names still fail to compile
    "n": 0,  # captures do not affect matching
}

# Modifiers rewritten into the pattern body by split_delimited_pattern
ANCHORED_MODIFIER = "A"
DOLLAR_ENDONLY_MODIFIER = "D"

# Modifiers re cannot express, e.g. "U" (swap greediness)
UNSUPPORTED_MODIFIERS = {"U"}

BRACKET_DELIMITERS = {"{": "}", "<": ">"}


def _dollar_end_only(body: str) -> str:
    """Replace every unescaped "$" outside a character class with "\\Z"."""
    result = []
    in_class = False
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\":
            result.append(body[i:i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            result.append(char)
            i += 1
            # "]" right after "[" or "[^" is a literal member
            if body[i:i + 1] == "^":
                result.append("^")
                i += 1
            if body[i:i + 1] == "]":
                result.append("]")
                i += 1
            continue
        elif char == "$":
            result.append(r"\Z")
            i += 1
            continue
        result.append(char)
        i += 1
    return "".join(result)


def split_delimited_pattern(pattern: str) -> tuple[str, int]:
    """
    Split a delimited pattern into its body and re flags.

    "/^[0-9]+$/i" -> ("^[0-9]+$", re.IGNORECASE). The "A" modifier anchors
    the body at the start of the value and "D" (without "m") makes "$" match
    only at the very end. Patterns written without delimiters are returned
    unchanged with no flags.

    Args:
        pattern: Pattern string, delimited or not

    Returns:
        (regex body, re flags)

    Raises:
        InvalidConfigurationError: If a modifier is unknown or cannot be expressed with re
    """
    if len(pattern) < 2:
        return pattern, 0

    opening = pattern[0]
    if opening.isalnum() or opening.isspace() or opening in "\\^$.*?([|+":
        return pattern, 0

    closing = BRACKET_DELIMITERS.get(opening, opening)
    end = pattern.rfind(closing)
    if end <= 0:
        return pattern, 0

    modifiers = pattern[end + 1:]
    if modifiers and not (modifiers.isascii() and modifiers.isalpha()):
        return pattern, 0

    known = set(PATTERN_FLAGS) | {ANCHORED_MODIFIER, DOLLAR_ENDONLY_MODIFIER}
    unsupported = sorted(set(modifiers) & UNSUPPORTED_MODIFIERS)
    unknown = sorted(set(modifiers) - known - UNSUPPORTED_MODIFIERS)
    if unsupported or unknown:
        raise InvalidConfigurationError(
            f"Regex modifiers {''.join(unsupported + unknown)!r} in {pattern!r} are not supported",
            value=pattern,
        )

    flags = 0
    for modifier in modifiers:
        flags |= PATTERN_FLAGS.get(modifier, 0)

    body = pattern[1:end]
    if DOLLAR_ENDONLY_MODIFIER in modifiers and "m" not in modifiers:
        body = _dollar_end_only(body)
    if ANCHORED_MODIFIER in modifiers:
        # verbose-mode comments run to the end of the line
        group_end = "\n)" if "x" in modifiers else ")"
        body = rf"\A(?:{body}{group_end}"
    return body, flags


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern:
    """
    Compile a (possibly delimited) pattern string.

    Raises:
        InvalidConfigurationError: If the pattern is not a valid regular expression
    """
    body, flags = split_delimited_pattern(pattern)
    try:
        return re.compile(body, flags)
    except re.error as e:
        raise InvalidConfigurationError(f"Invalid regex pattern {pattern!r}: {e}", value=pattern) from e


class RegexValidator(BaseValidator):
    """
    Validates that a value matches a regular expression.

    Options:
    - pattern: Regular expression, optionally delimited with trailing flags
               ("/^[0-9]+$/", "#^abc#i"). A compiled Pattern is used as-is.

    Without a pattern option every value passes.
    """

    @property
    def default_template(self) -> str:
        return "This input does not match the regular expression {pattern}"

    @property
    def labeled_template(self) -> str:
        return "{label} does not match the regular expression {pattern}"

    def validate(self, value: Any, value_identifier: str | None = None) -> bool:
        """
        Search the value for the pattern.

        Anchors belong in the pattern itself; None is tested as "".

        Raises:
            InvalidConfigurationError: If the configured pattern does not compile
        """
        pattern = self.options.get("pattern")
        if pattern is None:
            return self._record_result(value, True, value_identifier)

        if isinstance(pattern, Pattern):
            compiled = pattern
        elif isinstance(pattern, str):
            compiled = compile_pattern(pattern)
        else:
            raise InvalidConfigurationError(
                f"Pattern must be string or compiled Pattern, got {type(pattern).__name__}",
                value=pattern,
            )

        value_str = "" if value is None else str(value)
        return self._record_result(value, compiled.search(value_str) is not None, value_identifier)

    @property
    def rule_type(self) -> str:
        return "regex"
