"""
Unit tests for context wrappers.
"""

import pytest

from fieldrules.core.context import ArrayWrapper, ContextWrapper
from fieldrules.core.exceptions import InvalidConfigurationError

pytestmark = pytest.mark.unit


class TestArrayWrapper:
    """Tests for ArrayWrapper lookups"""

    def test_top_level_item(self, signup_form):
        assert ArrayWrapper(signup_form).get_item_value("email") == "jane@example.com"

    @pytest.mark.parametrize("path", ["address[city]", "address.city"])
    def test_nested_item(self, signup_form, path):
        assert ArrayWrapper(signup_form).get_item_value(path) == "Lisbon"

    def test_list_index(self, signup_form):
        assert ArrayWrapper(signup_form).get_item_value("address[lines][1]") == "2nd floor"

    @pytest.mark.parametrize(
        "path",
        ["phone", "address[zip]", "address[lines][5]", "address[lines][first]", "email[0]", ""],
    )
    def test_missing_item_returns_none(self, signup_form, path):
        assert ArrayWrapper(signup_form).get_item_value(path) is None

    def test_empty_wrapper(self):
        assert ArrayWrapper().get_item_value("anything") is None

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidConfigurationError):
            ArrayWrapper(["a", "b"])

    def test_is_context_wrapper(self):
        assert isinstance(ArrayWrapper({}), ContextWrapper)


class TestCustomContextWrapper:
    """A caller-supplied wrapper can back context-aware rules"""

    def test_custom_wrapper_used_by_match(self):
        from fieldrules.core.validators import MatchValidator

        class StaticContext(ContextWrapper):
            def get_item_value(self, item):
                return "secret" if item == "password" else None

        validator = MatchValidator({"item": "password"}).set_context(StaticContext())
        assert validator.validate("secret") is True
        assert validator.validate("guess") is False
