"""
Pytest configuration and fixtures for fieldrules tests
"""
import pytest

from fieldrules.core.messages import ErrorMessage


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# MESSAGE FIXTURES
# =======================

class UppercaseErrorMessage(ErrorMessage):
    """Stand-in for a translating prototype: renders in upper case."""

    def render(self) -> str:
        return super().render().upper()


@pytest.fixture
def shared_prototype() -> ErrorMessage:
    """A single prototype handed to several validators."""
    return ErrorMessage()


@pytest.fixture
def uppercase_prototype() -> ErrorMessage:
    return UppercaseErrorMessage()


@pytest.fixture
def signup_form() -> dict:
    """Decoded sign-up form used as validation context."""
    return {
        "email": "jane@example.com",
        "email_confirm": "jane@example.com",
        "address": {"city": "Lisbon", "lines": ["Rua A", "2nd floor"]},
    }
