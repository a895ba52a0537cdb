"""
Pytest configuration and shared fixtures for FastRules tests.
"""

import pytest
from faker import Faker

from fast_rules import config
from fast_rules.application import Application
from fast_rules.core.localization import clear_cache, set_locale, set_locale_path
from fast_rules.core.rule_registry import RuleRegistry

fake = Faker()


@pytest.fixture(autouse=True)
def reset_localization():
    """Every test starts and ends with the built-in English messages."""
    set_locale(config.LOCALE_DEFAULT)
    clear_cache()
    yield
    set_locale_path(config.LOCALE_PATH)
    set_locale(config.LOCALE_DEFAULT)


@pytest.fixture
def registry():
    """A fresh registry, so lazily created instances do not leak between tests."""
    return RuleRegistry()


@pytest.fixture
def fresh_app():
    app = Application()
    app.reset()
    yield app
    app.reset()


@pytest.fixture
def sample_user():
    """Provide a valid user payload."""
    return {
        "name": fake.name(),
        "email": fake.free_email(),
        "age": fake.random_int(min=18, max=99),
        "profile": {
            "company": fake.company(),
            "city": fake.city(),
        },
        "tags": [fake.word(), fake.word()],
    }


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
