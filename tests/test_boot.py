from __future__ import annotations

import logging
import os
import sys
from typing import Any

import pytest

from fast_rules import RuleRegistry, Validator, ValidatorRule, ValidationException
from fast_rules.app_provider import boot
from fast_rules.core.localization import get_locale
from fast_rules.exceptions import EnvInvalidException
from fast_rules.utils.env_utils import configure_env, env_flag
from fast_rules.utils.logging import get_log_file_path, setup_logging


class SlugRule(ValidatorRule):
    name = 'slug'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if not isinstance(value, str) or not value.replace('-', '').isalnum():
            self.fail(field, 'field_must_match_pattern', 'slug')


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "log"))
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


def test_logging_uses_custom_file_name():
    setup_logging("validation.log")

    path = get_log_file_path()
    assert path is not None
    assert path.name == "validation.log"
    assert path.parent.name == "log"
    assert path.exists()


def test_boot_registers_rules_and_warms_up(fresh_app):
    registry = RuleRegistry()

    returned = boot(log_file_name="boot.log", rules={'slug': SlugRule}, warm_up=True, registry=registry)

    assert returned is registry
    assert fresh_app.registry is registry
    assert registry.is_warm()
    assert isinstance(registry.resolve('slug'), SlugRule)

    validator = Validator({'handle': ['required', 'slug']}, registry=registry)
    validator.validate({'handle': 'fast-rules'})
    with pytest.raises(ValidationException):
        validator.validate({'handle': 'not a slug!'})


def test_boot_is_idempotent(fresh_app):
    first = RuleRegistry()
    second = RuleRegistry()

    boot(log_file_name="boot.log", registry=first)
    assert boot(log_file_name="boot.log", registry=second) is first
    assert fresh_app.get_boot_args()["log_file_name"] == "boot.log"


def test_boot_warm_up_from_environment(fresh_app, monkeypatch):
    monkeypatch.setenv("VALIDATION_WARM_UP", "yes")
    registry = RuleRegistry()

    boot(log_file_name="boot.log", registry=registry)

    assert registry.is_warm()


def test_boot_without_warm_up_stays_lazy(fresh_app, monkeypatch):
    monkeypatch.setenv("VALIDATION_WARM_UP", "off")
    registry = RuleRegistry()

    boot(log_file_name="boot.log", registry=registry)

    assert not registry.is_warm()


def test_boot_sets_locale(fresh_app):
    boot(log_file_name="boot.log", locale="sk", registry=RuleRegistry())

    assert get_locale() == "sk"


def test_configure_env_loads_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env.testing"
    env_file.write_text("FAST_RULES_SAMPLE=loaded\n")
    monkeypatch.delenv("FAST_RULES_SAMPLE", raising=False)

    configure_env(str(env_file))

    assert os.environ["FAST_RULES_SAMPLE"] == "loaded"
    monkeypatch.delenv("FAST_RULES_SAMPLE")


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), (" on ", True), ("no", False), ("", False)])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("FAST_RULES_FLAG", raw)

    assert env_flag("FAST_RULES_FLAG") is expected


def test_env_flag_default_and_invalid(monkeypatch):
    monkeypatch.delenv("FAST_RULES_FLAG", raising=False)
    assert env_flag("FAST_RULES_FLAG", default=True) is True

    monkeypatch.setenv("FAST_RULES_FLAG", "maybe")
    with pytest.raises(EnvInvalidException):
        env_flag("FAST_RULES_FLAG")
