from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

from fast_rules import RuleRegistry, ValidatorRule, get_default_registry
from fast_rules.core.rules import IntegerRule, get_builtin_rules


class UppercaseRule(ValidatorRule):
    name = 'uppercase'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if not isinstance(value, str) or value != value.upper():
            self.fail(field, 'field_must_be_a_string')


def test_builtin_names():
    assert set(get_builtin_rules()) == {
        'integer', 'numeric', 'string', 'array', 'min', 'max', 'minlength',
        'maxlength', 'email', 'regex', 'datetime', 'enum', 'file',
    }


def test_resolve_returns_shared_instance(registry):
    first = registry.resolve('integer')

    assert isinstance(first, IntegerRule)
    assert registry.resolve('integer') is first
    assert registry.resolve('INTEGER') is first
    assert registry.resolve('Integer') is first


def test_unknown_rule_resolves_to_none(registry):
    assert registry.resolve('doesNotExist') is None


def test_instances_share_the_registry_messages(registry):
    assert registry.resolve('email').messages is registry.messages


def test_register_application_rule(registry):
    registry.register('upperCase', UppercaseRule)

    assert 'uppercase' in registry.names()
    assert isinstance(registry.resolve('UPPERCASE'), UppercaseRule)


def test_register_replaces_cached_instance(registry):
    builtin = registry.resolve('string')
    registry.register('string', UppercaseRule)

    replacement = registry.resolve('string')
    assert replacement is not builtin
    assert isinstance(replacement, UppercaseRule)


def test_register_rejects_non_rules(registry):
    with pytest.raises(TypeError):
        registry.register('bad', dict)

    with pytest.raises(TypeError):
        registry.register('bad', UppercaseRule(registry.messages))


def test_warm_up_instantiates_everything(registry):
    assert not registry.is_warm()

    registry.warm_up()

    assert registry.is_warm()


def test_reset_drops_instances(registry):
    first = registry.resolve('min')
    registry.reset()

    assert registry.resolve('min') is not first


def test_concurrent_resolution_creates_one_instance(registry):
    with ThreadPoolExecutor(max_workers=8) as executor:
        resolved = list(executor.map(lambda _: registry.resolve('numeric'), range(64)))

    assert all(rule is resolved[0] for rule in resolved)


def test_default_registry_is_process_wide():
    assert get_default_registry() is get_default_registry()
