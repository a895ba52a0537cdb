import json

import pytest

from fast_rules import Validator, ValidationException
from fast_rules.core.localization import (
    Messages,
    __,
    clear_cache,
    get_locale,
    set_locale,
    set_locale_path,
    trans,
)
from fast_rules.exceptions import TranslationNotFoundException


@pytest.fixture
def lang_dir(tmp_path):
    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    (lang_dir / "en.json").write_text(json.dumps({
        "greeting": "Hello {name}",
        "nested": {"farewell": "Bye {0}"},
        "salutation": "@greeting",
        "loop_a": "@loop_b",
        "loop_b": "@loop_a",
        "field_must_be_numeric": "@field_must_be_an_integer",
    }))
    (lang_dir / "sk.json").write_text(json.dumps({
        "required_field_missing": "Povinné pole '{0}' chýba.",
    }))
    set_locale_path(str(lang_dir))
    return lang_dir


def test_builtin_messages_with_positional_parameters():
    assert __('unknown_rule', ['positive']) == "Unknown rule 'positive'."
    assert trans('field_min_value', ('age', 18)) == "Field 'age' must have a minimum value of 18."


def test_missing_key_falls_back_to_default_or_key():
    assert __('missing.key', default='Fallback') == 'Fallback'
    assert __('missing.key') == 'missing.key'


def test_application_translations_override_and_extend(lang_dir):
    assert __('greeting', {'name': 'Bob'}) == 'Hello Bob'
    assert __('nested.farewell', ['Ana']) == 'Bye Ana'
    # Built-in keys not overridden are still available
    assert __('unknown_rule', ['x']) == "Unknown rule 'x'."


def test_aliases(lang_dir):
    assert __('salutation', {'name': 'Eve'}) == 'Hello Eve'
    assert __('field_must_be_numeric', ['price']) == "Field 'price' must be an integer."


def test_alias_cycle_is_not_resolved(lang_dir, caplog):
    assert __('loop_a', default='cycle') == 'cycle'
    assert 'Alias cycle' in caplog.text


def test_locale_switch_with_fallback(lang_dir):
    set_locale('sk')

    assert get_locale() == 'sk'
    assert __('required_field_missing', ['email']) == "Povinné pole 'email' chýba."
    # Falls back to English for keys the locale does not define
    assert __('unknown_rule', ['x']) == "Unknown rule 'x'."


def test_validator_messages_follow_the_locale(lang_dir):
    validator = Validator({'email': 'required'})
    set_locale('sk')

    with pytest.raises(ValidationException) as exc_info:
        validator.validate({})

    assert exc_info.value.message == "Povinné pole 'email' chýba."


def test_explicit_locale_argument(lang_dir):
    assert __('required_field_missing', ['a'], locale='sk') == "Povinné pole 'a' chýba."
    assert Messages('sk').get('required_field_missing', 'a') == "Povinné pole 'a' chýba."


def test_messages_are_strict():
    with pytest.raises(TranslationNotFoundException) as exc_info:
        Messages().get('no_such_message')

    assert exc_info.value.key == 'no_such_message'
    assert exc_info.value.locale == 'en'


def test_broken_translation_file_is_ignored(tmp_path, caplog):
    lang_dir = tmp_path / "broken"
    lang_dir.mkdir()
    (lang_dir / "en.json").write_text("{ not json")
    set_locale_path(str(lang_dir))

    assert __('unknown_rule', ['x']) == "Unknown rule 'x'."
    assert 'Could not load translation file' in caplog.text


def test_clear_cache_reloads_files(lang_dir):
    assert __('greeting', {'name': 'A'}) == 'Hello A'

    (lang_dir / "en.json").write_text(json.dumps({"greeting": "Hi {name}"}))
    assert __('greeting', {'name': 'A'}) == 'Hello A'

    clear_cache()
    assert __('greeting', {'name': 'A'}) == 'Hi A'


def test_bad_parameters_leave_text_unformatted():
    assert __('unknown_rule', {'name': 'x'}) == "Unknown rule '{0}'."
