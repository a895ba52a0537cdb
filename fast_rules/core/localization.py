"""
Localization for fast-rules - the message source behind every rule message.

Core principles:
- Direct module-level state, shared by every validator
- Built-in messages ship in `fast_rules/lang/<locale>.json`; an application
  `LOCALE_PATH` directory with the same layout overrides them key by key
- Dot notation for nested keys: 'validation.custom'
- Aliases: a value of the form "@other_key" resolves to another key
- Thread-safe context-aware locale switching

Usage:
    from fast_rules.core.localization import __, set_locale, get_locale

    __('field_must_be_numeric', ['price'])           # Positional parameters
    __('greeting', {'name': 'John'})                 # Named parameters
    __('missing.key', default='Fallback')            # With default
    set_locale('es')                                 # Change locale

`__` never fails. Rules use the strict `Messages` source instead, which
raises `TranslationNotFoundException` for keys that cannot be resolved.
"""

import json
import logging
import threading
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from fast_rules import config
from fast_rules.contracts.message_source import MessageSource
from fast_rules.exceptions.common_exceptions import TranslationNotFoundException

logger = logging.getLogger(__name__)

_ALIAS_PREFIX = '@'

_translations: Dict[str, Dict[str, Any]] = {}
_translations_lock = threading.Lock()
_LOCALE_DEFAULT = config.LOCALE_DEFAULT
_LOCALE_FALLBACK = config.LOCALE_FALLBACK
_LOCALE_PATH = config.LOCALE_PATH
_current_locale: ContextVar[str] = ContextVar('locale', default=_LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[Any]:
    """Navigate nested dict with dot notation. Flat keys containing dots win."""
    if key in data:
        return data[key]
    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _read_locale_file(locale_file: Path) -> Dict[str, Any]:
    if not locale_file.exists():
        return {}
    try:
        with locale_file.open(encoding='utf-8') as f:
            translations = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load translation file {locale_file}: {e}")
        return {}
    if not isinstance(translations, dict):
        logger.warning(f"Translation file {locale_file} must contain a JSON object")
        return {}
    return translations


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    translations = _translations.get(locale)
    if translations is not None:
        return translations

    with _translations_lock:
        if locale in _translations:
            return _translations[locale]

        translations = {}
        for directory in (config.PACKAGE_LANG_PATH, _LOCALE_PATH):
            translations.update(_read_locale_file(Path(directory) / f"{locale}.json"))

        _translations[locale] = translations
        return translations


def _lookup(key: str, locale: str) -> Optional[str]:
    visited = []
    while True:
        if key in visited:
            logger.warning(f"Alias cycle detected with translation '{key}'")
            return None
        visited.append(key)

        text = _get_nested(_load_locale(locale), key)
        if not isinstance(text, str):
            return None
        if not text.startswith(_ALIAS_PREFIX):
            return text
        key = text[len(_ALIAS_PREFIX):]


def _resolve(key: str, locale: str) -> Optional[str]:
    translation = _lookup(key, locale)

    # Fallback to default locale if needed and different
    if translation is None and locale != _LOCALE_FALLBACK:
        translation = _lookup(key, _LOCALE_FALLBACK)

    return translation


def _format(text: str, args: Sequence[Any] = (), parameters: Optional[Mapping[str, Any]] = None) -> str:
    if not args and not parameters:
        return text
    try:
        return text.format(*args, **(parameters or {}))
    except (KeyError, IndexError, ValueError):
        return text


def __(key: str, parameters: Optional[Mapping[str, Any] | Sequence[Any]] = None,
      default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate with Laravel-style convenience.

    `parameters` may be a mapping (named placeholders) or a sequence
    (positional placeholders such as '{0}').

    Examples:
        __('unknown_rule', ['min'])                # Positional parameters
        __('greet', {'name': 'John'})              # Named parameters
        __('missing', default='Not found')         # With fallback
        __('title', locale='es')                   # Force locale
    """
    translation = _resolve(key, locale or _current_locale.get())

    if translation is None:
        translation = default or key

    if isinstance(parameters, Mapping):
        return _format(translation, (), parameters)
    if parameters:
        return _format(translation, tuple(parameters))
    return translation


def set_locale(locale: str) -> None:
    """Set the current locale for this context."""
    _current_locale.set(locale)


def get_locale() -> str:
    """Get the current locale."""
    return _current_locale.get()


def clear_cache() -> None:
    """Clear translation cache."""
    with _translations_lock:
        _translations.clear()


def set_locale_path(path: str) -> None:
    """Point the application translations at another directory and drop the cache."""
    global _LOCALE_PATH
    _LOCALE_PATH = path
    clear_cache()


trans = __


class Messages(MessageSource):
    """
    Strict message source used by the built-in rules.

    Resolves in the current context locale (or a fixed one, when given),
    then the fallback locale, and raises when neither has the key.
    """

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale

    def get(self, key: str, *args: Any) -> str:
        locale = self.locale or _current_locale.get()
        translation = _resolve(key, locale)
        if translation is None:
            raise TranslationNotFoundException(key, locale)
        return _format(translation, args)
