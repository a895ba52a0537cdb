from typing import Dict, Optional, Type, TYPE_CHECKING

from fast_rules import config
from fast_rules.application import Application
from fast_rules.core.localization import set_locale, set_locale_path
from fast_rules.core.rule_registry import RuleRegistry, get_default_registry
from fast_rules.utils.env_utils import configure_env, env_flag
from fast_rules.utils.logging import setup_logging

if TYPE_CHECKING:
    from fast_rules.contracts.validator_rule import ValidatorRule


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    locale: Optional[str] = None,
    locale_path: Optional[str] = None,
    rules: Optional[Dict[str, Type['ValidatorRule']]] = None,
    warm_up: Optional[bool] = None,
    registry: Optional[RuleRegistry] = None,
) -> RuleRegistry:
    """
    Sets up validation for the application.
    - Loads environment variables
    - Sets up logging
    - Selects the locale and application translations
    - Registers application rules and optionally pre-instantiates every rule

    Calling it again is a no-op until `Application().reset()`.

    Args:
        env_file_name: Optional environment file name.
        log_file_name: Optional log file name (defaults to `LOG_FILE_NAME`).
        locale: Locale for validation messages in the current context.
        locale_path: Directory of `<locale>.json` files overriding built-in messages.
        rules: Application rule classes by rule name.
        warm_up: Instantiate every rule now. Defaults to the `VALIDATION_WARM_UP` env flag.
        registry: Registry to configure. Defaults to the process-wide registry.

    Returns:
        The configured registry.
    """
    app = Application()
    if app.is_booted():
        return app.registry

    app.set_boot_args(
        env_file_name=env_file_name,
        log_file_name=log_file_name,
        locale=locale,
        locale_path=locale_path,
        rules=rules,
        warm_up=warm_up,
    )

    configure_env(env_file_name)
    setup_logging(log_file_name)

    if locale_path is not None:
        set_locale_path(locale_path)
    if locale is not None:
        set_locale(locale)

    registry = registry or get_default_registry()
    app.set_registry(registry)

    for name, rule_class in (rules or {}).items():
        registry.register(name, rule_class)

    if warm_up is None:
        warm_up = env_flag("VALIDATION_WARM_UP", config.VALIDATION_WARM_UP.strip().lower() == "true")
    if warm_up:
        registry.warm_up()

    return registry
