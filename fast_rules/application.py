from typing import Any, Dict, Optional

from fast_rules.core.rule_registry import RuleRegistry, get_default_registry
from fast_rules.decorators.singleton_decorator import singleton


@singleton
class Application:
    """
    Singleton container for boot state.
    Holds the arguments `boot()` was called with and the rule registry it configured.
    """

    def __init__(self):
        self._boot_args: Dict[str, Any] = {}
        self._registry: Optional[RuleRegistry] = None

    @property
    def registry(self) -> RuleRegistry:
        return self._registry or get_default_registry()

    def set_registry(self, registry: RuleRegistry) -> None:
        self._registry = registry

    def reset(self) -> None:
        """Reset the application state (useful for testing)."""
        self._boot_args.clear()
        self._registry = None

    def set_boot_args(self, **kwargs) -> None:
        """Set the boot arguments for the application."""
        self._boot_args = kwargs

    def get_boot_args(self) -> Dict[str, Any]:
        """Get the boot arguments for the application."""
        return self._boot_args

    def is_booted(self) -> bool:
        """Check if the application has been booted."""
        return len(self._boot_args.keys()) > 0
