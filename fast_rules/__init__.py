"""
FastRules - declarative validation for Python applications

Declare rules per field and validate payloads against them:
- Rule mini-language ('required', 'min:10', 'regex:^[a-z]+$') mixed with plain predicates
- Presence rules (required, requiredWithout, nullable) resolved before value rules
- Dotted paths into nested mappings, lists and objects
- Localized, overridable error messages
- Quart integration (validate_request, validate_query, middlewares)

Think of it as Laravel-style request validation for Python.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-rules"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .app_provider import boot
from .application import Application
