"""Contract classes and abstract interfaces.

These are the building blocks used across the package and are exported so
they can be imported directly from :mod:`fast_rules`.
"""

from .message_source import MessageSource
from .meta_rule import MetaRule
from .middleware import Middleware
from .validator_rule import ValidatorRule

__all__ = [
    "MessageSource",
    "MetaRule",
    "Middleware",
    "ValidatorRule",
]
