"""
Low-level value checks shared by the built-in rules.

Each function answers a yes/no question about a value and never raises for
bad input; deciding what a `False` means is left to the rule.
"""

from __future__ import annotations

import importlib
import logging
import math
import os
import re
from datetime import datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError

from fast_rules.core.uploaded_file import UploadError, UploadedFile

logger = logging.getLogger(__name__)

_NUMERIC_STRING = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)
_INTEGER_STRING = re.compile(r"\s*[+-]?(0|[1-9]\d*)\s*", re.ASCII)
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Native finite numbers. NaN and infinities are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


def is_numeric(value: Any) -> bool:
    """Native numbers and strings such as `'12'`, `' -1.5e3 '` or `'.5'`."""
    if is_number(value):
        return True
    if not isinstance(value, str) or _NUMERIC_STRING.fullmatch(value) is None:
        return False
    # "1e999" overflows to inf
    return math.isfinite(float(value))


def is_integer_like(value: Any) -> bool:
    """
    Native integers, integral floats and decimal integer strings within the
    64-bit range. Leading zeros are rejected. Booleans never qualify.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return _INT_MIN <= value <= _INT_MAX
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer() and _INT_MIN <= value <= _INT_MAX
    if isinstance(value, str) and _INTEGER_STRING.fullmatch(value):
        return _INT_MIN <= int(value) <= _INT_MAX
    return False


def to_number(value: Any) -> int | float | Decimal:
    """Convert a value accepted by `is_numeric` to a comparable number."""
    if is_number(value):
        return value
    text = value.strip()
    if _INTEGER_STRING.fullmatch(text):
        return int(text)
    return float(text)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def byte_length(value: str) -> int:
    return len(value.encode('utf-8'))


def is_email_address(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


def match_regex(value: str, pattern: str) -> bool:
    """
    Search `value` for `pattern`. A pattern that does not compile is a
    non-match, never an error, so user supplied patterns cannot leak
    tracebacks.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        logger.warning(f"Invalid regex pattern {pattern!r}: {e}")
        return False
    return compiled.search(value) is not None


def match_datetime(value: str, fmt: str) -> bool:
    """Strict round trip: the value must parse and format back unchanged."""
    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError:
        return False
    return parsed.strftime(fmt) == value


@lru_cache(maxsize=256)
def resolve_enum_class(path: str) -> Optional[type[Enum]]:
    """Import an enum class from a dotted path such as `'app.enums.Status'`."""
    module = None
    attributes: list[str] = []
    parts = path.split('.')
    # Longest importable module prefix wins, the rest are attributes
    for index in range(len(parts) - 1, 0, -1):
        module_name = '.'.join(parts[:index])
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        attributes = parts[index:]
        break
    if module is None:
        return None

    target: Any = module
    for attribute in attributes:
        target = getattr(target, attribute, None)
        if target is None:
            return None
    if isinstance(target, type) and issubclass(target, Enum):
        return target
    return None


def is_enum_value(value: Any, enum_path: str) -> bool:
    """
    Backed enums (`int` or `str` mixins) match by value with the exact
    backing type; pure enums match by member name.
    """
    enum_class = resolve_enum_class(enum_path)
    if enum_class is None:
        return False

    if issubclass(enum_class, int):
        if not is_integer(value):
            return False
        return any(member.value == value for member in enum_class)
    if issubclass(enum_class, str):
        if not isinstance(value, str):
            return False
        return any(member.value == value for member in enum_class)

    return isinstance(value, str) and value in enum_class.__members__


def parse_uploaded_file(value: Any) -> Optional[UploadedFile]:
    try:
        return UploadedFile.model_validate(value)
    except ValidationError:
        return None


def is_uploaded_file(value: Any) -> bool:
    uploaded = parse_uploaded_file(value)
    if uploaded is None:
        return False
    return uploaded.error == UploadError.OK and os.path.isfile(uploaded.tmp_name)
