from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from fast_rules.contracts.message_source import MessageSource
from fast_rules.core.localization import Messages
from fast_rules.exceptions.rule_exceptions import FieldNotFoundException

_INTEGER_KEY = re.compile(r"-?\d+")
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


class DataAccessor:
    """
    Read-only access to a payload of mappings, sequences and objects.

    Field names may be dotted paths (`'user.profile.name'`), resolved one hop
    at a time: key lookup for mappings, integer index for lists and tuples,
    attribute lookup for other objects. A missing hop anywhere means the
    whole path is absent. An existing field whose value is `None` is present.
    """

    def __init__(self, data: Any, messages: Optional[MessageSource] = None):
        if isinstance(data, DataAccessor):
            data = data.data
        self._data = data
        self._messages = messages or Messages()

    @property
    def data(self) -> Any:
        return self._data

    def has_field(self, field: str | int) -> bool:
        carry = self._data
        for subfield in self._split(field):
            found, carry = self._get_subfield(carry, subfield)
            if not found:
                return False
        return True

    def get_field(self, field: str | int) -> Any:
        """
        Raises:
            FieldNotFoundException: If any hop of the path is missing.
        """
        carry = self._data
        for subfield in self._split(field):
            found, carry = self._get_subfield(carry, subfield)
            if not found:
                raise FieldNotFoundException(self._not_found_message(field), field=field)
        return carry

    def get_field_or_default(self, field: str | int, default: Any = None) -> Any:
        if not self.has_field(field):
            return default
        return self.get_field(field)

    def __contains__(self, field: str | int) -> bool:
        return self.has_field(field)

    def __getitem__(self, field: str | int) -> Any:
        return self.get_field(field)

    def _not_found_message(self, field: str | int) -> str:
        return self._messages.get('field_does_not_exist', field)

    @staticmethod
    def _split(field: str | int) -> List[str | int]:
        if isinstance(field, str) and '.' in field:
            return field.split('.')
        return [field]

    @staticmethod
    def _candidate_keys(subfield: str | int) -> List[Any]:
        # "0" and 0 address the same key, as they would in a query string
        if isinstance(subfield, int):
            return [subfield, str(subfield)]
        if _INTEGER_KEY.fullmatch(subfield):
            return [subfield, int(subfield)]
        return [subfield]

    @classmethod
    def _get_subfield(cls, value: Any, subfield: str | int) -> tuple[bool, Any]:
        if isinstance(value, Mapping):
            for key in cls._candidate_keys(subfield):
                if key in value:
                    return True, value[key]
            return False, None

        if value is None or isinstance(value, _SCALAR_TYPES):
            return False, None

        # Named tuples answer to their field names as well as to indexes
        if isinstance(value, tuple) and isinstance(subfield, str) and subfield in getattr(type(value), '_fields', ()):
            return True, getattr(value, subfield)

        if isinstance(value, Sequence):
            index = subfield
            if isinstance(index, str):
                if not _INTEGER_KEY.fullmatch(index):
                    return False, None
                index = int(index)
            if 0 <= index < len(value):
                return True, value[index]
            return False, None

        name = str(subfield)
        attributes = getattr(value, '__dict__', None)
        if isinstance(attributes, Mapping) and name in attributes:
            return True, attributes[name]
        if name.startswith('_'):
            return False, None
        return cls._get_class_attribute(value, name)

    @staticmethod
    def _get_class_attribute(value: Any, name: str) -> tuple[bool, Any]:
        """Class-level attributes, properties and slots; methods are not fields."""
        for klass in type(value).__mro__:
            if name in vars(klass):
                declared = vars(klass)[name]
                break
        else:
            return False, None

        if callable(declared) or isinstance(declared, (classmethod, staticmethod)):
            return False, None
        try:
            return True, getattr(value, name)
        except AttributeError:
            # Unset slot
            return False, None
