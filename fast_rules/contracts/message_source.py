from abc import ABC, abstractmethod
from typing import Any


class MessageSource(ABC):
    """Resolves a message key and positional arguments to display text."""

    @abstractmethod
    def get(self, key: str, *args: Any) -> str:
        """
        Raises:
            TranslationNotFoundException: If the key cannot be resolved.
        """
        raise NotImplementedError
