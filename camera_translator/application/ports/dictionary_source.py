"""Dictionary Source port - where the translation tables come from."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.entities.dictionary import TranslationDictionary


@runtime_checkable
class DictionarySource(Protocol):
    """Port for loading the bilingual dictionary."""

    @property
    def location(self) -> str:
        """Human-readable location, used in logs and errors."""
        ...

    def load(self) -> TranslationDictionary:
        """Read and parse the dictionary.

        Raises:
            DictionaryError: If the source is missing or malformed
        """
        ...
