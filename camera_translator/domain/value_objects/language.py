"""Supported languages."""

from __future__ import annotations

from enum import Enum

from ...config import LANGUAGE_INFO


class Language(str, Enum):
    """Languages the dictionary and speech layer know about."""
    ENGLISH = "en"
    AZERBAIJANI = "az"
    RUSSIAN = "ru"
    GERMAN = "de"

    @property
    def display_name(self) -> str:
        return LANGUAGE_INFO[self.value][0]

    @property
    def flag(self) -> str:
        return LANGUAGE_INFO[self.value][1]

    @classmethod
    def from_code(cls, code: str | None) -> Language | None:
        """Map a language code or locale (``de``, ``de-DE``, ``ru_RU``) to a member.

        Returns:
            Matching language, or None for unknown and empty codes
        """
        if not code:
            return None
        base = code.replace("_", "-").split("-", 1)[0].strip().lower()
        try:
            return cls(base)
        except ValueError:
            return None
