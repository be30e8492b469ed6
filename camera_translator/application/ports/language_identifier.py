"""Language Identifier port - guesses the language of a string."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LanguageIdentifier(Protocol):
    """Port for language identification services."""

    def identify(self, text: str) -> str | None:
        """Return a best-guess language code, or None without a guess."""
        ...
