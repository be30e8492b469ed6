"""Bilingual dictionary entity."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from ...config import PHRASE_KEY_SEPARATOR

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# target language code -> translation
Translations = Mapping[str, str]


def normalize_word_key(text: str) -> str:
    """Lowercase, trim and collapse inner whitespace to single spaces."""
    return _WHITESPACE_RE.sub(" ", text.strip()).lower()


def normalize_phrase_key(text: str) -> str:
    """Lowercase and join whitespace-separated parts with the phrase separator."""
    return _WHITESPACE_RE.sub(PHRASE_KEY_SEPARATOR, text.strip()).lower()


@dataclass(frozen=True, slots=True)
class DictionaryMetadata:
    """Descriptive fields shipped with the dictionary file."""
    version: str
    languages: tuple[str, ...]
    last_updated: str
    total_entries: int


def _normalize_table(
    table: Mapping[str, Mapping[str, str]],
    normalize: Callable[[str], str],
    kind: str
) -> Mapping[str, Translations]:
    normalized: dict[str, Translations] = {}
    for key, translations in table.items():
        norm_key = normalize(key)
        if not norm_key:
            continue
        if norm_key in normalized:
            # First entry in file order wins
            logger.debug(f"Duplicate {kind} key '{key}' ignored (normalizes to '{norm_key}')")
            continue
        normalized[norm_key] = MappingProxyType(dict(translations))
    return MappingProxyType(normalized)


class TranslationDictionary:
    """Immutable word and phrase tables.

    Keys are normalized once at construction so every lookup is a single
    hash probe; there is no case-insensitive scan.
    """

    def __init__(
        self,
        metadata: DictionaryMetadata,
        words: Mapping[str, Mapping[str, str]],
        phrases: Mapping[str, Mapping[str, str]]
    ):
        self._metadata = metadata
        self._words = _normalize_table(words, normalize_word_key, "word")
        self._phrases = _normalize_table(phrases, normalize_phrase_key, "phrase")

    @property
    def metadata(self) -> DictionaryMetadata:
        return self._metadata

    @property
    def words(self) -> Mapping[str, Translations]:
        return self._words

    @property
    def phrases(self) -> Mapping[str, Translations]:
        return self._phrases

    @property
    def word_count(self) -> int:
        return len(self._words)

    @property
    def phrase_count(self) -> int:
        return len(self._phrases)

    def lookup_phrase(self, text: str, target: str) -> str | None:
        entry = self._phrases.get(normalize_phrase_key(text))
        return entry.get(target) if entry else None

    def lookup_word(self, text: str, target: str) -> str | None:
        entry = self._words.get(normalize_word_key(text))
        return entry.get(target) if entry else None

    def lookup(self, text: str, target: str) -> str | None:
        """Find an exact translation, phrases before words.

        Args:
            text: Source text in any case
            target: Target language code

        Returns:
            Translation, or None when neither table has an entry for the target
        """
        translation = self.lookup_phrase(text, target)
        if translation is None:
            translation = self.lookup_word(text, target)
        return translation

    def has_translation(self, text: str, target: str) -> bool:
        return self.lookup(text, target) is not None

    def search_similar(self, text: str, target: str, limit: int) -> list[str]:
        """Find entries whose key contains the search term or is contained in it.

        Returns:
            Up to ``limit`` strings of the form ``key → translation``,
            words first, phrase keys shown with spaces
        """
        term = normalize_word_key(text)
        if not term:
            return []

        results: list[str] = []
        for key, translations in self._words.items():
            if (term in key or key in term) and target in translations:
                results.append(f"{key} → {translations[target]}")

        for key, translations in self._phrases.items():
            readable = key.replace(PHRASE_KEY_SEPARATOR, " ")
            if (term in readable or readable in term) and target in translations:
                results.append(f"{readable} → {translations[target]}")

        return results[:limit]
