"""Dictionary-driven translation rules and confidence scoring."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from ...config import CONFIDENCE_FULL, CONFIDENCE_NONE, CONFIDENCE_PARTIAL
from ..entities.dictionary import TranslationDictionary
from ..entities.translation import is_bracketed


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Translated text and whether it was assembled token by token."""
    text: str
    assembled: bool = False


def bracket(text: str) -> str:
    """Wrap text in the untranslated marker."""
    return f"[{text}]"


def strip_punctuation(token: str) -> str:
    """Remove leading and trailing Unicode punctuation from a token."""
    start, end = 0, len(token)
    while start < end and unicodedata.category(token[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(token[end - 1]).startswith("P"):
        end -= 1
    return token[start:end]


def apply_rules(dictionary: TranslationDictionary, text: str, target: str) -> RuleOutcome:
    """Translate text with the dictionary, first match wins.

    Algorithm:
        1. Exact phrase match, then exact word match
        2. Multi-token input: translate each token on its own (punctuation
           stripped), keep tokens without an entry, join with single spaces
        3. Nothing translatable: ``[text]``

    Args:
        dictionary: Loaded dictionary
        text: Source text
        target: Target language code

    Returns:
        Rule outcome
    """
    stripped = text.strip()
    if not stripped:
        return RuleOutcome(bracket(stripped))

    exact = dictionary.lookup(stripped, target)
    if exact is not None:
        return RuleOutcome(exact)

    tokens = stripped.split()
    if len(tokens) > 1:
        translated: list[str] = []
        for token in tokens:
            core = strip_punctuation(token)
            translation = dictionary.lookup(core, target) if core else None
            translated.append(translation if translation is not None else token)

        joined = " ".join(translated)
        if joined != " ".join(tokens):
            return RuleOutcome(joined, assembled=True)

    return RuleOutcome(bracket(stripped))


def score_confidence(translated: str, original: str, assembled: bool = False) -> float:
    """Score a translation by the shape of its output.

    - ``[text]`` marker: nothing translated, 0.0
    - assembled token by token, or still containing the original: 0.5
    - anything else: 0.9
    """
    if is_bracketed(translated):
        return CONFIDENCE_NONE
    if assembled or (original and original in translated):
        return CONFIDENCE_PARTIAL
    return CONFIDENCE_FULL
