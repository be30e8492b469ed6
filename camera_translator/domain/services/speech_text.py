"""Text preparation for speech synthesis."""

from __future__ import annotations

import re
from typing import Mapping

from ...config import PRONUNCIATION_MAP

_BRACKETED_RE = re.compile(r"\[.*?\]")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text_for_speech(text: str, pronunciations: Mapping[str, str] = PRONUNCIATION_MAP) -> str:
    """Drop untranslated ``[...]`` markers and expand abbreviations."""
    cleaned = _BRACKETED_RE.sub("", text)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()

    for abbreviation, expansion in pronunciations.items():
        cleaned = cleaned.replace(abbreviation, expansion)

    return cleaned


def clamp_unit(value: float) -> float:
    """Clamp to [0.0, 1.0]."""
    return max(0.0, min(1.0, value))
