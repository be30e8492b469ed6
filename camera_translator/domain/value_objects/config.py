"""Configuration value objects with validation."""

from __future__ import annotations

import warnings
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from ...config import (
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_SPEECH_RATE,
    DEFAULT_SPEECH_VOLUME,
    FILTER_DEFAULTS,
    HISTORY_LIMIT,
    SINGLE_CHARACTER_ALLOWLIST,
    THINK_TIME_SECONDS,
)
from .language import Language


class FilterConfig(BaseModel):
    """Thresholds for filtering and ranking text observations."""

    model_config = {"frozen": True}

    min_confidence: float = Field(default=FILTER_DEFAULTS.min_confidence, ge=0.0, le=1.0)
    min_length: int = Field(default=FILTER_DEFAULTS.min_length, ge=1)
    min_text_height: float = Field(default=FILTER_DEFAULTS.min_text_height, ge=0.0, le=1.0)
    max_results: int = Field(default=FILTER_DEFAULTS.max_results, ge=1, le=50)

    # Readability heuristic
    min_letter_ratio: float = Field(default=FILTER_DEFAULTS.min_letter_ratio, ge=0.0, le=1.0)
    max_digit_ratio: float = Field(default=FILTER_DEFAULTS.max_digit_ratio, ge=0.0, le=1.0)
    single_character_allowlist: frozenset[str] = SINGLE_CHARACTER_ALLOWLIST

    # Minimum seconds between two OCR passes on the frame source
    process_interval: float = Field(default=FILTER_DEFAULTS.process_interval, ge=0.0)

    @field_validator('single_character_allowlist')
    @classmethod
    def validate_allowlist(cls, v: frozenset[str]) -> frozenset[str]:
        """Allow-list entries must be single characters."""
        bad = sorted(c for c in v if len(c) != 1)
        if bad:
            raise ValueError(f"Allow-list entries must be single characters: {bad}")
        return v


class TranslationConfig(BaseModel):
    """Settings for the translation resolution engine."""

    source_language: Language = Language.ENGLISH
    target_language: Language = Language.AZERBAIJANI
    dictionary_path: Path = DEFAULT_DICTIONARY_PATH

    # Simulated backend latency applied to cache misses
    think_time_seconds: float = Field(default=THINK_TIME_SECONDS, ge=0.0, le=10.0)
    history_limit: int = Field(default=HISTORY_LIMIT, ge=1, le=1000)
    # None keeps every result until the cache is cleared
    cache_max_entries: int | None = Field(default=None, ge=1)

    @model_validator(mode='after')
    def check_language_pair(self) -> TranslationConfig:
        """Warn when source and target language are the same."""
        if self.source_language == self.target_language:
            warnings.warn(
                f"source_language and target_language are both '{self.source_language.value}'"
            )
        return self


class SpeechConfig(BaseModel):
    """Settings for speech playback."""

    enabled: bool = True
    rate: float = Field(default=DEFAULT_SPEECH_RATE, ge=0.0, le=1.0)
    volume: float = Field(default=DEFAULT_SPEECH_VOLUME, ge=0.0, le=1.0)


__all__ = [
    'FilterConfig',
    'TranslationConfig',
    'SpeechConfig',
]
