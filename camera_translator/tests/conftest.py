"""Shared fixtures."""

import json
from pathlib import Path

import pytest

from ..adapters.dictionary.json_source import JSONDictionarySource
from ..application.services.translation_engine import TranslationEngine
from ..domain.value_objects.config import TranslationConfig


SAMPLE_DICTIONARY = {
    "metadata": {
        "version": "test",
        "languages": ["en", "az", "de"],
        "lastUpdated": "2025-08-17",
        "totalEntries": 5,
    },
    "translations": {
        "hello": {"az": "Salam", "de": "Hallo"},
        "good": {"az": "Yaxşı", "de": "Gut"},
        "morning": {"az": "səhər", "de": "Morgen"},
        "taxi": {"az": "taksi", "de": "Taxi"},
    },
    "phrases": {
        "thank_you": {"az": "Təşəkkür edirəm", "de": "Danke"},
    },
}


def write_dictionary(path: Path, data: dict = SAMPLE_DICTIONARY) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def dictionary_path(tmp_path: Path) -> Path:
    return write_dictionary(tmp_path / "translations.json")


@pytest.fixture
def engine(dictionary_path: Path) -> TranslationEngine:
    """Engine over the sample dictionary without think time."""
    config = TranslationConfig(dictionary_path=dictionary_path, think_time_seconds=0.0)
    return TranslationEngine(JSONDictionarySource(dictionary_path), config=config)
