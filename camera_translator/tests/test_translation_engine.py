"""Tests for the translation resolution engine."""

import asyncio
import json
from unittest.mock import Mock

import pytest

from ..adapters.dictionary.json_source import JSONDictionarySource
from ..application.services.translation_engine import TranslationEngine
from ..domain.entities.translation import DictionaryState
from ..domain.value_objects.config import TranslationConfig
from ..domain.value_objects.language import Language

from .conftest import SAMPLE_DICTIONARY, write_dictionary

EN, AZ, DE, RU = Language.ENGLISH, Language.AZERBAIJANI, Language.GERMAN, Language.RUSSIAN


def resolve(engine, text, source=EN, target=AZ):
    return asyncio.run(engine.resolve(text, source, target))


def collect_stages(engine) -> list[str]:
    stages: list[str] = []
    engine.subscribe_to_events(lambda event: stages.append(event.stage))
    return stages


class TestResolve:
    """Tests for resolution results."""

    def test_word(self, engine):
        result = resolve(engine, "Hello")
        assert result.translated_text == "Salam"
        assert result.confidence == 0.9
        assert result.source_language == EN
        assert result.target_language == AZ

    def test_contains_original(self, engine):
        result = resolve(engine, "Taxi", target=DE)
        assert result.translated_text == "Taxi"
        assert result.confidence == 0.5

    def test_word_by_word(self, engine):
        result = resolve(engine, "Good morning")
        assert result.translated_text == "Yaxşı səhər"
        assert result.confidence == 0.5

    def test_phrase(self, engine):
        result = resolve(engine, "Thank you", target=DE)
        assert result.translated_text == "Danke"
        assert result.confidence == 0.9

    def test_untranslatable(self, engine):
        result = resolve(engine, "xyzzy")
        assert result.translated_text == "[xyzzy]"
        assert result.confidence == 0.0
        assert result.is_untranslated

    def test_missing_target_language(self, engine):
        result = resolve(engine, "Hello", target=RU)
        assert result.translated_text == "[Hello]"

    def test_updates_state_languages(self, engine):
        resolve(engine, "Hallo", source=DE, target=EN)
        assert engine.state.source_language == DE
        assert engine.state.target_language == EN

    def test_default_target_from_state(self, engine):
        result = asyncio.run(engine.resolve("Hello", EN))
        assert result.target_language == AZ

    def test_is_translating_reset(self, engine):
        resolve(engine, "Hello")
        assert engine.state.is_translating is False

    def test_is_translating_during_think_time(self, dictionary_path):
        config = TranslationConfig(dictionary_path=dictionary_path, think_time_seconds=0.05)
        engine = TranslationEngine(JSONDictionarySource(dictionary_path), config=config)

        async def run():
            task = asyncio.create_task(engine.resolve("Hello", EN, AZ))
            await asyncio.sleep(0.01)
            during = engine.state.is_translating
            await task
            after = engine.state.is_translating

            # Cache hits never enter the in-progress state
            hit = asyncio.create_task(engine.resolve("Hello", EN, AZ))
            await asyncio.sleep(0)
            during_hit = engine.state.is_translating
            await hit
            return during, after, during_hit

        assert asyncio.run(run()) == (True, False, False)

    def test_surrounding_whitespace_ignored_for_confidence(self, engine):
        result = resolve(engine, "Taxi ", target=DE)
        assert result.translated_text == "Taxi"
        assert result.confidence == 0.5

    def test_think_time(self, dictionary_path):
        config = TranslationConfig(dictionary_path=dictionary_path, think_time_seconds=0.05)
        engine = TranslationEngine(JSONDictionarySource(dictionary_path), config=config)

        async def run():
            loop = asyncio.get_running_loop()
            start = loop.time()
            await engine.resolve("Hello", EN, AZ)
            fresh = loop.time() - start
            start = loop.time()
            await engine.resolve("Hello", EN, AZ)
            return fresh, loop.time() - start

        fresh, cached = asyncio.run(run())
        assert fresh >= 0.04
        assert cached < 0.04


class TestCaching:
    """Tests for the cache and history."""

    def test_repeat_is_cache_hit(self, engine):
        stages = collect_stages(engine)
        first = resolve(engine, "Hello")
        second = resolve(engine, "Hello")

        assert stages == ["started", "completed", "cache_hit"]
        assert second.translated_text == first.translated_text
        assert second.confidence == first.confidence
        assert second.timestamp >= first.timestamp
        assert len(engine.state.history) == 1
        assert engine.cache_size == 1

    def test_cache_key_includes_languages(self, engine):
        resolve(engine, "Hello", target=AZ)
        result = resolve(engine, "Hello", target=DE)
        assert result.translated_text == "Hallo"
        assert engine.cache_size == 2

    def test_cache_key_is_exact_text(self, engine):
        resolve(engine, "Hello")
        resolve(engine, "hello")
        assert engine.cache_size == 2

    def test_history_newest_first(self, engine):
        resolve(engine, "Hello")
        resolve(engine, "Good morning")
        assert [r.original_text for r in engine.state.history] == ["Good morning", "Hello"]

    def test_history_capped(self, engine):
        for i in range(51):
            resolve(engine, f"word{i}")
        history = engine.state.history
        assert len(history) == 50
        assert history[0].original_text == "word50"
        assert history[-1].original_text == "word1"
        # Cache keeps everything
        assert engine.cache_size == 51

    def test_cache_max_entries(self, dictionary_path):
        config = TranslationConfig(
            dictionary_path=dictionary_path, think_time_seconds=0.0, cache_max_entries=2
        )
        engine = TranslationEngine(JSONDictionarySource(dictionary_path), config=config)
        for text in ("Hello", "Good", "Taxi"):
            resolve(engine, text)
        assert engine.cache_size == 2

    def test_clear_history(self, engine):
        stages = collect_stages(engine)
        resolve(engine, "Hello")
        engine.clear_history()
        assert engine.state.history == []
        assert engine.cache_size == 0

        resolve(engine, "Hello")
        assert stages == ["started", "completed", "started", "completed"]

    def test_switch_languages(self, engine):
        engine.switch_languages()
        assert engine.state.source_language == AZ
        assert engine.state.target_language == EN


class TestConcurrency:
    """Tests for serialized fresh resolutions."""

    @pytest.fixture
    def slow_engine(self, dictionary_path):
        config = TranslationConfig(dictionary_path=dictionary_path, think_time_seconds=0.01)
        return TranslationEngine(JSONDictionarySource(dictionary_path), config=config)

    def test_fresh_resolutions_do_not_overlap(self, slow_engine):
        stages = collect_stages(slow_engine)

        async def run():
            return await asyncio.gather(
                slow_engine.resolve("Hello", EN, AZ),
                slow_engine.resolve("Good morning", EN, AZ),
            )

        results = asyncio.run(run())
        assert [r.translated_text for r in results] == ["Salam", "Yaxşı səhər"]
        assert stages == ["started", "completed", "started", "completed"]

    def test_duplicate_requests_resolved_once(self, slow_engine):
        stages = collect_stages(slow_engine)

        async def run():
            return await asyncio.gather(*(slow_engine.resolve("Hello", EN, AZ) for _ in range(3)))

        results = asyncio.run(run())
        assert {r.translated_text for r in results} == {"Salam"}
        assert stages.count("started") == 1
        assert stages.count("cache_hit") == 2
        assert len(slow_engine.state.history) == 1

    def test_history_and_cache_agree(self, slow_engine):
        texts = ["Hello", "Good", "morning", "Taxi", "Hello"]

        async def run():
            await asyncio.gather(*(slow_engine.resolve(t, EN, AZ) for t in texts))

        asyncio.run(run())
        assert len(slow_engine.state.history) == slow_engine.cache_size == 4


class TestDictionaryLoading:
    """Tests for dictionary status and reloads."""

    def test_ready(self, engine):
        assert engine.state.dictionary_status.state is DictionaryState.READY
        assert engine.state.dictionary_status.display_text == "Dictionary ready"

    def test_missing_file(self, tmp_path):
        engine = TranslationEngine(
            JSONDictionarySource(tmp_path / "missing.json"),
            config=TranslationConfig(think_time_seconds=0.0),
        )
        status = engine.state.dictionary_status
        assert status.state is DictionaryState.ERROR
        assert status.display_text == "Error: missing.json not found"
        assert engine.state.error == "missing.json not found"

    def test_placeholder_when_not_loaded(self, tmp_path):
        engine = TranslationEngine(
            JSONDictionarySource(tmp_path / "missing.json"),
            config=TranslationConfig(think_time_seconds=0.0),
        )
        result = resolve(engine, "Hello")
        assert result.translated_text == "Dictionary not loaded"
        assert result.confidence == 0.0
        assert engine.cache_size == 0
        assert engine.state.history == []

    def test_reload_recovers(self, tmp_path):
        path = tmp_path / "translations.json"
        config = TranslationConfig(dictionary_path=path, think_time_seconds=0.0)
        engine = TranslationEngine(JSONDictionarySource(path), config=config)
        assert not engine.state.dictionary_status.is_ready

        write_dictionary(path)
        assert engine.reload_dictionary()
        assert engine.state.error is None
        assert resolve(engine, "Hello").translated_text == "Salam"

    def test_reload_keeps_cached_results(self, engine, dictionary_path):
        resolve(engine, "Hello")

        data = json.loads(json.dumps(SAMPLE_DICTIONARY))
        data["translations"]["hello"]["az"] = "Salamlar"
        write_dictionary(dictionary_path, data)
        engine.reload_dictionary()

        assert resolve(engine, "Hello").translated_text == "Salam"
        engine.clear_history()
        assert resolve(engine, "Hello").translated_text == "Salamlar"

    def test_failed_reload_clears_dictionary(self, engine, dictionary_path):
        dictionary_path.write_text("{not json", encoding="utf-8")
        assert not engine.reload_dictionary()
        assert engine.dictionary is None
        assert resolve(engine, "Good").translated_text == "Dictionary not loaded"

    def test_dictionary_event(self, dictionary_path):
        events = []
        engine = TranslationEngine(
            JSONDictionarySource(dictionary_path),
            config=TranslationConfig(think_time_seconds=0.0),
        )
        engine.subscribe_to_events(events.append)
        engine.reload_dictionary()
        assert [(e.stage, e.message) for e in events] == [("dictionary", "Dictionary ready")]


class TestLanguageDetection:
    """Tests for source language identification."""

    def test_identified_language_used(self, dictionary_path):
        identifier = Mock()
        identifier.identify.return_value = "de"
        engine = TranslationEngine(
            JSONDictionarySource(dictionary_path),
            identifier=identifier,
            config=TranslationConfig(think_time_seconds=0.0),
        )
        result = asyncio.run(engine.resolve("Guten Morgen", target=EN))
        assert result.source_language == DE
        identifier.identify.assert_called_once_with("Guten Morgen")

    @pytest.mark.parametrize("guess", [None, "fr", ""])
    def test_unsupported_guess_falls_back_to_english(self, dictionary_path, guess):
        identifier = Mock()
        identifier.identify.return_value = guess
        engine = TranslationEngine(
            JSONDictionarySource(dictionary_path),
            identifier=identifier,
            config=TranslationConfig(think_time_seconds=0.0),
        )
        assert engine.detect_language("Bonjour") == EN

    def test_no_identifier(self, engine):
        assert engine.detect_language("Привет") == EN


class TestDictionaryUtilities:

    def test_has_translation(self, engine):
        assert engine.has_translation("hello")
        assert engine.has_translation("Thank you", DE)
        assert not engine.has_translation("xyzzy")

    def test_dictionary_stats(self, engine):
        assert engine.dictionary_stats() == (4, 1, ["en", "az", "de"])

    def test_search_similar(self, engine):
        assert engine.search_similar("mor") == ["morning → səhər"]
        assert engine.search_similar("thank", DE) == ["thank you → Danke"]

    def test_utilities_without_dictionary(self, tmp_path):
        engine = TranslationEngine(
            JSONDictionarySource(tmp_path / "missing.json"),
            config=TranslationConfig(think_time_seconds=0.0),
        )
        assert not engine.has_translation("hello")
        assert engine.dictionary_stats() == (0, 0, [])
        assert engine.search_similar("hello") == []
