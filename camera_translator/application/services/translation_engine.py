"""Translation resolution engine - dictionary lookup with cache and history."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import threading
from datetime import datetime

from ...config import (
    CONFIDENCE_NONE,
    DICTIONARY_NOT_LOADED,
    FALLBACK_LANGUAGE,
    SIMILAR_WORDS_LIMIT,
)
from ...domain.entities.dictionary import TranslationDictionary
from ...domain.entities.translation import DictionaryStatus, TranslationResult, TranslationState
from ...domain.services.translation_rules import apply_rules, score_confidence
from ...domain.value_objects.config import TranslationConfig
from ...domain.value_objects.language import Language
from ...exceptions import DictionaryError
from ..ports.cache import Cache, MemoryCache
from ..ports.dictionary_source import DictionarySource
from ..ports.event_publisher import EventPublisher, SimpleEventPublisher, TranslationEvent
from ..ports.language_identifier import LanguageIdentifier

logger = logging.getLogger(__name__)

CacheKey = tuple[str, Language, Language]


class TranslationEngine:
    """Resolves text to translations using an offline dictionary.

    Fresh resolutions run one at a time per engine and wait for the
    configured think time; cache hits return immediately. Every fresh result
    is written to the cache and the history together.

    Example:
        engine = TranslationEngine(JSONDictionarySource(path))
        result = await engine.resolve("Hello", Language.ENGLISH, Language.AZERBAIJANI)
    """

    def __init__(
        self,
        dictionary_source: DictionarySource,
        identifier: LanguageIdentifier | None = None,
        config: TranslationConfig | None = None,
        cache: Cache | None = None,
        events: EventPublisher | None = None
    ):
        self._config = config or TranslationConfig()
        self._source = dictionary_source
        self._identifier = identifier
        self._cache = cache if cache is not None else MemoryCache(self._config.cache_max_entries)
        self._events = events or SimpleEventPublisher()
        self._dictionary: TranslationDictionary | None = None

        # Guards cache and history so they never disagree
        self._record_lock = threading.Lock()
        self._loop_lock: tuple[asyncio.AbstractEventLoop, asyncio.Lock] | None = None

        self.state = TranslationState(
            source_language=self._config.source_language,
            target_language=self._config.target_language,
        )
        self.load_dictionary()

    @property
    def config(self) -> TranslationConfig:
        return self._config

    @property
    def dictionary(self) -> TranslationDictionary | None:
        return self._dictionary

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def subscribe_to_events(self, callback) -> None:
        """Subscribe to engine events."""
        self._events.subscribe(callback)

    # Dictionary loading

    def load_dictionary(self) -> bool:
        """Load (or reload) the dictionary, fully replacing the previous one.

        Failures are not raised: the engine switches to the error status and
        ``resolve`` answers with a placeholder until a reload succeeds.
        Cache and history are left untouched.

        Returns:
            True if the dictionary is ready
        """
        self.state.dictionary_status = DictionaryStatus.loading()
        try:
            self._dictionary = self._source.load()
        except DictionaryError as e:
            self._dictionary = None
            self.state.dictionary_status = DictionaryStatus.error(e.message)
            self.state.error = e.message
            logger.error(f"Failed to load translation dictionary: {e}")
        else:
            self.state.dictionary_status = DictionaryStatus.ready()
            self.state.error = None

        self._events.publish(TranslationEvent(
            stage="dictionary",
            message=self.state.dictionary_status.display_text
        ))
        return self.state.dictionary_status.is_ready

    def reload_dictionary(self) -> bool:
        """Re-read the dictionary source."""
        logger.info(f"Reloading dictionary from {self._source.location}")
        return self.load_dictionary()

    # Resolution

    def _resolve_lock(self) -> asyncio.Lock:
        """Lock serializing fresh resolutions, one per running event loop."""
        loop = asyncio.get_running_loop()
        if self._loop_lock is None or self._loop_lock[0] is not loop:
            self._loop_lock = (loop, asyncio.Lock())
        return self._loop_lock[1]

    def detect_language(self, text: str) -> Language:
        """Identify the language of text, falling back to the default language."""
        guess = self._identifier.identify(text) if self._identifier else None
        language = Language.from_code(guess)
        if language is None:
            logger.debug(f"No supported language guess ({guess!r}), using '{FALLBACK_LANGUAGE}'")
            return Language(FALLBACK_LANGUAGE)
        return language

    async def resolve(
        self,
        text: str,
        source: Language | None = None,
        target: Language | None = None
    ) -> TranslationResult:
        """Translate text from source to target language.

        Args:
            text: Text to translate
            source: Source language (identified from the text if None)
            target: Target language (current state target if None)

        Returns:
            Fresh result; on a cache hit, a copy of the cached result with a new timestamp
        """
        source_lang = source or self.detect_language(text)
        target_lang = target or self.state.target_language
        key: CacheKey = (text, source_lang, target_lang)

        cached = self._cached(key)
        if cached is not None:
            return cached

        async with self._resolve_lock():
            # An earlier queued request may have produced the same result
            cached = self._cached(key)
            if cached is not None:
                return cached

            if source_lang != self.state.source_language or target_lang != self.state.target_language:
                self.state.source_language = source_lang
                self.state.target_language = target_lang

            self.state.is_translating = True
            self.state.error = None
            self._events.publish(TranslationEvent(
                stage="started",
                message=f"Translating {source_lang.value} -> {target_lang.value}",
                text=text
            ))

            try:
                if self._config.think_time_seconds > 0:
                    await asyncio.sleep(self._config.think_time_seconds)
                result = self._translate(text, source_lang, target_lang)
            finally:
                self.state.is_translating = False

            if self._dictionary is not None:
                self._record(key, result)

            self._events.publish(TranslationEvent(
                stage="completed",
                message=result.translated_text,
                text=text
            ))
            return result

    def _cached(self, key: CacheKey) -> TranslationResult | None:
        cached = self._cache.get(key)
        if cached is None:
            return None
        logger.debug(f"Cache hit for: {key[0][:30]}")
        self._events.publish(TranslationEvent(
            stage="cache_hit",
            message=cached.translated_text,
            text=key[0]
        ))
        return dataclasses.replace(cached, timestamp=datetime.now())

    def _translate(self, text: str, source: Language, target: Language) -> TranslationResult:
        dictionary = self._dictionary
        if dictionary is None:
            return TranslationResult(
                original_text=text,
                translated_text=DICTIONARY_NOT_LOADED,
                source_language=source,
                target_language=target,
                confidence=CONFIDENCE_NONE,
            )

        outcome = apply_rules(dictionary, text, target.value)
        return TranslationResult(
            original_text=text,
            translated_text=outcome.text,
            source_language=source,
            target_language=target,
            confidence=score_confidence(outcome.text, text.strip(), outcome.assembled),
        )

    def _record(self, key: CacheKey, result: TranslationResult) -> None:
        with self._record_lock:
            self._cache.set(key, result)
            history = self.state.history
            history.insert(0, result)
            del history[self._config.history_limit:]

    # Management

    def clear_history(self) -> None:
        """Drop cache and history together."""
        with self._record_lock:
            self.state.history.clear()
            self._cache.clear()
        logger.info("Translation history and cache cleared")

    def switch_languages(self) -> None:
        """Swap source and target language."""
        state = self.state
        state.source_language, state.target_language = state.target_language, state.source_language

    # Dictionary utilities

    def has_translation(self, text: str, target: Language | None = None) -> bool:
        if self._dictionary is None:
            return False
        target_lang = target or self.state.target_language
        return self._dictionary.has_translation(text, target_lang.value)

    def dictionary_stats(self) -> tuple[int, int, list[str]]:
        """Return (word count, phrase count, metadata languages)."""
        if self._dictionary is None:
            return (0, 0, [])
        return (
            self._dictionary.word_count,
            self._dictionary.phrase_count,
            list(self._dictionary.metadata.languages),
        )

    def search_similar(self, text: str, language: Language | None = None) -> list[str]:
        """Find dictionary entries related to text, as ``key → translation`` strings."""
        if self._dictionary is None:
            return []
        target_lang = language or self.state.target_language
        return self._dictionary.search_similar(text, target_lang.value, SIMILAR_WORDS_LIMIT)
