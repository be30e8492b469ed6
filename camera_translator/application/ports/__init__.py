"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .cache import Cache, MemoryCache
from .dictionary_source import DictionarySource
from .event_publisher import EventPublisher, SimpleEventPublisher, TranslationEvent
from .language_identifier import LanguageIdentifier
from .ocr_engine import OCREngine
from .speech_synthesizer import SpeechSynthesizer

__all__ = [
    'Cache',
    'MemoryCache',
    'DictionarySource',
    'EventPublisher',
    'SimpleEventPublisher',
    'TranslationEvent',
    'LanguageIdentifier',
    'OCREngine',
    'SpeechSynthesizer',
]
