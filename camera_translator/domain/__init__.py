"""Domain layer - pure business logic."""

from .entities.dictionary import DictionaryMetadata, TranslationDictionary
from .entities.text_region import RankedRegion, TextObservation
from .entities.translation import DictionaryStatus, TranslationResult, TranslationState
from .entities.voice import Utterance, Voice, VoiceQuality
from .value_objects.config import FilterConfig, SpeechConfig, TranslationConfig
from .value_objects.geometry import BoundingBox
from .value_objects.language import Language

__all__ = [
    # Entities
    'DictionaryMetadata',
    'TranslationDictionary',
    'RankedRegion',
    'TextObservation',
    'DictionaryStatus',
    'TranslationResult',
    'TranslationState',
    'Utterance',
    'Voice',
    'VoiceQuality',
    # Value Objects
    'FilterConfig',
    'SpeechConfig',
    'TranslationConfig',
    'BoundingBox',
    'Language',
]
