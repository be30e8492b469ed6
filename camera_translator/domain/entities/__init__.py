"""Domain entities."""

from .dictionary import DictionaryMetadata, TranslationDictionary
from .text_region import RankedRegion, TextObservation
from .translation import DictionaryStatus, TranslationResult, TranslationState
from .voice import Utterance, Voice, VoiceQuality

__all__ = [
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
]
