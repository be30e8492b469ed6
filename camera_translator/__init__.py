"""Camera Translator - filter live OCR text and translate it offline."""

__version__ = "1.0.0"

from .adapters.dictionary.json_source import JSONDictionarySource
from .application.services.detection_pipeline import DetectionPipeline
from .application.services.speech_service import SpeechService
from .application.services.translation_engine import TranslationEngine
from .domain.services.region_ranking import rank_observations
from .domain.services.voice_selection import select_voice
from .domain.value_objects.config import FilterConfig, SpeechConfig, TranslationConfig
from .domain.value_objects.language import Language
from .exceptions import (
    CameraTranslatorError,
    ConfigurationError,
    DictionaryError,
    OCRError,
    SpeechError,
    ValidationError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'JSONDictionarySource',
    'DetectionPipeline',
    'SpeechService',
    'TranslationEngine',
    'rank_observations',
    'select_voice',
    'FilterConfig',
    'SpeechConfig',
    'TranslationConfig',
    'Language',
    'setup_logging',
    # Exceptions
    'CameraTranslatorError',
    'ConfigurationError',
    'DictionaryError',
    'OCRError',
    'SpeechError',
    'ValidationError',
]
