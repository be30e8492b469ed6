"""Application services - orchestrate use cases."""

from .detection_pipeline import DetectionPipeline
from .speech_service import SpeechService
from .translation_engine import TranslationEngine

__all__ = ['DetectionPipeline', 'SpeechService', 'TranslationEngine']
