"""Application layer - use cases and orchestration."""

from .services.detection_pipeline import DetectionPipeline
from .services.speech_service import SpeechService
from .services.translation_engine import TranslationEngine

__all__ = ['DetectionPipeline', 'SpeechService', 'TranslationEngine']
