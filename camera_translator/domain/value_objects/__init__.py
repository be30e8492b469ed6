"""Value objects - immutable data with validation."""

from .geometry import BoundingBox
from .language import Language
from .config import FilterConfig, TranslationConfig, SpeechConfig

__all__ = [
    'BoundingBox',
    'Language',
    'FilterConfig',
    'TranslationConfig',
    'SpeechConfig',
]
