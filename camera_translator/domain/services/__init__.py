"""Domain services - pure business logic, no I/O."""

from .region_ranking import is_readable_text, rank_observations
from .speech_text import clamp_unit, clean_text_for_speech
from .translation_rules import apply_rules, score_confidence
from .voice_selection import select_voice

__all__ = [
    'is_readable_text',
    'rank_observations',
    'clamp_unit',
    'clean_text_for_speech',
    'apply_rules',
    'score_confidence',
    'select_voice',
]
