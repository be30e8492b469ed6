"""Voice fallback selection."""

from __future__ import annotations

from typing import Iterable, Mapping

from ...config import PREFERRED_VOICES, VOICE_FALLBACK_CHAINS
from ..entities.voice import Voice
from ..value_objects.language import Language


def _first_for_code(voices: list[Voice], code: str) -> Voice | None:
    return next((v for v in voices if v.language_code == code), None)


def select_voice(
    language: Language,
    available_voices: Iterable[Voice],
    preferred: Mapping[str, str] = PREFERRED_VOICES,
    fallback_chains: Mapping[str, tuple[str, ...]] = VOICE_FALLBACK_CHAINS
) -> Voice | None:
    """Pick the best voice for a language.

    Stages, first match wins:
        1. Preferred voice identifier for the language
        2. First voice whose locale is in the language
        3. First voice in each fallback language, in chain order
        4. None

    Args:
        language: Language to speak
        available_voices: Voices the synthesizer offers, in platform order
        preferred: Language code -> preferred voice identifier
        fallback_chains: Language code -> fallback language codes

    Returns:
        Selected voice, or None when nothing matches
    """
    voices = list(available_voices)
    code = language.value

    preferred_id = preferred.get(code)
    if preferred_id:
        voice = next((v for v in voices if v.identifier == preferred_id), None)
        if voice:
            return voice

    voice = _first_for_code(voices, code)
    if voice:
        return voice

    for fallback_code in fallback_chains.get(code, ()):
        voice = _first_for_code(voices, fallback_code)
        if voice:
            return voice

    return None
