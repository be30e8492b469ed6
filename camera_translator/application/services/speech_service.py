"""Speech service - prepares text and voices for the synthesizer."""

from __future__ import annotations

import logging

from ...config import ORIGINAL_PITCH, TRANSLATION_PITCH
from ...domain.entities.voice import Utterance, Voice, VoiceQuality
from ...domain.services.speech_text import clamp_unit, clean_text_for_speech
from ...domain.services.voice_selection import select_voice
from ...domain.value_objects.config import SpeechConfig
from ...domain.value_objects.language import Language
from ...exceptions import SpeechError
from ..ports.speech_synthesizer import SpeechSynthesizer

logger = logging.getLogger(__name__)


class SpeechService:
    """Speaks original and translated text through a synthesizer port.

    Backend failures are kept in ``error`` and never raised; translation and
    detection keep working without audio.
    """

    def __init__(self, synthesizer: SpeechSynthesizer, config: SpeechConfig | None = None):
        config = config or SpeechConfig()
        self._synthesizer = synthesizer
        self.enabled = config.enabled
        self.rate = config.rate
        self.volume = config.volume
        self.error: str | None = None
        self.current_utterance: Utterance | None = None

    @property
    def is_speaking(self) -> bool:
        return self._synthesizer.is_speaking

    def speak(self, text: str, language: Language, is_translation: bool = False) -> Utterance | None:
        """Speak text in a language.

        Args:
            text: Text to speak; ``[...]`` markers are skipped
            language: Language of the text
            is_translation: Use the slightly higher translation pitch

        Returns:
            The utterance handed to the synthesizer, or None if nothing was spoken
        """
        if not self.enabled or not text:
            return None

        self.stop()

        clean = clean_text_for_speech(text)
        if not clean:
            return None

        voice = self.best_voice(language)
        utterance = Utterance(
            text=clean,
            voice=voice,
            rate=self.rate,
            volume=self.volume,
            pitch=TRANSLATION_PITCH if is_translation else ORIGINAL_PITCH,
        )

        try:
            self._synthesizer.speak(utterance)
        except SpeechError as e:
            if e.voice_id is None and voice is not None:
                e.voice_id = voice.identifier
            logger.error(f"Speech failed with voice {e.voice_id or 'default'}: {e}")
            self.error = "Speech playback failed"
            return None

        self.error = None
        self.current_utterance = utterance
        return utterance

    def speak_original(self, text: str, language: Language) -> Utterance | None:
        return self.speak(text, language, is_translation=False)

    def speak_translation(self, text: str, language: Language) -> Utterance | None:
        return self.speak(text, language, is_translation=True)

    def stop(self) -> None:
        if self._synthesizer.is_speaking:
            self._synthesizer.stop()
            self.current_utterance = None

    def pause(self) -> None:
        if self._synthesizer.is_speaking and not self._synthesizer.is_paused:
            self._synthesizer.pause()

    def resume(self) -> None:
        if self._synthesizer.is_paused:
            self._synthesizer.resume()

    # Voices

    def best_voice(self, language: Language) -> Voice | None:
        voice = select_voice(language, self._synthesizer.available_voices())
        if voice is None:
            logger.debug(f"No voice for '{language.value}', using platform default")
        return voice

    def available_voices(self, language: Language) -> list[Voice]:
        return [v for v in self._synthesizer.available_voices() if v.language_code == language.value]

    def voice_info(self, language: Language) -> tuple[int, str]:
        """Return (voice count, quality label) for a language."""
        voices = self.available_voices(language)
        if any(v.quality is VoiceQuality.ENHANCED for v in voices):
            quality = "Enhanced"
        elif voices:
            quality = "Standard"
        else:
            quality = "Not Available"
        return len(voices), quality

    # Settings

    def set_rate(self, rate: float) -> None:
        self.rate = clamp_unit(rate)

    def set_volume(self, volume: float) -> None:
        self.volume = clamp_unit(volume)

    def toggle_enabled(self) -> bool:
        self.enabled = not self.enabled
        if not self.enabled:
            self.stop()
        return self.enabled
