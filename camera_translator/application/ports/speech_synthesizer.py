"""Speech Synthesizer port - interface for text-to-speech backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.entities.voice import Utterance, Voice


@runtime_checkable
class SpeechSynthesizer(Protocol):
    """Port for platform speech synthesis."""

    @property
    def is_speaking(self) -> bool:
        ...

    @property
    def is_paused(self) -> bool:
        ...

    def available_voices(self) -> list[Voice]:
        """Voices installed on the platform."""
        ...

    def speak(self, utterance: Utterance) -> None:
        """Start speaking.

        Raises:
            SpeechError: If the backend cannot play the utterance
        """
        ...

    def stop(self) -> None:
        ...

    def pause(self) -> None:
        ...

    def resume(self) -> None:
        ...
