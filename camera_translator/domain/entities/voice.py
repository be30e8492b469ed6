"""Speech voice entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VoiceQuality(str, Enum):
    """Quality tier reported by the synthesis backend."""
    DEFAULT = "default"
    ENHANCED = "enhanced"


@dataclass(frozen=True, slots=True)
class Voice:
    """A synthesis voice offered by the platform."""
    identifier: str
    language: str  # Locale, e.g. "en-US"
    name: str = ""
    quality: VoiceQuality = VoiceQuality.DEFAULT

    @property
    def language_code(self) -> str:
        """Language part of the locale, lowercased."""
        return self.language.replace("_", "-").split("-", 1)[0].lower()


@dataclass(frozen=True, slots=True)
class Utterance:
    """Text plus playback parameters handed to the synthesizer."""
    text: str
    voice: Voice | None
    rate: float
    volume: float
    pitch: float = 1.0
