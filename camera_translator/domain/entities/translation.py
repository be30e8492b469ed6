"""Translation entities and engine state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..value_objects.language import Language


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of one resolution, cached or fresh."""
    original_text: str
    translated_text: str
    source_language: Language
    target_language: Language
    confidence: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_untranslated(self) -> bool:
        """Check if nothing in the text could be translated."""
        return is_bracketed(self.translated_text)


def is_bracketed(text: str) -> bool:
    """Check for the ``[text]`` marker used for untranslated output."""
    return text.startswith("[") and text.endswith("]")


class DictionaryState(str, Enum):
    """Lifecycle of the loaded dictionary."""
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DictionaryStatus:
    """Dictionary state plus the error message when loading failed."""
    state: DictionaryState
    message: str | None = None

    @classmethod
    def loading(cls) -> DictionaryStatus:
        return cls(DictionaryState.LOADING)

    @classmethod
    def ready(cls) -> DictionaryStatus:
        return cls(DictionaryState.READY)

    @classmethod
    def error(cls, message: str) -> DictionaryStatus:
        return cls(DictionaryState.ERROR, message)

    @property
    def is_ready(self) -> bool:
        return self.state is DictionaryState.READY

    @property
    def display_text(self) -> str:
        if self.state is DictionaryState.LOADING:
            return "Loading dictionary..."
        if self.state is DictionaryState.READY:
            return "Dictionary ready"
        return f"Error: {self.message}"


@dataclass(slots=True)
class TranslationState:
    """State the engine shares with presentation code.

    Only the engine writes to it; callers read it to drive their views.
    History is newest first.
    """
    source_language: Language = Language.ENGLISH
    target_language: Language = Language.AZERBAIJANI
    is_translating: bool = False
    history: list[TranslationResult] = field(default_factory=list)
    dictionary_status: DictionaryStatus = field(default_factory=DictionaryStatus.loading)
    error: str | None = None
