"""Configuration and constants for the Camera Translator project."""

from dataclasses import dataclass
from pathlib import Path


# Language metadata: code -> (display name, flag)
LANGUAGE_INFO: dict[str, tuple[str, str]] = {
    "en": ("English", "🇬🇧"),
    "az": ("Azerbaijani", "🇦🇿"),
    "ru": ("Russian", "🇷🇺"),
    "de": ("German", "🇩🇪"),
}

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "az"
# Used when language identification has no usable guess
FALLBACK_LANGUAGE = "en"


# Observation filtering
SINGLE_CHARACTER_ALLOWLIST: frozenset[str] = frozenset({"I", "A", "a"})

# Separator and barcode-like runs that never occur in readable text
BARCODE_PATTERNS: tuple[str, ...] = (
    "|||",
    "----",
    "====",
    "123456",
    "67890",
)


@dataclass(frozen=True)
class FilterDefaults:
    """Default thresholds for observation filtering."""
    min_confidence: float = 0.7
    min_length: int = 3
    min_text_height: float = 0.04  # Fraction of frame height
    max_results: int = 6
    min_letter_ratio: float = 0.5
    max_digit_ratio: float = 0.8
    process_interval: float = 0.5  # Seconds between OCR passes


FILTER_DEFAULTS = FilterDefaults()


# Translation
HISTORY_LIMIT = 50
THINK_TIME_SECONDS = 0.5
PHRASE_KEY_SEPARATOR = "_"
SIMILAR_WORDS_LIMIT = 10
DICTIONARY_NOT_LOADED = "Dictionary not loaded"

CONFIDENCE_FULL = 0.9
CONFIDENCE_PARTIAL = 0.5
CONFIDENCE_NONE = 0.0


# Speech
# Preferred voice identifiers per language
PREFERRED_VOICES: dict[str, str] = {
    "en": "com.apple.ttsbundle.Samantha-compact",
    "az": "com.apple.ttsbundle.siri_female_en-US_compact",
    "ru": "com.apple.ttsbundle.Milena-compact",
    "de": "com.apple.ttsbundle.Anna-compact",
}

# Languages tried, in order, when no voice matches the language itself.
# Azerbaijani is Turkic, so Turkish voices come before English ones.
VOICE_FALLBACK_CHAINS: dict[str, tuple[str, ...]] = {
    "az": ("tr", "en"),
}

# Expanded in insertion order before text is handed to the synthesizer
PRONUNCIATION_MAP: dict[str, str] = {
    "Dr.": "Doctor",
    "Mr.": "Mister",
    "Mrs.": "Misses",
    "Ms.": "Miss",
    "Prof.": "Professor",
    "&": "and",
    "@": "at",
    "%": "percent",
    "#": "number",
}

DEFAULT_SPEECH_RATE = 0.5
DEFAULT_SPEECH_VOLUME = 1.0
TRANSLATION_PITCH = 1.1
ORIGINAL_PITCH = 1.0


# Files
PACKAGE_DIR = Path(__file__).parent
DEFAULT_DICTIONARY_PATH = PACKAGE_DIR / "data" / "translations.json"

# Environment
DICTIONARY_PATH_KEY = "CAMERA_TRANSLATOR_DICTIONARY"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
