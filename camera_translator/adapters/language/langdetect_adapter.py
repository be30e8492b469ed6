"""Language identification adapter backed by langdetect."""

from __future__ import annotations

import logging

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

# langdetect is non-deterministic unless seeded
DetectorFactory.seed = 0


class LangDetectIdentifier:
    """Guesses the dominant language of a string with langdetect."""

    @property
    def name(self) -> str:
        return "langdetect"

    def identify(self, text: str) -> str | None:
        if not text or not text.strip():
            return None
        try:
            code = detect(text)
        except LangDetectException as e:
            logger.debug(f"No language guess for '{text[:30]}': {e}")
            return None
        return code or None
