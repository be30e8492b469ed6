"""OCR Engine port - interface for text recognition."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.entities.text_region import TextObservation


@runtime_checkable
class OCREngine(Protocol):
    """Port for text recognition engines.

    Implementations wrap a platform recognizer (Vision, PaddleOCR, Tesseract...).
    """

    @property
    def name(self) -> str:
        """Engine name."""
        ...

    def recognize(self, frame: object) -> list[TextObservation]:
        """Recognize text in a camera frame.

        Args:
            frame: Opaque frame buffer from the capture pipeline

        Returns:
            Zero or more observations with normalized bounding boxes

        Raises:
            OCRError: If recognition fails
        """
        ...
