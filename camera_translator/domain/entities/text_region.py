"""Text region entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from ..value_objects.geometry import BoundingBox


@dataclass(frozen=True, slots=True)
class TextObservation:
    """Raw text candidate reported by the OCR engine for one frame."""
    text: str
    bounding_box: 'BoundingBox'
    confidence: float = 0.0

    @property
    def trimmed_text(self) -> str:
        return self.text.strip()


@dataclass(frozen=True, slots=True)
class RankedRegion:
    """A text region that survived filtering, ready for display.

    The id identifies this detection instance only; regions from different
    frames are never matched up.
    """
    text: str
    bounding_box: 'BoundingBox'
    confidence: float
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_observation(cls, observation: TextObservation) -> RankedRegion:
        return cls(
            text=observation.trimmed_text,
            bounding_box=observation.bounding_box,
            confidence=observation.confidence,
        )
