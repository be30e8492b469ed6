"""Observation filtering and ranking - pure functions over one frame."""

from __future__ import annotations

import logging
from typing import Iterable

from ...config import BARCODE_PATTERNS
from ..entities.text_region import RankedRegion, TextObservation
from ..value_objects.config import FilterConfig

logger = logging.getLogger(__name__)


def is_readable_text(text: str, config: FilterConfig) -> bool:
    """Check that text looks linguistic rather than like noise or a barcode.

    Rules:
        1. Single characters only pass if allow-listed
        2. At least ``min_letter_ratio`` of characters are letters
        3. No separator or barcode substrings
        4. At most ``max_digit_ratio`` of characters are digits
    """
    total = len(text)
    if total == 0:
        return False

    if total == 1 and text not in config.single_character_allowlist:
        return False

    letters = sum(1 for c in text if c.isalpha())
    if letters / total < config.min_letter_ratio:
        return False

    if any(pattern in text for pattern in BARCODE_PATTERNS):
        return False

    digits = sum(1 for c in text if c.isnumeric())
    if digits / total > config.max_digit_ratio:
        return False

    return True


def is_valid_observation(observation: TextObservation, config: FilterConfig) -> bool:
    """Apply confidence, length, size and readability checks."""
    text = observation.trimmed_text

    if observation.confidence < config.min_confidence:
        return False

    # Allow-listed single characters are exempt from the length threshold
    if len(text) < config.min_length and text not in config.single_character_allowlist:
        return False

    if observation.bounding_box.height < config.min_text_height:
        return False

    return is_readable_text(text, config)


def rank_observations(
    observations: Iterable[TextObservation],
    config: FilterConfig | None = None
) -> list[RankedRegion]:
    """Filter one frame's observations and keep the most confident ones.

    Algorithm:
        1. Drop observations failing any predicate
        2. Stable sort by descending confidence (ties keep input order)
        3. Truncate to ``max_results``

    Args:
        observations: Raw OCR observations for a single frame
        config: Filter thresholds (defaults if None)

    Returns:
        New list of ranked regions; empty when nothing qualifies
    """
    config = config or FilterConfig()

    survivors: list[TextObservation] = []
    rejected = 0
    for observation in observations:
        if is_valid_observation(observation, config):
            survivors.append(observation)
        else:
            rejected += 1

    survivors.sort(key=lambda o: o.confidence, reverse=True)
    ranked = [RankedRegion.from_observation(o) for o in survivors[:config.max_results]]

    if rejected:
        logger.debug(f"Rejected {rejected} observations, kept {len(ranked)}")
    return ranked
