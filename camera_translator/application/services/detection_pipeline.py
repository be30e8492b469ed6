"""Detection pipeline - throttles frames, runs OCR and ranks the results."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from ...domain.entities.text_region import RankedRegion
from ...domain.services.region_ranking import rank_observations
from ...domain.value_objects.config import FilterConfig
from ...exceptions import OCRError
from ..ports.ocr_engine import OCREngine

logger = logging.getLogger(__name__)


class DetectionPipeline:
    """Turns camera frames into the current set of ranked text regions.

    Frames arriving sooner than ``process_interval`` after the last accepted
    frame are skipped. Each accepted frame gets a generation number; results
    for a frame older than the latest accepted one are dropped, so the
    published regions always belong to the newest frame.

    Safe to call from several capture threads.
    """

    def __init__(
        self,
        ocr: OCREngine,
        config: FilterConfig | None = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self._ocr = ocr
        self._config = config or FilterConfig()
        self._clock = clock
        self._lock = threading.Lock()
        self._last_process_time: float | None = None
        self._generation = 0
        self._regions: list[RankedRegion] = []

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def regions(self) -> list[RankedRegion]:
        """Regions from the latest processed frame."""
        with self._lock:
            return list(self._regions)

    @property
    def is_processing(self) -> bool:
        """True while the latest frame produced regions."""
        with self._lock:
            return bool(self._regions)

    def _accept_frame(self) -> int | None:
        now = self._clock()
        with self._lock:
            last = self._last_process_time
            if last is not None and now - last < self._config.process_interval:
                return None
            self._last_process_time = now
            self._generation += 1
            return self._generation

    def process_frame(self, frame: object) -> list[RankedRegion] | None:
        """Run recognition on a frame and publish its ranked regions.

        Args:
            frame: Opaque frame buffer passed through to the OCR engine

        Returns:
            Ranked regions, or None if the frame was throttled or superseded
        """
        generation = self._accept_frame()
        if generation is None:
            return None

        try:
            observations = self._ocr.recognize(frame)
        except OCRError as e:
            if e.frame_id is None:
                e.frame_id = generation
            # Treated as a frame without text
            logger.warning(f"Text recognition failed on frame {e.frame_id}: {e}")
            observations = []

        ranked = rank_observations(observations, self._config)

        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding results of stale frame {generation}")
                return None
            self._regions = ranked

        return ranked

    def clear_detections(self) -> None:
        with self._lock:
            self._regions = []
