"""Geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box in normalized frame coordinates.

    Coordinates are fractions of the frame in [0, 1] with the origin at the
    bottom-left corner, which is how text recognition engines report them.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise ValueError(
                f"Invalid bounding box: ({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"
            )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_normalized(self) -> bool:
        """Check the box lies inside the unit square."""
        return (
            0.0 <= self.min_x <= self.max_x <= 1.0 and
            0.0 <= self.min_y <= self.max_y <= 1.0
        )

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float) -> BoundingBox:
        """Create box from origin and size."""
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_polygon(
        cls,
        points: Sequence[Sequence[float]],
        frame_width: int,
        frame_height: int
    ) -> BoundingBox:
        """Create a normalized box from pixel polygon points.

        OCR backends usually report quadrilaterals in pixel coordinates with
        the origin at the top-left; the y axis is flipped here.

        Args:
            points: Polygon vertices as (x, y) pairs, any shape reducible to (N, 2)
            frame_width: Frame width in pixels
            frame_height: Frame height in pixels

        Returns:
            Bounding box of the polygon, clipped to the unit square
        """
        if frame_width <= 0 or frame_height <= 0:
            raise ValueError("Frame dimensions must be positive")

        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if pts.size == 0:
            raise ValueError("Polygon has no points")

        xs = np.clip(pts[:, 0] / frame_width, 0.0, 1.0)
        ys = np.clip(1.0 - pts[:, 1] / frame_height, 0.0, 1.0)
        return cls(
            float(xs.min()),
            float(ys.min()),
            float(xs.max()),
            float(ys.max())
        )
