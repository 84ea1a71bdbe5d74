from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .classes import class_name


@dataclass(frozen=True)
class BBox:
    """
    Axis-aligned box in original image pixel coordinates.
    """

    x: int
    y: int
    width: int
    height: int

    def as_xyxy(self) -> Tuple[int, int, int, int]:
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class Detection:
    """
    Filtered detection in original image coordinates.

    The class id is validated against the class table on construction, so a
    Detection always has a resolvable `class_name`.
    """

    confidence: float
    bbox: BBox
    class_id: int

    def __post_init__(self) -> None:
        class_name(self.class_id)

    @property
    def class_name(self) -> str:
        return class_name(self.class_id)

    def as_xyxy(self) -> Tuple[int, int, int, int]:
        return self.bbox.as_xyxy()
