from __future__ import annotations

from typing import Iterable, Tuple

import cv2
import numpy as np

from .types import Detection

BOX_COLOR: Tuple[int, int, int] = (0, 255, 0)
LABEL_BG_COLOR: Tuple[int, int, int] = (255, 255, 255)
LABEL_TEXT_COLOR: Tuple[int, int, int] = (0, 0, 0)


def format_label(det: Detection) -> str:
    return f"{det.class_name}: {det.confidence:.6f}"


def draw_detections(
    image_bgr: np.ndarray,
    detections: Iterable[Detection],
    *,
    box_thickness: int = 2,
    font_scale: float = 0.5,
    font_thickness: int = 1,
) -> np.ndarray:
    """
    Draw bounding boxes + labels onto an OpenCV BGR image, in place.

    Each label sits on a white box whose bottom-left is the box's top-left corner.
    Labels are not moved inside the frame, so boxes touching the top edge get a
    partly clipped label. Returns the same array for convenience.
    """

    if image_bgr is None or not hasattr(image_bgr, "shape"):
        raise TypeError("image_bgr must be a NumPy array (BGR).")
    if image_bgr.ndim != 3 or image_bgr.shape[2] != 3:
        raise ValueError(f"Expected image shape (H, W, 3), got {getattr(image_bgr, 'shape', None)}")

    for det in detections:
        x1, y1, x2, y2 = det.as_xyxy()
        cv2.rectangle(image_bgr, (x1, y1), (x2, y2), BOX_COLOR, thickness=box_thickness)

        label = format_label(det)
        (tw, th), baseline = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, font_scale, font_thickness)
        cv2.rectangle(image_bgr, (x1, y1 - th), (x1 + tw, y1 + baseline), LABEL_BG_COLOR, thickness=cv2.FILLED)
        cv2.putText(
            image_bgr,
            label,
            (x1, y1),
            cv2.FONT_HERSHEY_SIMPLEX,
            font_scale,
            LABEL_TEXT_COLOR,
            thickness=font_thickness,
        )

    return image_bgr
