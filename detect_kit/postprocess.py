from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .classes import NUM_CLASSES
from .errors import ClassIndexError, InferenceError
from .types import BBox, Detection

logger = logging.getLogger(__name__)

# [left, top, right, bottom, confidence, class_id]
RECORD_STRIDE = 6

# OpenCV drawing takes int32 pixel coordinates.
_INT32_MAX = np.iinfo(np.int32).max


@dataclass(frozen=True)
class PostConfig:
    """
    Post-processing configuration for decoded (N, 6) detection outputs.
    """

    conf_threshold: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.conf_threshold) <= 1.0:
            raise ValueError(f"conf_threshold must be in [0, 1], got {self.conf_threshold}")


class DetectionPostprocessor:
    """
    Turns a flat decoded output buffer into Detections in original image pixels.

    Supported layout (per image): N contiguous records of
    [x1, y1, x2, y2, score, class_id] in model input pixels, N = len / 6.

    Boxes are mapped back with plain per-axis scaling (orig / model). This is only
    correct when the image was resized without letterbox padding. No NMS is run,
    so overlapping boxes for the same object are all returned, in buffer order.
    """

    def __init__(self, cfg: PostConfig = PostConfig()):
        self.cfg = cfg

    def process(
        self,
        raw: np.ndarray,
        input_size: Tuple[int, int],
        orig_size: Tuple[int, int],
    ) -> List[Detection]:
        """
        Args:
            raw: flat (or (N, 6)) model output for a single image
            input_size: (width, height) of the model input
            orig_size: (width, height) of the original image
        """

        records = self._partition(raw)
        if records.shape[0] == 0:
            return []

        keep = records[:, 4] >= self.cfg.conf_threshold
        records = records[keep]
        logger.debug("%d/%d records pass conf >= %s", records.shape[0], keep.shape[0], self.cfg.conf_threshold)
        if records.shape[0] == 0:
            return []

        boxes = self._scale_boxes(records[:, 0:4], input_size, orig_size)
        class_ids = self._class_ids(records[:, 5])

        return [
            Detection(
                confidence=float(score),
                bbox=BBox(x=int(x), y=int(y), width=int(bw), height=int(bh)),
                class_id=int(cls_id),
            )
            for (x, y, bw, bh), score, cls_id in zip(boxes, records[:, 4], class_ids)
        ]

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _partition(self, raw: np.ndarray) -> np.ndarray:
        p = np.asarray(raw, dtype=np.float32).reshape(-1)
        if p.size % RECORD_STRIDE != 0:
            raise InferenceError(
                f"Output length {p.size} is not a multiple of {RECORD_STRIDE}; "
                "model output does not match the [x1, y1, x2, y2, score, class_id] layout."
            )
        return p.reshape(-1, RECORD_STRIDE)

    def _scale_boxes(
        self,
        boxes_xyxy: np.ndarray,
        input_size: Tuple[int, int],
        orig_size: Tuple[int, int],
    ) -> np.ndarray:
        """
        Map xyxy boxes from model input space to integer xywh in the original image.
        Truncates toward zero; no clipping to the image bounds.
        """

        model_w, model_h = input_size
        orig_w, orig_h = orig_size
        if model_w <= 0 or model_h <= 0:
            raise InferenceError(f"Model input size must be positive, got {input_size}")

        b = boxes_xyxy.astype(np.float64)
        if not np.all(np.isfinite(b)):
            raise InferenceError(f"Non-finite box coordinate in model output: {b.tolist()}")
        sx = orig_w / model_w
        sy = orig_h / model_h

        out = np.empty_like(b)
        out[:, 0] = b[:, 0] * sx
        out[:, 1] = b[:, 1] * sy
        out[:, 2] = (b[:, 2] - b[:, 0]) * sx
        out[:, 3] = (b[:, 3] - b[:, 1]) * sy
        out = np.trunc(out)
        corners = out[:, 0:2] + out[:, 2:4]
        if np.any(np.abs(out) > _INT32_MAX) or np.any(np.abs(corners) > _INT32_MAX):
            raise InferenceError(f"Box coordinate out of drawable range in model output: {b.tolist()}")
        return out.astype(np.int64)

    def _class_ids(self, raw_ids: np.ndarray) -> np.ndarray:
        if not np.all(np.isfinite(raw_ids)):
            raise ClassIndexError(f"Non-finite class id in model output: {raw_ids.tolist()}")
        ids = np.trunc(raw_ids.astype(np.float64))
        bad = (ids < 0) | (ids >= NUM_CLASSES)
        if np.any(bad):
            raise ClassIndexError(
                f"Class id {float(raw_ids[bad][0]):g} is outside the class table (0..{NUM_CLASSES - 1})."
            )
        return ids.astype(np.int64)
