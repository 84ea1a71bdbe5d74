from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np

from .errors import PreprocessError
from .io import image_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreprocessConfig:
    """
    Preprocessing policy for the model input.

    - input_size: (width, height) of the model input plane
    - swap_rb: reorder OpenCV's BGR decode to RGB before splitting planes.
      YOLO exports are trained on RGB, so this is on by default; turn it off to
      feed planes in BGR order.
    - interpolation: OpenCV resize flag. Bilinear matches `cv2.resize` defaults
      and the resize used when the detection models are exported.
    """

    input_size: Tuple[int, int] = (640, 640)
    swap_rb: bool = True
    interpolation: int = cv2.INTER_LINEAR


@dataclass(frozen=True)
class PreprocessResult:
    tensor: np.ndarray
    input_size: Tuple[int, int]
    orig_size: Tuple[int, int]

    @property
    def input_shape(self) -> Tuple[int, int, int, int]:
        w, h = self.input_size
        return 1, 3, h, w


def preprocess(image_bgr: np.ndarray, cfg: PreprocessConfig = PreprocessConfig()) -> PreprocessResult:
    """
    Resize -> [0, 1] float32 -> planar (channel-major) flat tensor of length 3*H*W.

    Plain resize, no letterbox: the aspect ratio is not preserved, and the
    postprocessor undoes it with independent per-axis scaling.
    """

    if image_bgr is None or not hasattr(image_bgr, "shape"):
        raise PreprocessError("image must be a NumPy array (BGR).")
    if image_bgr.ndim != 3 or image_bgr.shape[2] != 3:
        raise PreprocessError(f"Expected image shape (H, W, 3), got {getattr(image_bgr, 'shape', None)}")

    w, h = (int(v) for v in cfg.input_size)
    if w <= 0 or h <= 0:
        raise PreprocessError(f"Input size must be positive, got {cfg.input_size}")

    orig_w, orig_h = image_size(image_bgr)
    resized = cv2.resize(image_bgr, (w, h), interpolation=cfg.interpolation)

    if cfg.swap_rb:
        resized = resized[:, :, ::-1]

    blob = resized.astype(np.float32) / 255.0
    # HWC -> CHW, then flatten plane by plane
    tensor = np.ascontiguousarray(np.transpose(blob, (2, 0, 1))).reshape(-1)

    logger.debug("Preprocessed %dx%d -> %dx%d (swap_rb=%s)", orig_w, orig_h, w, h, cfg.swap_rb)
    return PreprocessResult(tensor=tensor, input_size=(w, h), orig_size=(orig_w, orig_h))
