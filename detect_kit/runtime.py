from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

import numpy as np

from .config import DetectConfig
from .postprocess import DetectionPostprocessor, PostConfig
from .preprocess import PreprocessConfig, PreprocessResult, preprocess
from .types import Detection

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DetectionPipeline:
    """
    Single-image pipeline: preprocess (plain resize) -> inference -> postprocess.

    The pipeline expects BGR images (OpenCV-style) as `np.ndarray` and returns
    a list of `Detection` in original image coordinates, in model output order.
    """

    def __init__(
        self,
        infer_fn: Callable[[PreprocessResult], np.ndarray],
        *,
        backend: Optional[object] = None,
        pre_cfg: PreprocessConfig = PreprocessConfig(),
        post_cfg: PostConfig = PostConfig(),
    ):
        self._infer_fn = infer_fn
        self.backend = backend
        self.pre_cfg = pre_cfg
        self.post = DetectionPostprocessor(post_cfg)

    def preprocess(self, image_bgr: np.ndarray) -> PreprocessResult:
        return preprocess(image_bgr, self.pre_cfg)

    def __call__(self, image_bgr: np.ndarray) -> List[Detection]:
        prep = self.preprocess(image_bgr)
        raw = self._infer_fn(prep)
        detections = self.post.process(raw, input_size=prep.input_size, orig_size=prep.orig_size)
        logger.info("%d detection(s) at conf >= %s", len(detections), self.post.cfg.conf_threshold)
        return detections


def load_pipeline(model_path: PathLike, cfg: DetectConfig = DetectConfig()) -> DetectionPipeline:
    """
    Load an ONNX model and wrap it in a `DetectionPipeline`.

    A static spatial input shape declared by the model takes precedence over
    `cfg.input_size`; dynamic models use `cfg.input_size`.
    """

    from .backends.onnxruntime_backend import OnnxRuntimeBackend

    backend = OnnxRuntimeBackend(model_path)
    logger.info("ONNX Runtime session providers: %s", list(backend.providers_in_use))

    input_size = cfg.input_size
    if backend.input_size is not None:
        if backend.input_size != tuple(cfg.input_size):
            logger.info("Using model input size %s instead of configured %s", backend.input_size, cfg.input_size)
        input_size = backend.input_size

    return DetectionPipeline(
        backend.infer,
        backend=backend,
        pre_cfg=PreprocessConfig(input_size=input_size, swap_rb=cfg.swap_rb),
        post_cfg=PostConfig(conf_threshold=cfg.conf_threshold),
    )
