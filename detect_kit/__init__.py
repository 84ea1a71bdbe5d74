"""
Single-image object detection with ONNX Runtime and OpenCV.

Pre/post-processing only needs NumPy and OpenCV; the ONNX Runtime backend is
imported lazily by `load_pipeline`.
"""

from .classes import COCO_CLASS_NAMES, NUM_CLASSES, class_name
from .config import DetectConfig, load_detect_config
from .errors import (
    ArgumentError,
    ClassIndexError,
    DetectError,
    InferenceError,
    LoadError,
    ModelLoadError,
    PreprocessError,
    WriteError,
)
from .io import image_size, load_image, write_image
from .postprocess import DetectionPostprocessor, PostConfig
from .preprocess import PreprocessConfig, PreprocessResult, preprocess
from .runtime import DetectionPipeline, load_pipeline
from .types import BBox, Detection
from .visualize import draw_detections

__all__ = [
    "COCO_CLASS_NAMES",
    "NUM_CLASSES",
    "class_name",
    "DetectConfig",
    "load_detect_config",
    "ArgumentError",
    "ClassIndexError",
    "DetectError",
    "InferenceError",
    "LoadError",
    "ModelLoadError",
    "PreprocessError",
    "WriteError",
    "image_size",
    "load_image",
    "write_image",
    "DetectionPostprocessor",
    "PostConfig",
    "PreprocessConfig",
    "PreprocessResult",
    "preprocess",
    "DetectionPipeline",
    "load_pipeline",
    "BBox",
    "Detection",
    "draw_detections",
]
