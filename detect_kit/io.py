from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np

from .errors import LoadError, WriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_image(path: PathLike) -> np.ndarray:
    """
    Decode an image file into an OpenCV BGR array of shape (H, W, 3), uint8.
    """

    p = Path(path)
    if not p.exists():
        raise LoadError(f"Image not found: {p}")
    if not p.is_file():
        raise LoadError(f"Image path is not a file: {p}")

    image = cv2.imread(str(p), cv2.IMREAD_COLOR)
    if image is None:
        raise LoadError(f"Could not read the image: {p}")

    h, w = image.shape[:2]
    logger.info("Loaded image %s (%dx%d)", p, w, h)
    return image


def image_size(image: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of an OpenCV image."""
    h, w = image.shape[:2]
    return int(w), int(h)


def write_image(path: PathLike, image: np.ndarray) -> Path:
    p = Path(path)
    try:
        ok = cv2.imwrite(str(p), image)
    except cv2.error as e:
        raise WriteError(f"Failed to write output image: {p} ({e})") from e
    if not ok:
        raise WriteError(f"Failed to write output image: {p}")
    logger.info("Wrote %s", p)
    return p
