"""
Command-line entry point: detect objects in one image and write `result.jpg`.

    detect-image <model_path> <image_path> [--conf 0.5] [--bgr] [--config cfg.json] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from .config import DetectConfig, load_detect_config
from .errors import ArgumentError, DetectError
from .io import load_image, write_image
from .runtime import load_pipeline
from .types import Detection
from .visualize import draw_detections

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits with status 2; every failure here must exit with 1.
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="detect-image",
        description="Run an ONNX detection model on one image and save the annotated result to result.jpg.",
    )
    parser.add_argument("model_path", help="Path to an ONNX model with one [1,3,H,W] input and one [N,6] output.")
    parser.add_argument("image_path", help="Path to the input image.")
    parser.add_argument("--conf", type=float, default=None, help="Confidence threshold in [0, 1] (default 0.5).")
    parser.add_argument(
        "--bgr",
        action="store_true",
        help="Feed channel planes in OpenCV's BGR order instead of RGB.",
    )
    parser.add_argument("--config", default=None, help="Optional JSON file with conf_threshold/input_size/swap_rb.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG logs.")
    return parser


def configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def resolve_config(args: argparse.Namespace) -> DetectConfig:
    """Defaults < --config file < explicit flags."""
    values = {}
    if args.config:
        try:
            values.update(load_detect_config(Path(args.config)))
        except (FileNotFoundError, ValueError) as exc:
            raise ArgumentError(str(exc)) from exc
    if args.conf is not None:
        values["conf_threshold"] = args.conf
    if args.bgr:
        values["swap_rb"] = False
    try:
        return replace(DetectConfig(), **values)
    except ValueError as exc:
        raise ArgumentError(str(exc)) from exc


def format_detection(det: Detection) -> str:
    b = det.bbox
    return (
        f"Class ID: {det.class_id} Confidence: {det.confidence:g} "
        f"BBox: [{b.x}, {b.y}, {b.width}, {b.height}] Class Name: {det.class_name}"
    )


def run(args: argparse.Namespace) -> List[Detection]:
    cfg = resolve_config(args)
    pipeline = load_pipeline(args.model_path, cfg)
    image = load_image(args.image_path)

    detections = pipeline(image)
    for det in detections:
        print(format_detection(det))

    draw_detections(image, detections)
    write_image(cfg.output_path, image)
    return detections


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(args.verbose)
    try:
        run(args)
    except DetectError as exc:
        logger.debug("Detection run failed", exc_info=True)
        if isinstance(exc, ArgumentError):
            parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
