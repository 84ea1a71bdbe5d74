from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

DEFAULT_OUTPUT_PATH = "result.jpg"


@dataclass(frozen=True)
class DetectConfig:
    conf_threshold: float = 0.5
    input_size: Tuple[int, int] = (640, 640)
    swap_rb: bool = True
    output_path: str = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        if not 0.0 <= self.conf_threshold <= 1.0:
            raise ValueError("conf_threshold must be in [0, 1]")
        if len(self.input_size) != 2 or any(int(v) < 32 for v in self.input_size):
            raise ValueError("input_size must be [width, height] with both >= 32")


def _require_number(payload: Dict[str, Any], key: str) -> float:
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    return float(value)


def _require_size(payload: Dict[str, Any], key: str) -> Tuple[int, int]:
    value = payload[key]
    if (
        not isinstance(value, list)
        or len(value) != 2
        or any(isinstance(v, bool) or not isinstance(v, int) for v in value)
    ):
        raise ValueError(f"{key} must be a [width, height] pair of integers")
    return int(value[0]), int(value[1])


def load_detect_config(path: Path) -> Dict[str, Any]:
    """
    Read detection settings from a JSON file.

    Returns only the keys present in the file so callers can layer them between
    defaults and CLI flags. The output path is fixed and cannot be set here.
    """

    if not path.exists():
        raise FileNotFoundError(f"Detect config not found: {path}")
    if not path.is_file():
        raise ValueError(f"Detect config is not a file: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Could not read detect config: {path} ({exc})") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid detect config JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Detect config must be a JSON object")

    allowed = {"conf_threshold", "input_size", "swap_rb"}
    unknown = sorted(set(payload.keys()) - allowed)
    if unknown:
        raise ValueError(f"Unknown detect config keys: {unknown}")

    values: Dict[str, Any] = {}
    if "conf_threshold" in payload:
        values["conf_threshold"] = _require_number(payload, "conf_threshold")
    if "input_size" in payload:
        values["input_size"] = _require_size(payload, "input_size")
    if "swap_rb" in payload:
        if not isinstance(payload["swap_rb"], bool):
            raise ValueError("swap_rb must be a boolean")
        values["swap_rb"] = payload["swap_rb"]
    return values
