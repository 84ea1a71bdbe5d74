from __future__ import annotations

from typing import Tuple

from .errors import ClassIndexError

# COCO order, as emitted by COCO-trained YOLO exports.
COCO_CLASS_NAMES: Tuple[str, ...] = (
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck", "boat", "traffic light",
    "fire hydrant", "stop sign", "parking meter", "bench", "bird", "cat", "dog", "horse", "sheep", "cow",
    "elephant", "bear", "zebra", "giraffe", "backpack", "umbrella", "handbag", "tie", "suitcase", "frisbee",
    "skis", "snowboard", "sports ball", "kite", "baseball bat", "baseball glove", "skateboard", "surfboard",
    "tennis racket", "bottle", "wine glass", "cup", "fork", "knife", "spoon", "bowl", "banana", "apple",
    "sandwich", "orange", "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair", "couch",
    "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse", "remote", "keyboard",
    "cell phone", "microwave", "oven", "toaster", "sink", "refrigerator", "book", "clock", "vase",
    "scissors", "teddy bear", "hair drier", "toothbrush",
)

NUM_CLASSES = len(COCO_CLASS_NAMES)


def class_name(class_id: int) -> str:
    """
    Resolve a class id to its COCO name.

    Raises ClassIndexError for ids outside [0, NUM_CLASSES); negative ids are not
    allowed to wrap around the way plain tuple indexing would.
    """

    if not 0 <= class_id < NUM_CLASSES:
        raise ClassIndexError(f"Class id {class_id} is outside the class table (0..{NUM_CLASSES - 1}).")
    return COCO_CLASS_NAMES[class_id]
