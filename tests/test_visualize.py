import unittest

import numpy as np

from detect_kit.types import BBox, Detection
from detect_kit.visualize import BOX_COLOR, draw_detections, format_label


class TestDrawDetections(unittest.TestCase):
    def test_draws_in_place(self) -> None:
        img = np.zeros((200, 300, 3), dtype=np.uint8)
        det = Detection(confidence=0.92, bbox=BBox(50, 80, 100, 60), class_id=0)
        out = draw_detections(img, [det])

        self.assertIs(out, img)
        # Box outline on the bottom edge, away from the label.
        self.assertEqual(tuple(img[140, 100]), BOX_COLOR)
        self.assertEqual(tuple(img[120, 50]), BOX_COLOR)
        # Label background is white just above the box top-left corner.
        label_region = img[60:80, 50:150]
        self.assertTrue(np.any(np.all(label_region == 255, axis=-1)))
        # Box interior untouched.
        self.assertEqual(tuple(img[110, 100]), (0, 0, 0))

    def test_no_detections_leaves_image_unchanged(self) -> None:
        img = np.full((20, 20, 3), 9, dtype=np.uint8)
        draw_detections(img, [])
        self.assertTrue(np.all(img == 9))

    def test_label_text(self) -> None:
        det = Detection(confidence=0.5, bbox=BBox(0, 0, 1, 1), class_id=2)
        self.assertEqual(format_label(det), "car: 0.500000")

    def test_box_at_top_edge_does_not_raise(self) -> None:
        img = np.zeros((50, 50, 3), dtype=np.uint8)
        det = Detection(confidence=0.9, bbox=BBox(0, 0, 200, 200), class_id=5)
        draw_detections(img, [det])

    def test_rejects_grayscale(self) -> None:
        with self.assertRaises(ValueError):
            draw_detections(np.zeros((10, 10), dtype=np.uint8), [])


if __name__ == "__main__":
    unittest.main()
