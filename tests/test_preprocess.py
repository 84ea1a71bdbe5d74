import unittest

import numpy as np

from detect_kit.errors import PreprocessError
from detect_kit.preprocess import PreprocessConfig, preprocess


def _solid(h: int, w: int, bgr) -> np.ndarray:
    img = np.empty((h, w, 3), dtype=np.uint8)
    img[:, :] = bgr
    return img


class TestPreprocess(unittest.TestCase):
    def test_solid_color_planes_rgb_order(self) -> None:
        r, g, b = 200, 100, 30
        img = _solid(72, 128, (b, g, r))
        prep = preprocess(img, PreprocessConfig(input_size=(64, 48)))

        self.assertEqual(prep.tensor.dtype, np.float32)
        self.assertEqual(prep.tensor.shape, (3 * 48 * 64,))
        planes = prep.tensor.reshape(3, 48, 64)
        for plane, value in zip(planes, (r, g, b)):
            self.assertTrue(np.allclose(plane, value / 255.0, atol=1e-6))

    def test_solid_color_planes_bgr_order(self) -> None:
        r, g, b = 10, 128, 255
        img = _solid(20, 30, (b, g, r))
        prep = preprocess(img, PreprocessConfig(input_size=(32, 32), swap_rb=False))
        planes = prep.tensor.reshape(3, 32, 32)
        for plane, value in zip(planes, (b, g, r)):
            self.assertTrue(np.allclose(plane, value / 255.0, atol=1e-6))

    def test_layout_is_planar_not_interleaved(self) -> None:
        img = np.zeros((2, 2, 3), dtype=np.uint8)
        img[:, :, 0] = 255  # blue
        prep = preprocess(img, PreprocessConfig(input_size=(2, 2), swap_rb=False))
        self.assertTrue(np.allclose(prep.tensor, [1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0]))

    def test_sizes_reported(self) -> None:
        img = _solid(720, 1280, (0, 0, 0))
        prep = preprocess(img, PreprocessConfig(input_size=(640, 640)))
        self.assertEqual(prep.orig_size, (1280, 720))
        self.assertEqual(prep.input_size, (640, 640))
        self.assertEqual(prep.input_shape, (1, 3, 640, 640))

    def test_values_normalized(self) -> None:
        rng = np.random.default_rng(1)
        img = rng.integers(0, 256, size=(50, 40, 3), dtype=np.uint8)
        prep = preprocess(img, PreprocessConfig(input_size=(40, 50)))
        self.assertGreaterEqual(float(prep.tensor.min()), 0.0)
        self.assertLessEqual(float(prep.tensor.max()), 1.0)
        # Same size: no resampling, so planes are exactly the source channels.
        planes = prep.tensor.reshape(3, 50, 40)
        self.assertTrue(np.allclose(planes[0], img[:, :, 2] / 255.0, atol=1e-6))

    def test_rejects_non_color_image(self) -> None:
        with self.assertRaises(PreprocessError):
            preprocess(np.zeros((10, 10), dtype=np.uint8))
        with self.assertRaises(PreprocessError):
            preprocess(np.zeros((10, 10, 4), dtype=np.uint8))

    def test_rejects_bad_input_size(self) -> None:
        with self.assertRaises(PreprocessError):
            preprocess(_solid(10, 10, (0, 0, 0)), PreprocessConfig(input_size=(0, 640)))


if __name__ == "__main__":
    unittest.main()
