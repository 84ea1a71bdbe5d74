import json
import tempfile
import unittest
from pathlib import Path

from detect_kit.config import DetectConfig, load_detect_config


class TestDetectConfig(unittest.TestCase):
    def _write(self, payload) -> Path:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        path = Path(tmpdir.name) / "detect.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_defaults(self) -> None:
        cfg = DetectConfig()
        self.assertEqual(cfg.conf_threshold, 0.5)
        self.assertEqual(cfg.input_size, (640, 640))
        self.assertTrue(cfg.swap_rb)
        self.assertEqual(cfg.output_path, "result.jpg")

    def test_load_ok(self) -> None:
        values = load_detect_config(self._write({"conf_threshold": 0.3, "input_size": [320, 256], "swap_rb": False}))
        self.assertEqual(values, {"conf_threshold": 0.3, "input_size": (320, 256), "swap_rb": False})

    def test_partial_file(self) -> None:
        self.assertEqual(load_detect_config(self._write({"conf_threshold": 1})), {"conf_threshold": 1.0})

    def test_unknown_keys_rejected(self) -> None:
        with self.assertRaises(ValueError):
            load_detect_config(self._write({"output_path": "elsewhere.jpg"}))

    def test_bad_types_rejected(self) -> None:
        for payload in ({"conf_threshold": "high"}, {"input_size": 640}, {"swap_rb": 1}, [1, 2]):
            with self.subTest(payload=payload):
                with self.assertRaises(ValueError):
                    load_detect_config(self._write(payload))

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_detect_config(Path(tempfile.gettempdir()) / "no-such-detect-config.json")

    def test_directory_rejected(self) -> None:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        with self.assertRaises(ValueError):
            load_detect_config(Path(tmpdir.name))

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DetectConfig(conf_threshold=2.0)
        with self.assertRaises(ValueError):
            DetectConfig(input_size=(16, 640))


if __name__ == "__main__":
    unittest.main()
