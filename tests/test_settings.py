import json
import os
import tempfile
import unittest
from unittest import mock

from desktop.settings import (APP_NAME, DEFAULT_COMPUTER_DELAY_MS, SETTINGS_FILE,
                              GameSettings, settings_path)


class TestGameSettings(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "settings.json")

    def write(self, data):
        with open(self.path, "w") as f:
            f.write(data if isinstance(data, str) else json.dumps(data))

    def load(self):
        with mock.patch("builtins.print") as fake_print:
            settings = GameSettings(self.path)
        return settings, fake_print

    def test_default_without_file(self):
        settings, fake_print = self.load()
        self.assertEqual(settings.computer_delay_ms, DEFAULT_COMPUTER_DELAY_MS)
        fake_print.assert_not_called()

    def test_reads_delay(self):
        self.write({"computer_delay_ms": 1200})
        settings, _ = self.load()
        self.assertEqual(settings.computer_delay_ms, 1200)

    def test_float_delay_is_truncated(self):
        self.write({"computer_delay_ms": 250.7})
        settings, _ = self.load()
        self.assertEqual(settings.computer_delay_ms, 250)

    def test_zero_delay_is_allowed(self):
        self.write({"computer_delay_ms": 0})
        settings, _ = self.load()
        self.assertEqual(settings.computer_delay_ms, 0)

    def test_wrong_types_fall_back(self):
        for bad in ("x", "500", None, True, [500], {"ms": 500}, -1, 10 ** 6):
            with self.subTest(value=bad):
                self.write({"computer_delay_ms": bad})
                settings, fake_print = self.load()
                self.assertEqual(settings.computer_delay_ms, DEFAULT_COMPUTER_DELAY_MS)
                fake_print.assert_called_once()

    def test_broken_json_falls_back(self):
        self.write("{not json")
        settings, fake_print = self.load()
        self.assertEqual(settings.computer_delay_ms, DEFAULT_COMPUTER_DELAY_MS)
        fake_print.assert_called_once()

    def test_non_object_falls_back(self):
        self.write([1, 2, 3])
        settings, fake_print = self.load()
        self.assertEqual(settings.computer_delay_ms, DEFAULT_COMPUTER_DELAY_MS)
        fake_print.assert_called_once()

    def test_unknown_keys_are_ignored(self):
        self.write({"window_opacity": "x", "computer_delay_ms": 300})
        settings, fake_print = self.load()
        self.assertEqual(settings.computer_delay_ms, 300)
        fake_print.assert_not_called()

    def test_default_path(self):
        path = settings_path()
        self.assertTrue(path.endswith(os.path.join(APP_NAME, SETTINGS_FILE)))


if __name__ == "__main__":
    unittest.main()
