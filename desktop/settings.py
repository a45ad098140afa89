import json
import os
import sys

APP_NAME = "robot-tictactoe"
SETTINGS_FILE = "settings.json"

DEFAULT_COMPUTER_DELAY_MS = 500
MAX_COMPUTER_DELAY_MS = 10000


def settings_path():
    """settings.json in the per-user config folder"""
    if sys.platform == "win32":
        base_path = os.getenv('APPDATA') or os.path.expanduser("~")
    elif sys.platform == "darwin":
        base_path = os.path.expanduser("~/Library/Application Support")
    else:
        base_path = os.path.expanduser("~/.config")
    return os.path.join(base_path, APP_NAME, SETTINGS_FILE)


class GameSettings:
    """Read-only view of the settings file. Anything missing or malformed falls back to defaults."""

    def __init__(self, path=None):
        self.path = path or settings_path()
        self.computer_delay_ms = DEFAULT_COMPUTER_DELAY_MS
        self.load()

    def load(self):
        if not os.path.exists(self.path):
            return

        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Could not read {self.path}, using defaults: {e}")
            return

        if not isinstance(data, dict):
            print(f"Ignoring {self.path}: expected a JSON object")
            return

        if "computer_delay_ms" in data:
            self.computer_delay_ms = self._delay(data["computer_delay_ms"])

    def _delay(self, value):
        # bool is an int subclass, "true" is not a delay
        if isinstance(value, bool) or not isinstance(value, (int, float)) \
                or not 0 <= value <= MAX_COMPUTER_DELAY_MS:
            print(f"Ignoring computer_delay_ms={value!r}, "
                  f"expected 0..{MAX_COMPUTER_DELAY_MS} ms")
            return DEFAULT_COMPUTER_DELAY_MS
        return int(value)
