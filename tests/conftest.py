import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRandom:
    """Random source that replays a fixed list of draws and records every request."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        if not self._values:
            raise AssertionError(f"Unexpected extra draw randint({a}, {b})")
        value = self._values.pop(0)
        assert a <= value <= b, f"Scripted value {value} outside [{a}, {b}]"
        self.calls.append((a, b))
        return value

    @property
    def remaining(self):
        return len(self._values)


@pytest.fixture
def scripted():
    return ScriptedRandom
